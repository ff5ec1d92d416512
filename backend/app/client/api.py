"""
HTTP client for the finance tracker API.
"""
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union
import httpx
from app.core.config import settings
from app.client.session import ClientSession, session as default_session

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class FinanceApiClient:
    """
    Thin wrapper over the REST API.

    Uses the process-wide session cache unless one is passed in; ``http`` can
    be any ``httpx.Client`` (a FastAPI ``TestClient`` works too).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[ClientSession] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0
    ):
        self.base_url = (base_url if base_url is not None else settings.CLIENT_API_URL).rstrip("/")
        self.session = session or default_session
        self.http = http or httpx.Client(timeout=timeout)

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"
        return headers

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.http.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling {method} {path}: {e}")
            raise
        if response.status_code >= 400:
            try:
                message = response.json().get("error", response.text)
            except ValueError:
                message = response.text
            logger.error(f"{method} {path} failed: {response.status_code} - {message}")
            raise ApiError(response.status_code, message)
        return response.json()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in and cache the token and profile."""
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.session.save(data["token"], data["user"])
        logger.info("Login successful")
        return data

    def logout(self):
        self.session.logout()

    def list_transactions(self, type: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {}
        if type:
            params["type"] = type
        if search:
            params["search"] = search
        return self._request("GET", "/transactions", params=params)

    def get_summary(self, range: str = "all") -> Dict[str, Any]:
        return self._request("GET", "/transactions/summary", params={"range": range})

    def add_transaction(self, name: str, amount: Union[float, str], type: str,
                        date: Union[date, datetime, str]) -> Dict[str, Any]:
        if not isinstance(date, str):
            date = date.isoformat()
        payload = {"name": name, "amount": amount, "type": type, "date": date}
        return self._request("POST", "/transactions", json=payload)

    def delete_transaction(self, transaction_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/transactions/{transaction_id}")
