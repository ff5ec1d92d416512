"""Python client for the finance tracker API with an on-disk session cache."""
from app.client.session import ClientSession, SessionRequired, session
from app.client.api import FinanceApiClient, ApiError

__all__ = [
    "ClientSession",
    "SessionRequired",
    "session",
    "FinanceApiClient",
    "ApiError",
]
