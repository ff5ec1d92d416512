"""
Client session cache: the issued token and user profile, persisted between runs.

One process-wide ``session`` instance is the single source of truth for the
client; readers query it instead of keeping their own copies.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from app.core.config import settings

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionRequired(Exception):
    """Raised when an operation needs a logged-in session and none exists."""


class ClientSession:
    """Token and user profile cached in a JSON file under fixed keys."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.CLIENT_SESSION_FILE).expanduser()
        self._data: Dict[str, Any] = {}
        self._loaded = False

    def init(self) -> "ClientSession":
        """Load the cached session if present; otherwise start empty."""
        self._data = {}
        if self.path.exists():
            try:
                stored = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.error(f"Error loading session from {self.path}: {e}")
                stored = {}
            if isinstance(stored, dict):
                self._data = {k: stored[k] for k in (TOKEN_KEY, USER_KEY) if k in stored}
        self._loaded = True
        return self

    def _ensure_loaded(self):
        if not self._loaded:
            self.init()

    @property
    def token(self) -> Optional[str]:
        self._ensure_loaded()
        return self._data.get(TOKEN_KEY)

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        self._ensure_loaded()
        return self._data.get(USER_KEY)

    @property
    def is_authenticated(self) -> bool:
        """A cached token gates access to everything past the login screen."""
        return bool(self.token)

    def require_user(self) -> Dict[str, Any]:
        """Return the cached profile or raise SessionRequired (redirect to login)."""
        if not self.is_authenticated or self.user is None:
            raise SessionRequired("Login required")
        return self.user

    def save(self, token: str, user: Dict[str, Any]):
        """Store a freshly issued token and profile."""
        self._data = {TOKEN_KEY: token, USER_KEY: user}
        self._loaded = True
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data), encoding="utf-8")

    def logout(self):
        """Clear both cached keys."""
        self._data = {}
        self._loaded = True
        if self.path.exists():
            self.path.unlink()


session = ClientSession()
