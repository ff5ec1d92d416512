"""
Security utilities for JWT session tokens and password hashing.
"""
from datetime import datetime, timedelta, timezone
import time
from functools import lru_cache
from typing import Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from app.core.config import settings


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash (constant-time compare)."""
    pre_hashed = _pre_hash_password(plain_password)
    try:
        return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password with a fresh salt.
    Pre-hashes with SHA256 first to support longer passwords.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """Hash compared against when the email is unknown, so both failure paths cost one bcrypt check."""
    return get_password_hash("not-a-real-password")


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None,
                        now: Optional[datetime] = None) -> str:
    """Create a signed session token asserting ``user_id``."""
    issued_at = now or datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)
    to_encode = {
        "sub": str(user_id),
        "user_id": user_id,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + expires_delta).timestamp()),
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify a JWT token. Returns None on bad signature, malformed payload or expiry."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if "exp" not in payload or not isinstance(payload.get("user_id"), int):
        return None
    # Valid strictly before expiry; jose still accepts the expiry second itself
    if payload["exp"] <= time.time():
        return None
    return payload
