"""
Authentication service: credential checks and session token issue/validation.
"""
import logging
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from app.core.exceptions import InvalidCredentials, InvalidToken, Unauthenticated, ValidationError, InternalError
from app.core.security import (
    verify_password, get_password_hash, create_access_token,
    decode_access_token, dummy_password_hash
)
from app.models.user import User

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def authenticate(email: str, password: str, db: Session) -> Tuple[str, User]:
    """
    Verify email/password and issue a session token.

    Raises InvalidCredentials for an unknown email and for a wrong password
    alike, so callers cannot tell which one failed.
    """
    logger.info(f"Login attempt for: {email}")
    try:
        user = db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as e:
        logger.error(f"User lookup failed for {email}: {e}", exc_info=True)
        raise InternalError("Authentication failed")
    
    if user is None:
        verify_password(password, dummy_password_hash())
        logger.info(f"Invalid credentials for: {email}")
        raise InvalidCredentials()
    if not verify_password(password, user.hashed_password):
        logger.info(f"Invalid credentials for: {email}")
        raise InvalidCredentials()
    
    token = create_access_token(user.id)
    logger.info(f"Login successful for: {email}")
    return token, user


def register_user(email: str, password: str, name: Optional[str], db: Session) -> User:
    """Create a user with a hashed password."""
    if not password:
        raise ValidationError("Password is required")
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("Email already exists")
    
    user = User(email=email, hashed_password=get_password_hash(password), name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Email already exists")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create user {email}: {e}", exc_info=True)
        raise InternalError("Failed to create user")
    db.refresh(user)
    logger.info(f"Registered user {user.id} ({email})")
    return user


def validate_authorization(authorization: Optional[str]) -> int:
    """
    Validate a raw ``Authorization`` header value and return the user id
    asserted by the token signature.
    """
    if not authorization:
        raise Unauthenticated()
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != BEARER_SCHEME or not token.strip():
        raise Unauthenticated()
    return validate_token(token.strip())


def validate_token(token: str) -> int:
    """Verify signature and expiry; return the owning user id."""
    payload = decode_access_token(token)
    if payload is None:
        logger.warning("Rejected session token (bad signature, malformed or expired)")
        raise InvalidToken()
    return payload["user_id"]
