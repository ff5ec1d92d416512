"""
Shared route dependencies.
"""
from typing import Optional
from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.core.exceptions import NotFound
from app.services.auth_service import validate_authorization


def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(default=None)
) -> int:
    """
    Validate the bearer token and return the user id it asserts.
    The id comes only from the verified signature; no store access happens here.
    """
    user_id = validate_authorization(authorization)
    request.state.user_id = user_id
    return user_id


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> User:
    """Load the authenticated user."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user
