"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr
from typing import Optional


class UserCreate(BaseModel):
    """Schema for user registration."""
    email: EmailStr
    password: str
    name: Optional[str] = None


class UserResponse(BaseModel):
    """Sanitized user projection. Never carries the password hash."""
    id: int
    email: str
    name: Optional[str] = None
    
    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for user login."""
    # Plain str: a malformed email is an unknown email, not a 400
    email: str
    password: str


class LoginResponse(BaseModel):
    """Schema for login response: session token plus user projection."""
    token: str
    user: UserResponse
