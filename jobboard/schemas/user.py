"""
Pydantic schemas for registration, login and user profiles.

Request fields are optional at the schema level so that the auth service can
report every missing or invalid field in one response.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """Request schema for user login."""
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    user_id: int = Field(..., alias="userId")
    message: str = "User created successfully"


class LoginResponse(BaseModel):
    """Bearer token response. With the default scheme the token is the user id."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    user_id: int = Field(..., alias="userId")
    username: str
    token: str


class UserResponse(BaseModel):
    """Public user profile (never includes the password hash)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime
