"""Authentication and profile schemas"""

from typing import Optional
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1)
    admin_name: str = Field(..., min_length=1, max_length=255)


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserPublic(CamelModel):
    """User fields safe to return to clients"""
    id: UUID
    username: str
    admin_name: str


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserPublic


class ProfileResponse(CamelModel):
    user: UserPublic


class ProfileUpdate(CamelModel):
    """Partial profile update; changing the password requires current_password"""
    admin_name: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    current_password: Optional[str] = None


class ProfileUpdated(CamelModel):
    message: str = "Profile updated successfully"
    user: UserPublic
