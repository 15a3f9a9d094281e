"""
Shared data models used across modules.

The User model is read by the auth, users and guides modules, so it
lives here rather than inside any one of them.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Roles a local user can hold."""

    MEMBER = "member"
    EDITOR = "editor"
    ADMIN = "admin"

    @property
    def is_elevated(self) -> bool:
        return self in (UserRole.EDITOR, UserRole.ADMIN)


class User(BaseModel):
    """
    A local user identity.

    Created or refreshed on every successful provider login. The
    is_active flag is managed outside this service; an inactive user
    can never be resolved from a session.
    """

    id: str = Field(..., description="User ID (UUID)")
    display_name: str = Field(..., description="Display name")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
    email: Optional[str] = Field(None, description="Email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    role: UserRole = Field(default=UserRole.MEMBER, description="User role")
    is_active: bool = Field(default=True, description="Whether the account is enabled")

    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra columns from the database
    }


class AuthContext(BaseModel):
    """
    Identity attached to a request by the session middleware.

    Downstream code reads it; only the middleware creates it.
    """

    user: Optional[User] = None

    model_config = {"frozen": True}

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.user.is_active
