"""
User module API models.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import User, UserRole


class MeUser(BaseModel):
    """Public view of the signed-in user."""

    id: str
    display_name: str
    avatar_url: Optional[str] = None
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "MeUser":
        return cls(
            id=user.id,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            role=user.role,
        )


class MeResponse(BaseModel):
    """Response for GET /me."""

    authenticated: bool = Field(..., description="Whether a session is attached")
    user: Optional[MeUser] = Field(None, description="Present only when authenticated")
