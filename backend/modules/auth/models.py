"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import User


class SessionRecord(BaseModel):
    """A server-side session row."""

    id: str = Field(..., description="Opaque bearer token")
    user_id: str = Field(..., description="Owning user ID")
    expires_at: datetime = Field(..., description="Absolute expiry (UTC)")
    created_at: Optional[datetime] = Field(None, description="Creation time")

    model_config = {"frozen": True}

    def is_expired(self, now: datetime) -> bool:
        """A session is usable only while now is strictly before expires_at."""
        return now >= self.expires_at


class LoginResult(BaseModel):
    """Outcome of a successful provider login."""

    session_id: str = Field(..., description="New session token")
    expires_at: datetime = Field(..., description="Absolute session expiry (UTC)")
    user: User = Field(..., description="The upserted user")

    model_config = {"frozen": True}
