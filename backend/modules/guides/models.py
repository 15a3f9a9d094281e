"""
Guides module data models.

These models define the guide documents, their tags and the request and
response shapes of the guides API.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_serializer

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def format_rfc3339(value: datetime) -> str:
    """Format a timestamp as RFC3339 in UTC with second precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


class GuideStatus(str, Enum):
    """Guide lifecycle status."""

    DRAFT = "draft"          # Visible to editors of the guide only
    PUBLISHED = "published"  # Visible to everyone


class Tag(BaseModel):
    """A normalized tag."""

    id: str
    name: str

    model_config = {"frozen": True}


class GuideListItem(BaseModel):
    """Guide summary for list views (no content)."""

    id: str
    creator_id: str
    title: str
    status: GuideStatus
    tags: list[Tag] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {"frozen": True}

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_rfc3339(value)

    @property
    def is_published(self) -> bool:
        return self.status == GuideStatus.PUBLISHED


class Guide(GuideListItem):
    """A complete guide document."""

    content: str


class GuideListResponse(BaseModel):
    """Page of published guides."""

    items: list[GuideListItem]
    limit: int
    offset: int


class CreateGuideRequest(BaseModel):
    """Request to create a guide."""

    title: str = Field(..., description="Guide title")
    content: str = Field(..., description="Guide body")
    tags: list[str] = Field(default_factory=list, description="Tag names")


class UpdateGuideRequest(BaseModel):
    """
    Request to update a guide.

    Omitting ``tags`` (or sending null) leaves the tags untouched; an
    empty list removes them all.
    """

    title: str = Field(..., description="Guide title")
    content: str = Field(..., description="Guide body")
    tags: Optional[list[str]] = Field(None, description="Replacement tag names")


class CreateGuideResponse(BaseModel):
    """Response for guide creation."""

    id: str


class OkResponse(BaseModel):
    """Acknowledgement for mutations."""

    ok: bool = True
