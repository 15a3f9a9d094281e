"""
Guides module.

User-authored documents with a draft/published lifecycle, tags and
role-based edit rights.

Public API:
- IGuideService: Interface for guide operations
- Guide, GuideListItem, GuideListResponse, Tag: Data models
- policy_for: Authorization policy selection
- GuideNotFoundError, GuideAccessDeniedError: Module exceptions
"""

from .interfaces import IGuideService
from .models import (
    Guide,
    GuideListItem,
    GuideListResponse,
    GuideStatus,
    Tag,
    CreateGuideRequest,
    UpdateGuideRequest,
)
from .policy import AnonymousPolicy, CreatorPolicy, ElevatedPolicy, GuidePolicy, policy_for
from .tags import normalize_tags
from .exceptions import GuideNotFoundError, GuideAccessDeniedError

__all__ = [
    # Interface
    "IGuideService",
    # Models
    "Guide",
    "GuideListItem",
    "GuideListResponse",
    "GuideStatus",
    "Tag",
    "CreateGuideRequest",
    "UpdateGuideRequest",
    # Policy
    "GuidePolicy",
    "AnonymousPolicy",
    "CreatorPolicy",
    "ElevatedPolicy",
    "policy_for",
    # Tags
    "normalize_tags",
    # Exceptions
    "GuideNotFoundError",
    "GuideAccessDeniedError",
]
