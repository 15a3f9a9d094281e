"""
Guide service implementation.

Validates input, applies the authorization policy and drives the guide
store. The store never checks ownership; this service is the single
authority on who may read or change a guide.
"""

import logging
from typing import Optional

from shared.exceptions import ConfigurationError, InvalidInputError, NotAuthenticatedError
from shared.models import User

from .exceptions import GuideAccessDeniedError, GuideNotFoundError
from .interfaces import IGuideService
from .models import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Guide,
    GuideListResponse,
    GuideStatus,
)
from .policy import GuidePolicy, policy_for
from .repository import GuideRepository
from .tags import normalize_tag, normalize_tags

logger = logging.getLogger(__name__)


def parse_int_or_default(value: Optional[str], default: int) -> int:
    """Parse a query value as an integer, falling back to ``default``."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def clamp_page(limit: int, offset: int) -> tuple[int, int]:
    """Clamp paging to limit in (0, MAX_PAGE_SIZE] and offset >= 0."""
    if limit <= 0:
        limit = DEFAULT_PAGE_SIZE
    elif limit > MAX_PAGE_SIZE:
        limit = MAX_PAGE_SIZE
    return limit, max(offset, 0)


def _require_id(guide_id: str) -> str:
    guide_id = (guide_id or "").strip()
    if not guide_id:
        raise InvalidInputError("Missing guide id", field="guide_id")
    return guide_id


def _clean_body(title: str, content: str) -> tuple[str, str]:
    title = (title or "").strip()
    if not title:
        raise InvalidInputError("Title must not be blank", field="title")
    if not content or not content.strip():
        raise InvalidInputError("Content must not be blank", field="content")
    return title, content


class GuideService(IGuideService):
    """
    Guide service with Supabase backend.

    Implements IGuideService on top of GuideRepository.
    """

    def __init__(self, repository: Optional[GuideRepository]):
        self._repository = repository

    @property
    def repository(self) -> GuideRepository:
        if self._repository is None:
            raise ConfigurationError("Guide service not configured")
        return self._repository

    def _require_actor(self, actor: Optional[User]) -> GuidePolicy:
        policy = policy_for(actor)
        if not policy.is_authenticated:
            raise NotAuthenticatedError()
        return policy

    def _load_for_edit(self, actor: Optional[User], guide_id: str) -> tuple[str, Guide]:
        """Authenticate, load the guide and check the actor may change it."""
        policy = self._require_actor(actor)
        guide_id = _require_id(guide_id)

        guide = self.repository.get_guide(guide_id)
        if guide is None:
            raise GuideNotFoundError(guide_id)
        if not policy.can_edit(guide):
            raise GuideAccessDeniedError(guide_id, actor.id if actor else None)
        return guide_id, guide

    async def create_guide(
        self,
        actor: Optional[User],
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
    ) -> str:
        self._require_actor(actor)
        title, content = _clean_body(title, content)

        guide_id = self.repository.create_guide(actor.id, title, content, normalize_tags(tags))
        logger.info("Guide %s created by %s", guide_id, actor.id)
        return guide_id

    async def update_guide(
        self,
        actor: Optional[User],
        guide_id: str,
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
    ) -> None:
        guide_id, _ = self._load_for_edit(actor, guide_id)
        title, content = _clean_body(title, content)

        new_tags = normalize_tags(tags) if tags is not None else None
        if not self.repository.update_guide(guide_id, title, content, new_tags):
            raise GuideNotFoundError(guide_id)
        logger.info("Guide %s updated by %s", guide_id, actor.id)

    async def replace_guide_tags(
        self,
        actor: Optional[User],
        guide_id: str,
        tags: list[str],
    ) -> None:
        guide_id, _ = self._load_for_edit(actor, guide_id)
        if not self.repository.replace_tags(guide_id, normalize_tags(tags)):
            raise GuideNotFoundError(guide_id)

    async def get_guide(self, actor: Optional[User], guide_id: str) -> Guide:
        """
        Get a guide.

        Published guides are returned to anyone. For drafts an anonymous
        caller gets NotAuthenticatedError and a caller without edit rights
        gets GuideAccessDeniedError.
        """
        guide_id = _require_id(guide_id)
        guide = self.repository.get_guide(guide_id)
        if guide is None:
            raise GuideNotFoundError(guide_id)

        policy = policy_for(actor)
        if policy.can_view(guide):
            return guide
        if not policy.is_authenticated:
            raise NotAuthenticatedError()
        raise GuideAccessDeniedError(guide_id, actor.id if actor else None)

    async def list_published_guides(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> GuideListResponse:
        limit, offset = clamp_page(limit, offset)
        tag_filter = normalize_tag(tag) or None
        search_filter = (search or "").strip() or None

        items = self.repository.list_published(tag_filter, search_filter, limit, offset)
        # The store filters on status too; never let a draft through
        items = [item for item in items if item.is_published]
        return GuideListResponse(items=items, limit=limit, offset=offset)

    async def publish_guide(self, actor: Optional[User], guide_id: str) -> None:
        await self._set_status(actor, guide_id, GuideStatus.PUBLISHED)

    async def unpublish_guide(self, actor: Optional[User], guide_id: str) -> None:
        await self._set_status(actor, guide_id, GuideStatus.DRAFT)

    async def _set_status(self, actor: Optional[User], guide_id: str, status: GuideStatus) -> None:
        guide_id, _ = self._load_for_edit(actor, guide_id)
        if not self.repository.set_status(guide_id, status):
            raise GuideNotFoundError(guide_id)
        logger.info("Guide %s set to %s by %s", guide_id, status.value, actor.id)

    async def delete_guide(self, actor: Optional[User], guide_id: str) -> None:
        guide_id, _ = self._load_for_edit(actor, guide_id)
        if not self.repository.delete_guide(guide_id):
            raise GuideNotFoundError(guide_id)
        logger.info("Guide %s deleted by %s", guide_id, actor.id)
