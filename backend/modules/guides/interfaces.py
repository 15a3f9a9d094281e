"""
Guides module interface.

The API layer depends on IGuideService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import User

from .models import Guide, GuideListResponse


@runtime_checkable
class IGuideService(Protocol):
    """
    Interface for guide operations.

    ``actor`` is the signed-in user, or None for anonymous callers.
    """

    async def create_guide(
        self,
        actor: Optional[User],
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
    ) -> str:
        """
        Create a draft guide owned by the actor.

        Returns:
            The new guide ID

        Raises:
            NotAuthenticatedError: If there is no active actor
            InvalidInputError: If title or content is blank
        """
        ...

    async def update_guide(
        self,
        actor: Optional[User],
        guide_id: str,
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
    ) -> None:
        """
        Update title and content; replace tags unless ``tags`` is None.

        Raises:
            NotAuthenticatedError, InvalidInputError, GuideNotFoundError,
            GuideAccessDeniedError
        """
        ...

    async def replace_guide_tags(
        self,
        actor: Optional[User],
        guide_id: str,
        tags: list[str],
    ) -> None:
        """Replace every tag of a guide."""
        ...

    async def get_guide(self, actor: Optional[User], guide_id: str) -> Guide:
        """
        Get a guide.

        Published guides are visible to anyone; drafts only to actors
        allowed to edit them.

        Raises:
            GuideNotFoundError: If the guide doesn't exist
            NotAuthenticatedError: If the guide is a draft and there is no actor
            GuideAccessDeniedError: If the actor may not see the draft
        """
        ...

    async def list_published_guides(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> GuideListResponse:
        """
        List published guides, newest first.

        Out-of-range limits and offsets are clamped; the response echoes
        the values actually used.
        """
        ...

    async def publish_guide(self, actor: Optional[User], guide_id: str) -> None:
        """Set the guide status to published."""
        ...

    async def unpublish_guide(self, actor: Optional[User], guide_id: str) -> None:
        """Set the guide status back to draft."""
        ...

    async def delete_guide(self, actor: Optional[User], guide_id: str) -> None:
        """Delete a guide and its tag associations."""
        ...
