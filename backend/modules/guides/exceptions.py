"""
Guides module exceptions.
"""

from typing import Optional

from shared.exceptions import NotFoundError, AuthorizationError


class GuideNotFoundError(NotFoundError):
    """Raised when a guide does not exist."""

    def __init__(self, guide_id: str):
        super().__init__(
            f"Guide not found: {guide_id}",
            code="GUIDE_NOT_FOUND",
            details={"guide_id": guide_id},
        )


class GuideAccessDeniedError(AuthorizationError):
    """Raised when the caller may not view or change a guide."""

    def __init__(self, guide_id: str, user_id: Optional[str] = None):
        super().__init__(
            f"Access denied to guide: {guide_id}",
            code="GUIDE_ACCESS_DENIED",
            details={"guide_id": guide_id, "user_id": user_id},
        )
