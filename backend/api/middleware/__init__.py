"""Request middleware and identity dependencies."""

from .session import (
    SessionResolutionMiddleware,
    get_auth_context,
    get_current_user,
    get_optional_user,
)

__all__ = [
    "SessionResolutionMiddleware",
    "get_auth_context",
    "get_current_user",
    "get_optional_user",
]
