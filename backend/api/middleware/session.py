"""
Session resolution middleware.

Resolves the session cookie to an active user before every handler and
attaches the result to ``request.state.auth``. It never rejects a request:
anything that cannot be resolved becomes an anonymous context, and a stale
cookie is cleared on the way out.
"""

import logging
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from shared.config import get_settings
from shared.exceptions import GuidepostError, NotAuthenticatedError
from shared.models import AuthContext, User

from ..cookies import clear_session_cookie
from ..dependencies import get_container

logger = logging.getLogger(__name__)

ANONYMOUS = AuthContext()


class SessionResolutionMiddleware(BaseHTTPMiddleware):
    """Attach an AuthContext to every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        settings = get_settings()
        session_id = request.cookies.get(settings.session_cookie_name)

        context = ANONYMOUS
        stale_cookie = False

        if session_id:
            user = await self._resolve(session_id)
            if user is None:
                stale_cookie = True
            else:
                context = AuthContext(user=user)

        request.state.auth = context
        response = await call_next(request)

        if stale_cookie:
            clear_session_cookie(response, settings)
        if context.is_authenticated:
            response.headers["Cache-Control"] = "no-store"
        return response

    async def _resolve(self, session_id: str) -> Optional[User]:
        try:
            user = await get_container().auth.resolve_session(session_id)
        except GuidepostError as e:
            logger.warning("Session resolution failed: %s", e.message)
            return None
        except Exception:
            # Transport errors from the storage client are not wrapped
            logger.exception("Session resolution failed unexpectedly")
            return None
        if user is None or not user.is_active:
            return None
        return user


# FastAPI dependency functions


def get_auth_context(request: Request) -> AuthContext:
    """Identity attached by SessionResolutionMiddleware (anonymous if absent)."""
    context = getattr(request.state, "auth", None)
    if isinstance(context, AuthContext):
        return context
    return ANONYMOUS


def get_optional_user(request: Request) -> Optional[User]:
    """
    Dependency that optionally extracts the signed-in user.

    Use this for endpoints that work with or without authentication.
    """
    context = get_auth_context(request)
    return context.user if context.is_authenticated else None


def get_current_user(request: Request) -> User:
    """
    Dependency that requires authentication.

    Usage:
        @router.post("/api/guides")
        async def create(user: User = Depends(get_current_user)):
            ...
    """
    user = get_optional_user(request)
    if user is None:
        raise NotAuthenticatedError()
    return user
