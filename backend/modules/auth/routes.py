"""
Authentication API endpoints.

Drives the browser through the provider OAuth handshake and manages the
session cookie. Errors propagate to the application exception handlers,
except login failures after the state check, which also spend the state
cookie.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from api.cookies import (
    clear_return_to_cookie,
    clear_session_cookie,
    clear_state_cookie,
    set_oauth_cookies,
    set_session_cookie,
)
from api.dependencies import get_auth_service
from api.errors import error_response
from shared.config import get_settings
from shared.exceptions import GuidepostError

from .interfaces import IAuthService
from .oauth_state import generate_state, sanitize_return_to, sign_state, verify_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/provider/start")
async def start_login(
    return_to: Optional[str] = Query(default=None, alias="returnTo"),
    service: IAuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """
    Begin the provider login.

    Stores a signed anti-forgery state and the sanitized return path in
    short-lived cookies, then redirects to the provider's consent page.
    """
    settings = get_settings()
    state = generate_state()
    signed = sign_state(state, settings.state_secret, settings.oauth_state_ttl_seconds)
    authorization_url = service.build_authorization_url(state)

    response = RedirectResponse(authorization_url, status_code=302)
    set_oauth_cookies(response, settings, signed, sanitize_return_to(return_to))
    return response


@router.api_route("/provider/callback", methods=["GET", "POST"])
async def complete_login(
    request: Request,
    code: Optional[str] = Query(default=None),
    state: Optional[str] = Query(default=None),
    service: IAuthService = Depends(get_auth_service),
) -> Response:
    """
    Finish the provider login.

    The state must match the signed state cookie exactly; nothing is
    written to storage otherwise. Once verified the state is spent, so
    its cookie is cleared whether or not the login succeeds. On success
    the session cookie is set and the browser is sent back to the stored
    return path.
    """
    settings = get_settings()
    verify_state(
        request.cookies.get(settings.oauth_state_cookie_name),
        state or "",
        settings.state_secret,
    )

    try:
        result = await service.login_with_provider(code or "")
    except GuidepostError as e:
        failure = error_response(request, e)
        clear_state_cookie(failure, settings)
        return failure

    return_to = sanitize_return_to(request.cookies.get(settings.return_to_cookie_name))
    response = RedirectResponse(return_to, status_code=302)
    clear_state_cookie(response, settings)
    set_session_cookie(response, settings, result.session_id, result.expires_at)
    clear_return_to_cookie(response, settings)
    return response


@router.post("/logout")
async def logout(
    request: Request,
    service: IAuthService = Depends(get_auth_service),
) -> JSONResponse:
    """
    Revoke the current session and clear its cookie.

    Always returns {"ok": true}, whether or not a session existed.
    """
    settings = get_settings()
    await service.logout(request.cookies.get(settings.session_cookie_name))

    response = JSONResponse({"ok": True})
    clear_session_cookie(response, settings)
    return response
