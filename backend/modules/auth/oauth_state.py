"""
OAuth transaction state carried in cookies.

The anti-forgery state never touches server storage. It is stored in a
short-lived cookie as an HS256 JWT so that a client cannot plant a state
value of its own choosing, and the callback compares it to the ``state``
query parameter.
"""

import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import urlsplit

import jwt

from shared.exceptions import ConfigurationError

from .exceptions import InvalidOAuthStateError

STATE_BYTES = 32
STATE_AUDIENCE = "guidepost:oauth-state"
MAX_RETURN_TO_LENGTH = 2000


def generate_state() -> str:
    """Create a random, URL-safe anti-forgery value."""
    return secrets.token_urlsafe(STATE_BYTES)


def sanitize_return_to(return_to: Optional[str]) -> str:
    """
    Reduce a post-login redirect target to a same-origin relative path.

    Anything that is empty, too long, absolute, carries a host, or does not
    start with ``/`` becomes ``/``. A second character of ``/`` or ``\\`` is
    rejected too: browsers resolve ``//host``, ``///host`` and ``/\\host``
    alike as protocol-relative, even where ``urlsplit`` sees no host. Any
    other value is returned unchanged.
    """
    if not return_to:
        return "/"
    if len(return_to) > MAX_RETURN_TO_LENGTH:
        return "/"
    try:
        parts = urlsplit(return_to)
    except ValueError:
        return "/"
    if parts.scheme or parts.netloc:
        return "/"
    if not return_to.startswith("/"):
        return "/"
    if return_to[1:2] in ("/", "\\"):
        return "/"
    return return_to


def _require_secret(secret: str) -> str:
    if not secret:
        raise ConfigurationError(
            "OAuth state secret is not configured. Set GUIDEPOST_STATE_SECRET.",
            setting="state_secret",
        )
    return secret


def sign_state(
    state: str,
    secret: str,
    ttl_seconds: int,
    now: Optional[datetime] = None,
) -> str:
    """
    Wrap a state value in a signed, expiring token for the state cookie.

    Args:
        state: Random anti-forgery value
        secret: HMAC signing secret
        ttl_seconds: Lifetime of the token
        now: Issue time (defaults to current UTC time)

    Returns:
        Encoded JWT
    """
    now = now or datetime.now(timezone.utc)
    payload = {
        "state": state,
        "aud": STATE_AUDIENCE,
        "iat": now,
        "exp": now + timedelta(seconds=ttl_seconds),
    }
    return jwt.encode(payload, _require_secret(secret), algorithm="HS256")


def verify_state(cookie_value: Optional[str], received_state: Optional[str], secret: str) -> None:
    """
    Check the callback ``state`` against the signed state cookie.

    Raises:
        InvalidOAuthStateError: If the cookie is missing, tampered with,
            expired, or does not match exactly.
    """
    secret = _require_secret(secret)
    if not cookie_value:
        raise InvalidOAuthStateError("missing oauth state cookie")
    if not received_state:
        raise InvalidOAuthStateError("missing state parameter")

    try:
        payload = jwt.decode(
            cookie_value,
            secret,
            algorithms=["HS256"],
            audience=STATE_AUDIENCE,
        )
    except jwt.ExpiredSignatureError:
        raise InvalidOAuthStateError("oauth state expired")
    except jwt.InvalidTokenError:
        raise InvalidOAuthStateError("oauth state cookie is invalid")

    expected = payload.get("state")
    if not isinstance(expected, str) or not hmac.compare_digest(
        expected.encode(), received_state.encode()
    ):
        raise InvalidOAuthStateError("oauth state mismatch")
