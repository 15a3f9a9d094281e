"""
Authentication module.

Handles the provider OAuth login, server-side sessions and logout.

Public API:
- IAuthService: Interface for auth operations
- LoginResult, SessionRecord: Auth data models
- Auth exceptions: MissingEmailScopeError, InvalidOAuthStateError, etc.
- OAuth state helpers: generate_state, sanitize_return_to, sign_state, verify_state
"""

from .interfaces import IAuthService
from .models import LoginResult, SessionRecord
from .exceptions import (
    MissingEmailScopeError,
    InvalidOAuthStateError,
    ExchangeFailedError,
    ProfileFetchFailedError,
)
from .oauth_state import generate_state, sanitize_return_to, sign_state, verify_state

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "LoginResult",
    "SessionRecord",
    # Exceptions
    "MissingEmailScopeError",
    "InvalidOAuthStateError",
    "ExchangeFailedError",
    "ProfileFetchFailedError",
    # OAuth state
    "generate_state",
    "sanitize_return_to",
    "sign_state",
    "verify_state",
]
