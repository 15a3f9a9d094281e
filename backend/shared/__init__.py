"""
Shared infrastructure for the Guidepost backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- log_config: Logging setup
- models: User and request identity models

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    GuidepostError,
    NotFoundError,
    ValidationError,
    InvalidInputError,
    AuthenticationError,
    NotAuthenticatedError,
    AuthorizationError,
    ExternalServiceError,
    ConfigurationError,
    DatabaseError,
)
from .models import AuthContext, User, UserRole

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "GuidepostError",
    "NotFoundError",
    "ValidationError",
    "InvalidInputError",
    "AuthenticationError",
    "NotAuthenticatedError",
    "AuthorizationError",
    "ExternalServiceError",
    "ConfigurationError",
    "DatabaseError",
    "AuthContext",
    "User",
    "UserRole",
]
