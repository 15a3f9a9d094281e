"""
Users module.

Owns the local user directory. Users are created or refreshed on login
and read back by session resolution.
"""

from .models import MeResponse, MeUser
from .repository import UserRepository

__all__ = ["MeResponse", "MeUser", "UserRepository"]
