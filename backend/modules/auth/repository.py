"""
Session store backed by the Supabase ``sessions`` table.

Session ids are random opaque tokens generated here, not database
defaults, so a forged cookie can never be mistaken for a malformed uuid.
"""

import secrets
from datetime import datetime
from typing import Any, Optional

from shared.exceptions import DatabaseError
from shared.repository import BaseRepository

from .models import SessionRecord

SESSION_TOKEN_BYTES = 32


def generate_session_id() -> str:
    """Create a new URL-safe session token."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


class SessionRepository(BaseRepository[SessionRecord]):
    """
    Repository for server-side sessions.

    Expired rows are never returned by get_active(); they stay in the
    table until delete_expired() sweeps them.
    """

    def create(self, user_id: str, expires_at: datetime) -> SessionRecord:
        """
        Insert a new session.

        Args:
            user_id: Owning user ID.
            expires_at: Absolute expiry (timezone-aware).

        Returns:
            The stored SessionRecord.
        """
        data = {
            "id": generate_session_id(),
            "user_id": user_id,
            "expires_at": expires_at.isoformat(),
        }
        result = self._execute(
            "create_session",
            lambda: self._db.table("sessions").insert(data).execute(),
        )
        if not result.data:
            raise DatabaseError("Session insert returned no row", operation="create_session")
        return self._map_to_session(result.data[0])

    def get_active(self, session_id: str, now: datetime) -> Optional[SessionRecord]:
        """
        Get a session that has not expired as of ``now``.

        Returns:
            The SessionRecord, or None if unknown or expired.
        """
        result = self._execute(
            "get_session",
            lambda: self._db.table("sessions")
            .select("*")
            .eq("id", session_id)
            .gt("expires_at", now.isoformat())
            .execute(),
        )
        if not result.data:
            return None
        return self._map_to_session(result.data[0])

    def delete(self, session_id: str) -> bool:
        """
        Delete a session.

        Returns:
            True if a row was removed. Deleting an unknown session is not an error.
        """
        result = self._execute(
            "delete_session",
            lambda: self._db.table("sessions").delete().eq("id", session_id).execute(),
        )
        return bool(result.data)

    def delete_expired(self, now: datetime) -> int:
        """
        Remove every session whose expiry is at or before ``now``.

        Returns:
            Number of sessions removed.
        """
        result = self._execute(
            "delete_expired_sessions",
            lambda: self._db.table("sessions").delete().lte("expires_at", now.isoformat()).execute(),
        )
        return len(result.data or [])

    def _map_to_session(self, data: dict[str, Any]) -> SessionRecord:
        """Map database row to SessionRecord model."""
        return SessionRecord(
            id=data["id"],
            user_id=str(data["user_id"]),
            expires_at=data["expires_at"],
            created_at=data.get("created_at"),
        )
