"""
User directory backed by the Supabase ``users`` table.

Email uniqueness is case-insensitive, so the upsert goes through the
``upsert_user_by_email`` SQL function instead of a PostgREST upsert
(PostgREST can only target plain-column constraints).
"""

from typing import Any, Optional

from shared.exceptions import DatabaseError
from shared.models import User, UserRole
from shared.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for local user identities.

    Users are only ever created through upsert_by_email; deactivation and
    role changes happen outside this service.
    """

    def upsert_by_email(
        self,
        email: str,
        display_name: str,
        avatar_url: Optional[str],
        email_verified: bool,
    ) -> User:
        """
        Create a user or refresh the one whose email matches ignoring case.

        Args:
            email: Email reported by the identity provider.
            display_name: Name to show for the user.
            avatar_url: Public avatar URL, if any.
            email_verified: Whether the provider verified the email.

        Returns:
            The created or updated User.
        """
        if not email:
            raise ValueError("email is required to upsert a user")

        result = self._execute(
            "upsert_user_by_email",
            lambda: self._db.rpc(
                "upsert_user_by_email",
                {
                    "p_email": email,
                    "p_display_name": display_name,
                    "p_avatar_url": avatar_url,
                    "p_email_verified": email_verified,
                },
            ).execute(),
        )
        if not result.data:
            raise DatabaseError("User upsert returned no row", operation="upsert_user_by_email")
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user by ID.

        Returns:
            The User, or None if no such user exists.
        """
        try:
            result = self._execute(
                "get_user",
                lambda: self._db.table("users").select("*").eq("id", user_id).execute(),
            )
        except DatabaseError as e:
            if self._is_invalid_identifier(e):
                return None
            raise

        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            display_name=data["display_name"],
            avatar_url=data.get("avatar_url"),
            email=data.get("email"),
            email_verified=data.get("email_verified", False),
            role=UserRole(data.get("role") or UserRole.MEMBER.value),
            is_active=data.get("is_active", True),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
