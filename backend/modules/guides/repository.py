"""
Guide store backed by Supabase.

Multi-statement writes (create, update with tags, tag replacement) go
through the SQL functions in migrations/002_guides_and_tags.sql so each
runs in a single transaction with the guide row locked.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.exceptions import DatabaseError
from shared.repository import BaseRepository

from .models import Guide, GuideListItem, GuideStatus, Tag

GUIDE_COLUMNS = "id, creator_id, title, content, status, created_at, updated_at, tags(id, name)"


class GuideRepository(BaseRepository[Guide]):
    """
    Repository for guides and their tags.

    Writes are keyed on guide id only; who may write is decided by the
    service. Methods that target one guide report a missing or malformed
    id as "not found" (None or False) rather than raising.
    """

    def create_guide(self, creator_id: str, title: str, content: str, tags: list[str]) -> str:
        """
        Insert a draft guide and link its tags.

        Returns:
            The new guide ID.
        """
        result = self._execute(
            "create_guide",
            lambda: self._db.rpc(
                "create_guide",
                {
                    "p_creator_id": creator_id,
                    "p_title": title,
                    "p_content": content,
                    "p_tags": tags,
                },
            ).execute(),
        )
        guide_id = self._scalar(result.data)
        if not guide_id:
            raise DatabaseError("Guide insert returned no id", operation="create_guide")
        return str(guide_id)

    def update_guide(
        self,
        guide_id: str,
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
    ) -> bool:
        """
        Update a guide's title and content, replacing tags when given.

        Returns:
            False if the guide does not exist.
        """
        return self._rpc_flag(
            "update_guide",
            {
                "p_guide_id": guide_id,
                "p_title": title,
                "p_content": content,
                "p_tags": tags,
            },
        )

    def replace_tags(self, guide_id: str, tags: list[str]) -> bool:
        """
        Replace every tag association of a guide.

        Returns:
            False if the guide does not exist.
        """
        return self._rpc_flag("replace_guide_tags", {"p_guide_id": guide_id, "p_tags": tags})

    def set_status(self, guide_id: str, status: GuideStatus) -> bool:
        """
        Set a guide's status and bump updated_at.

        Returns:
            False if the guide does not exist.
        """
        try:
            result = self._execute(
                "set_guide_status",
                lambda: self._db.table("guides")
                .update({"status": status.value, "updated_at": datetime.now(timezone.utc).isoformat()})
                .eq("id", guide_id)
                .execute(),
            )
        except DatabaseError as e:
            if self._is_invalid_identifier(e):
                return False
            raise
        return bool(result.data)

    def delete_guide(self, guide_id: str) -> bool:
        """
        Delete a guide; tag associations cascade.

        Returns:
            False if the guide does not exist.
        """
        try:
            result = self._execute(
                "delete_guide",
                lambda: self._db.table("guides").delete().eq("id", guide_id).execute(),
            )
        except DatabaseError as e:
            if self._is_invalid_identifier(e):
                return False
            raise
        return bool(result.data)

    def get_guide(self, guide_id: str) -> Optional[Guide]:
        """
        Get a guide with its tags.

        Returns:
            The Guide, or None if not found.
        """
        try:
            result = self._execute(
                "get_guide",
                lambda: self._db.table("guides").select(GUIDE_COLUMNS).eq("id", guide_id).execute(),
            )
        except DatabaseError as e:
            if self._is_invalid_identifier(e):
                return None
            raise

        if not result.data:
            return None
        return self._map_to_guide(result.data[0])

    def list_published(
        self,
        tag: Optional[str],
        search: Optional[str],
        limit: int,
        offset: int,
    ) -> list[GuideListItem]:
        """
        List published guides, newest first.

        Args:
            tag: Normalized tag name to match exactly, or None.
            search: Case-insensitive title substring, or None.
            limit: Page size (already clamped).
            offset: Rows to skip (already clamped).
        """
        result = self._execute(
            "list_published_guides",
            lambda: self._db.rpc(
                "list_published_guides",
                {
                    "p_tag": tag,
                    "p_search": search,
                    "p_limit": limit,
                    "p_offset": offset,
                },
            ).execute(),
        )
        return [self._map_to_list_item(row) for row in result.data or []]

    def _rpc_flag(self, function: str, params: dict[str, Any]) -> bool:
        """Call a SQL function returning boolean; a malformed id counts as missing."""
        try:
            result = self._execute(function, lambda: self._db.rpc(function, params).execute())
        except DatabaseError as e:
            if self._is_invalid_identifier(e):
                return False
            raise
        return bool(self._scalar(result.data))

    @staticmethod
    def _scalar(data: Any) -> Any:
        # Scalar SQL functions come back bare, or wrapped in a one-element list
        if isinstance(data, list):
            return data[0] if data else None
        return data

    @staticmethod
    def _map_tags(raw: Any) -> list[Tag]:
        tags = [Tag(id=str(t["id"]), name=t["name"]) for t in raw or []]
        return sorted(tags, key=lambda t: t.name)

    def _map_to_list_item(self, data: dict[str, Any]) -> GuideListItem:
        """Map a list_published_guides row to GuideListItem."""
        return GuideListItem(
            id=str(data["id"]),
            creator_id=str(data["creator_id"]),
            title=data["title"],
            status=GuideStatus(data["status"]),
            tags=self._map_tags(data.get("tags")),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def _map_to_guide(self, data: dict[str, Any]) -> Guide:
        """Map database row to Guide model."""
        return Guide(
            id=str(data["id"]),
            creator_id=str(data["creator_id"]),
            title=data["title"],
            content=data["content"],
            status=GuideStatus(data["status"]),
            tags=self._map_tags(data.get("tags")),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
