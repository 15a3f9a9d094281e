"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating PostgREST failures into the
application's exception hierarchy.
"""

import logging
from typing import Any, Callable, TypeVar, Generic

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for "invalid text representation" (e.g. a malformed uuid)
INVALID_TEXT_REPRESENTATION = "22P02"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _execute() to run a query and wrap backend errors
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class GuideRepository(BaseRepository[Guide]):
            def get_guide(self, guide_id: str) -> Optional[Guide]:
                result = self._execute(
                    "get_guide",
                    lambda: self._db.table("guides").select("*").eq("id", guide_id).execute(),
                )
                if not result.data:
                    return None
                return self._map_to_guide(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, operation: str, query: Callable[[], Any]) -> Any:
        """
        Run a query, converting PostgREST errors into DatabaseError.

        Args:
            operation: Short name of the operation, for logs and error details.
            query: Zero-argument callable that executes the request.

        Returns:
            Whatever the query returns (usually an APIResponse).

        Raises:
            DatabaseError: If the backend rejects the request.
        """
        try:
            return query()
        except APIError as e:
            logger.error("Database operation %s failed: %s", operation, e.message)
            raise DatabaseError(e.message or "Database request failed", operation=operation) from e

    @staticmethod
    def _is_invalid_identifier(error: DatabaseError) -> bool:
        """True when the wrapped error was a malformed id (e.g. not a uuid)."""
        cause = error.__cause__
        return isinstance(cause, APIError) and cause.code == INVALID_TEXT_REPRESENTATION
