"""Base repository with the lookups shared by all repositories."""

import logging
from typing import Dict, Optional, Any

from supabase import Client

from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base repository providing common read/update operations.

    Attributes:
        db_client: Supabase client instance for database operations.
        table_name: Name of the database table this repository manages.
    """

    def __init__(self, db_client: Client, table_name: str):
        """Initialize the base repository.

        Args:
            db_client: Supabase client instance.
            table_name: Name of the database table (e.g., "companies", "jobs").
        """
        self.db_client = db_client
        self.table_name = table_name

    def _fail(self, action: str, error: Exception) -> DatabaseError:
        logger.error(f"{self.table_name}: failed to {action}: {error}")
        return DatabaseError(f"Failed to {action} {self.table_name}: {str(error)}", cause=error)

    def get_one_by(self, column: str, value: Any, columns: str = "*") -> Optional[Dict[str, Any]]:
        """Retrieve at most one record whose column equals value.

        Args:
            column: Column to match on.
            value: Value to match.
            columns: Comma separated column list to select.

        Returns:
            Record as dictionary if found, None otherwise.

        Raises:
            DatabaseError: If the backend query fails.
        """
        try:
            response = (
                self.db_client.table(self.table_name)
                .select(columns)
                .eq(column, value)
                .limit(1)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as error:
            raise self._fail(f"get by {column}", error)

    def get_by_id(self, record_id: str, columns: str = "*") -> Optional[Dict[str, Any]]:
        return self.get_one_by("id", record_id, columns)

    def update(self, record_id: Any, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Update a record and return its new state.

        Args:
            record_id: The unique identifier of the record to update.
            updates: Dictionary of fields to overwrite.

        Returns:
            Updated record as dictionary, or None if no row matched.

        Raises:
            DatabaseError: If the update fails.
        """
        try:
            response = (
                self.db_client.table(self.table_name)
                .update(updates)
                .eq("id", record_id)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as error:
            raise self._fail("update", error)
