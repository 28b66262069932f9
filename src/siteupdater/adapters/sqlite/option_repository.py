"""SQLite implementation of the option store.

Site options are keyed by ``(site_id, name)``, network options by
``(network_id, name)``. Values round-trip through JSON, so any mapping, list or
scalar can be stored.
"""

from __future__ import annotations

import sqlite3
from typing import Any

from siteupdater.adapters.sqlite.connection import get_connection
from siteupdater.adapters.sqlite.utils import decode_value, encode_value

_MISSING = object()


class SqliteOptionRepository:
    """SQLite implementation of the site and network option tables."""

    def __init__(
        self,
        db_path: str | None = None,
        connection: sqlite3.Connection | None = None,
    ):
        """Initialize SQLite option repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
            connection: Optional already-configured connection (takes precedence).
        """
        self.db_path = db_path
        self._connection = connection

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def _get(self, table: str, owner_column: str, owner_id: int, name: str) -> Any:
        cursor = self.connection.execute(
            f"SELECT value FROM {table} WHERE {owner_column} = ? AND name = ?",
            (owner_id, name),
        )
        row = cursor.fetchone()
        if row is None:
            return _MISSING
        return decode_value(row["value"])

    def _add(
        self, table: str, owner_column: str, owner_id: int, name: str, value: Any
    ) -> bool:
        cursor = self.connection.execute(
            f"INSERT OR IGNORE INTO {table} ({owner_column}, name, value) VALUES (?, ?, ?)",
            (owner_id, name, encode_value(value)),
        )
        self.connection.commit()
        return cursor.rowcount > 0

    def _update(
        self, table: str, owner_column: str, owner_id: int, name: str, value: Any
    ) -> bool:
        encoded = encode_value(value)
        current = self._get(table, owner_column, owner_id, name)
        if current is not _MISSING and encode_value(current) == encoded:
            return False

        self.connection.execute(
            f"""
            INSERT INTO {table} ({owner_column}, name, value) VALUES (?, ?, ?)
            ON CONFLICT({owner_column}, name) DO UPDATE SET value = excluded.value
            """,
            (owner_id, name, encoded),
        )
        self.connection.commit()
        return True

    def _delete(self, table: str, owner_column: str, owner_id: int, name: str) -> bool:
        cursor = self.connection.execute(
            f"DELETE FROM {table} WHERE {owner_column} = ? AND name = ?",
            (owner_id, name),
        )
        self.connection.commit()
        return cursor.rowcount > 0

    # ------------------------------------------------------------------
    # Site options
    # ------------------------------------------------------------------

    def get_site_option(self, site_id: int, name: str, default: Any = None) -> Any:
        """Return a site option value, or *default* when it does not exist."""
        value = self._get("site_options", "site_id", site_id, name)
        return default if value is _MISSING else value

    def add_site_option(self, site_id: int, name: str, value: Any) -> bool:
        """Create a site option. Existing options are left untouched.

        Returns:
            True if the option was created, False if it already existed
        """
        return self._add("site_options", "site_id", site_id, name, value)

    def update_site_option(self, site_id: int, name: str, value: Any) -> bool:
        """Create or overwrite a site option.

        Returns:
            False when the stored value is already equal to *value*
        """
        return self._update("site_options", "site_id", site_id, name, value)

    def delete_site_option(self, site_id: int, name: str) -> bool:
        """Delete a site option. Returns False if nothing was deleted."""
        return self._delete("site_options", "site_id", site_id, name)

    # ------------------------------------------------------------------
    # Network options
    # ------------------------------------------------------------------

    def get_network_option(self, network_id: int, name: str, default: Any = None) -> Any:
        """Return a network option value, or *default* when it does not exist."""
        value = self._get("network_options", "network_id", network_id, name)
        return default if value is _MISSING else value

    def add_network_option(self, network_id: int, name: str, value: Any) -> bool:
        """Create a network option. Existing options are left untouched."""
        return self._add("network_options", "network_id", network_id, name, value)

    def update_network_option(self, network_id: int, name: str, value: Any) -> bool:
        """Create or overwrite a network option."""
        return self._update("network_options", "network_id", network_id, name, value)

    def delete_network_option(self, network_id: int, name: str) -> bool:
        """Delete a network option."""
        return self._delete("network_options", "network_id", network_id, name)
