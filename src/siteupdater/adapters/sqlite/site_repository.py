"""SQLite implementation of the site (tenant) registry."""

from __future__ import annotations

import sqlite3
from typing import Any

from siteupdater.adapters.sqlite.connection import get_connection
from siteupdater.adapters.sqlite.utils import now_iso, row_to_dict
from siteupdater.models.exceptions import SiteNotFoundError


class SqliteSiteRepository:
    """SQLite implementation of site registry."""

    def __init__(
        self,
        db_path: str | None = None,
        connection: sqlite3.Connection | None = None,
    ):
        self.db_path = db_path
        self._connection = connection

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def add_site(self, domain: str, path: str = "/", network_id: int = 1) -> int:
        """Register a new site and return its id.

        Raises:
            ValueError: If the domain is empty or the site already exists
        """
        domain = domain.strip()
        if not domain:
            raise ValueError("domain cannot be empty")
        if not path.startswith("/"):
            path = f"/{path}"

        try:
            cursor = self.connection.execute(
                """
                INSERT INTO sites (network_id, domain, path, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (network_id, domain, path, now_iso()),
            )
        except sqlite3.IntegrityError as e:
            raise ValueError(f"Site {domain}{path} already exists") from e
        self.connection.commit()
        return int(cursor.lastrowid)

    def get_site(self, site_id: int) -> dict[str, Any]:
        """Get a site by id.

        Raises:
            SiteNotFoundError: If the site does not exist
        """
        cursor = self.connection.execute("SELECT * FROM sites WHERE id = ?", (site_id,))
        row = cursor.fetchone()
        if row is None:
            raise SiteNotFoundError(site_id)
        return row_to_dict(row)

    def exists(self, site_id: int) -> bool:
        cursor = self.connection.execute("SELECT 1 FROM sites WHERE id = ?", (site_id,))
        return cursor.fetchone() is not None

    def list_sites(self, network_id: int = 1) -> list[dict[str, Any]]:
        """List the sites of a network ordered by id."""
        cursor = self.connection.execute(
            "SELECT * FROM sites WHERE network_id = ? ORDER BY id", (network_id,)
        )
        return [row_to_dict(row) for row in cursor.fetchall()]

    def list_site_ids(self, network_id: int = 1) -> list[int]:
        """List the site ids of a network in ascending order."""
        cursor = self.connection.execute(
            "SELECT id FROM sites WHERE network_id = ? ORDER BY id", (network_id,)
        )
        return [row["id"] for row in cursor.fetchall()]

    def delete_site(self, site_id: int) -> None:
        """Delete a site together with its options.

        Raises:
            SiteNotFoundError: If the site does not exist
        """
        if not self.exists(site_id):
            raise SiteNotFoundError(site_id)
        self.connection.execute("DELETE FROM site_options WHERE site_id = ?", (site_id,))
        self.connection.execute("DELETE FROM sites WHERE id = ?", (site_id,))
        self.connection.commit()

    def ensure_main_site(self, network_id: int = 1, domain: str = "localhost") -> int:
        """Create the main site when the network has none; return its id."""
        site_ids = self.list_site_ids(network_id)
        if site_ids:
            return site_ids[0]
        return self.add_site(domain, "/", network_id)
