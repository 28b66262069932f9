"""Database connection management for the SQLite option store.

This module provides a singleton connection manager for the option database,
ensuring proper connection lifecycle, WAL mode, and schema creation.
"""

from __future__ import annotations

import atexit
import logging
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from siteupdater.adapters.sqlite import schema

logger = logging.getLogger(__name__)


def configure_connection(connection: sqlite3.Connection) -> sqlite3.Connection:
    """Apply connection settings and make sure the schema exists.

    Args:
        connection: Freshly opened connection

    Returns:
        The same connection, ready for use
    """
    connection.row_factory = sqlite3.Row  # Enable dict-like access
    connection.execute("PRAGMA foreign_keys = ON")
    connection.execute("PRAGMA journal_mode = WAL")

    for table_sql in schema.ALL_TABLES:
        connection.execute(table_sql)
    for index_sql in schema.ALL_INDEXES:
        connection.execute(index_sql)
    connection.commit()
    return connection


def open_memory_connection() -> sqlite3.Connection:
    """Open a configured in-memory option store."""
    return configure_connection(sqlite3.connect(":memory:"))


class DatabaseConnection:
    """Singleton connection manager for the option store.

    Provides:
    - Single connection per process (connection reuse)
    - WAL mode
    - Automatic directory and schema creation
    - Proper file permissions (owner read/write only)
    - Graceful cleanup on exit
    """

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None

    def __new__(cls) -> DatabaseConnection:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Get or create database connection.

        Args:
            db_path: Path to database file. If None, uses default location.

        Returns:
            sqlite3.Connection configured for the option store
        """
        instance = cls()

        if db_path is None:
            db_path = Path(user_data_dir("siteupdater")) / "network.db"
        else:
            db_path = Path(db_path)

        if instance._connection is not None and instance._db_path == db_path:
            return instance._connection

        # Close existing connection if path changed
        if instance._connection is not None:
            instance._connection.close()

        db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not db_path.exists()

        connection = sqlite3.connect(str(db_path), timeout=30.0)
        configure_connection(connection)

        if is_new_database:
            os.chmod(db_path, 0o600)
            logger.info("created option store at %s", db_path)

        instance._connection = connection
        instance._db_path = db_path

        atexit.register(cls.close_connection)

        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Close database connection gracefully."""
        instance = cls()
        if instance._connection is not None:
            try:
                instance._connection.commit()
                instance._connection.close()
            except sqlite3.Error as e:
                logger.warning("error while closing option store: %s", e)
            finally:
                instance._connection = None
                instance._db_path = None


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Helper function to get database connection.

    Args:
        db_path: Optional path to database file

    Returns:
        Configured sqlite3.Connection
    """
    return DatabaseConnection.get_connection(db_path)
