"""SQLite adapter module - option store implementation."""

from siteupdater.adapters.sqlite.connection import (
    DatabaseConnection,
    get_connection,
    open_memory_connection,
)
from siteupdater.adapters.sqlite.option_repository import SqliteOptionRepository
from siteupdater.adapters.sqlite.site_repository import SqliteSiteRepository

__all__ = [
    "DatabaseConnection",
    "get_connection",
    "open_memory_connection",
    "SqliteOptionRepository",
    "SqliteSiteRepository",
]
