"""Utility functions for SQLite adapter."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any


def now_iso() -> str:
    """Get current timestamp in ISO format.

    Returns:
        ISO format datetime string
    """
    return datetime.now(UTC).isoformat()


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary.

    Args:
        row: sqlite3.Row object

    Returns:
        Dictionary with column names as keys
    """
    if row is None:
        return {}
    return dict(row)


def encode_value(value: Any) -> str:
    """Serialize an option value for storage.

    Raises:
        TypeError: If the value is not JSON serializable
    """
    return json.dumps(value, sort_keys=True)


def decode_value(raw: str) -> Any:
    """Deserialize a stored option value."""
    return json.loads(raw)
