"""Core runtime primitives."""

from .runtime import (
    ACTIVATE_PLUGINS,
    DEFAULT_TIME_LIMIT,
    MANAGE_NETWORK_PLUGINS,
    Runtime,
)

__all__ = ["ACTIVATE_PLUGINS", "DEFAULT_TIME_LIMIT", "MANAGE_NETWORK_PLUGINS", "Runtime"]
