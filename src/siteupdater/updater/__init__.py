"""Versioned, resumable database updates."""

from .registry import RoutineRegistry, UpdateRoutine
from .runner import MultisiteIterator, UpdateContext, Updater, UpdateRunner
from .version_store import VersionStore

__all__ = [
    "RoutineRegistry",
    "UpdateRoutine",
    "UpdateContext",
    "UpdateRunner",
    "MultisiteIterator",
    "Updater",
    "VersionStore",
]
