"""Explicit table of numbered update routines.

Routine ``n`` advances a scope from database version ``n - 1`` to ``n``.
The table must be contiguous from 1; ``validate()`` is the startup check.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from siteupdater.models.exceptions import RoutineNotFoundError, RoutineRegistryError

if TYPE_CHECKING:
    from siteupdater.updater.runner import UpdateContext

RoutineFunc = Callable[["UpdateContext"], None]


@dataclass(frozen=True)
class UpdateRoutine:
    """One versioned migration step."""

    version: int
    description: str
    func: RoutineFunc

    def __call__(self, context: UpdateContext) -> None:
        self.func(context)


class RoutineRegistry:
    """Ordered mapping from database version to update routine."""

    def __init__(self, routines: list[UpdateRoutine] | None = None):
        self._routines: dict[int, UpdateRoutine] = {}
        for routine in routines or []:
            self.add(routine)

    def add(self, routine: UpdateRoutine) -> UpdateRoutine:
        """Register a routine.

        Raises:
            RoutineRegistryError: If the version is below 1 or already taken
        """
        if routine.version < 1:
            raise RoutineRegistryError(
                f"Routine version must be >= 1, got {routine.version}"
            )
        if routine.version in self._routines:
            raise RoutineRegistryError(
                f"Duplicate update routine for version {routine.version}"
            )
        self._routines[routine.version] = routine
        return routine

    def register(self, version: int, description: str = "") -> Callable[[RoutineFunc], RoutineFunc]:
        """Decorator registering *func* as the routine for *version*."""

        def decorator(func: RoutineFunc) -> RoutineFunc:
            self.add(
                UpdateRoutine(
                    version=version,
                    description=description or (func.__doc__ or func.__name__).strip(),
                    func=func,
                )
            )
            return func

        return decorator

    def validate(self) -> None:
        """Check that the registered versions are exactly ``1..N``.

        Raises:
            RoutineRegistryError: If there is a gap in the numbering
        """
        missing = [
            version
            for version in range(1, self.latest_version + 1)
            if version not in self._routines
        ]
        if missing:
            raise RoutineRegistryError(
                f"Update routine table has gaps at versions {missing}"
            )

    def get(self, version: int) -> UpdateRoutine:
        """Return the routine for *version*.

        Raises:
            RoutineNotFoundError: If no routine is registered for it
        """
        try:
            return self._routines[version]
        except KeyError:
            raise RoutineNotFoundError(version) from None

    @property
    def latest_version(self) -> int:
        return max(self._routines, default=0)

    def __contains__(self, version: object) -> bool:
        return version in self._routines

    def __iter__(self) -> Iterator[UpdateRoutine]:
        return iter(self._routines[v] for v in sorted(self._routines))

    def __len__(self) -> int:
        return len(self._routines)
