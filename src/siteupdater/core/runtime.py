"""Host runtime state.

The runtime carries what a request to the host would otherwise keep in
globals: which network and site the code is currently acting on, the
execution time limit and the capabilities of the operator.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

DEFAULT_TIME_LIMIT = 30

ACTIVATE_PLUGINS = "activate_plugins"
MANAGE_NETWORK_PLUGINS = "manage_network_plugins"


class Runtime:
    """Mutable execution context shared by the lifecycle flows and the updater."""

    def __init__(
        self,
        network_id: int = 1,
        multisite: bool = False,
        main_site_id: int = 1,
        capabilities: Iterable[str] = (),
        time_limit: int = DEFAULT_TIME_LIMIT,
    ):
        self.network_id = network_id
        self.multisite = multisite
        self.main_site_id = main_site_id
        self.capabilities = set(capabilities)
        self.time_limit = time_limit
        self._site_stack: list[int] = []
        self._current_site_id = main_site_id

    # ------------------------------------------------------------------
    # Site switching
    # ------------------------------------------------------------------

    @property
    def current_site_id(self) -> int:
        return self._current_site_id

    def switch_to_site(self, site_id: int) -> None:
        """Make *site_id* the current site, remembering the previous one."""
        self._site_stack.append(self._current_site_id)
        self._current_site_id = site_id

    def restore_current_site(self) -> bool:
        """Return to the site that was current before the last switch.

        Returns:
            False if there was no switch to undo
        """
        if not self._site_stack:
            return False
        self._current_site_id = self._site_stack.pop()
        return True

    @contextmanager
    def switched_to_site(self, site_id: int) -> Iterator[int]:
        """Act on *site_id* for the duration of the block, restoring on exit."""
        self.switch_to_site(site_id)
        try:
            yield site_id
        finally:
            self.restore_current_site()

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    def current_user_can(self, capability: str) -> bool:
        return capability in self.capabilities

    # ------------------------------------------------------------------
    # Execution time
    # ------------------------------------------------------------------

    def set_time_limit(self, seconds: int) -> int:
        """Set the execution time limit (0 = unlimited); return the old one."""
        if seconds < 0:
            raise ValueError("time limit cannot be negative")
        previous = self.time_limit
        self.time_limit = seconds
        return previous

    @contextmanager
    def unlimited_execution_time(self) -> Iterator[None]:
        """Lift the time limit for the block and put the previous one back."""
        previous = self.set_time_limit(0)
        logger.debug("execution time limit lifted (was %ss)", previous)
        try:
            yield
        finally:
            self.set_time_limit(previous)
