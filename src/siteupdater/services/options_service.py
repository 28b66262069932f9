"""Option access bound to the runtime's current site.

``OptionsService`` mirrors the host option API: plain options belong to the
current site, blog options to an explicit site, and network options to the
network table on a multi-site deployment or to the current site otherwise.
"""

from __future__ import annotations

from typing import Any

from siteupdater.adapters.sqlite.option_repository import SqliteOptionRepository
from siteupdater.core.runtime import Runtime


class OptionsService:
    """Service for reading and writing options in the current runtime context."""

    def __init__(self, repository: SqliteOptionRepository, runtime: Runtime):
        self.repository = repository
        self.runtime = runtime

    # Current site

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.repository.get_site_option(self.runtime.current_site_id, name, default)

    def add_option(self, name: str, value: Any) -> bool:
        return self.repository.add_site_option(self.runtime.current_site_id, name, value)

    def update_option(self, name: str, value: Any) -> bool:
        return self.repository.update_site_option(self.runtime.current_site_id, name, value)

    def delete_option(self, name: str) -> bool:
        return self.repository.delete_site_option(self.runtime.current_site_id, name)

    # Explicit site

    def get_blog_option(self, site_id: int, name: str, default: Any = None) -> Any:
        return self.repository.get_site_option(site_id, name, default)

    def update_blog_option(self, site_id: int, name: str, value: Any) -> bool:
        return self.repository.update_site_option(site_id, name, value)

    def delete_blog_option(self, site_id: int, name: str) -> bool:
        return self.repository.delete_site_option(site_id, name)

    # Network

    def get_network_option(
        self, network_id: int | None, name: str, default: Any = None
    ) -> Any:
        """Read a network option (site option fallback on single-site)."""
        if not self.runtime.multisite:
            return self.get_option(name, default)
        return self.repository.get_network_option(
            self._network(network_id), name, default
        )

    def add_network_option(self, network_id: int | None, name: str, value: Any) -> bool:
        if not self.runtime.multisite:
            return self.add_option(name, value)
        return self.repository.add_network_option(self._network(network_id), name, value)

    def update_network_option(
        self, network_id: int | None, name: str, value: Any
    ) -> bool:
        if not self.runtime.multisite:
            return self.update_option(name, value)
        return self.repository.update_network_option(
            self._network(network_id), name, value
        )

    def delete_network_option(self, network_id: int | None, name: str) -> bool:
        if not self.runtime.multisite:
            return self.delete_option(name)
        return self.repository.delete_network_option(self._network(network_id), name)

    def _network(self, network_id: int | None) -> int:
        return self.runtime.network_id if network_id is None else network_id
