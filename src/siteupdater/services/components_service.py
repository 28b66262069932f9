"""Tracks which components (plugins) are active per site and network-wide."""

from __future__ import annotations

from siteupdater.services.options_service import OptionsService

ACTIVE_COMPONENTS_OPTION = "active_components"
ACTIVE_SITEWIDE_COMPONENTS_OPTION = "active_sitewide_components"


class ComponentsService:
    """Active-component bookkeeping stored in the option tables."""

    def __init__(self, options: OptionsService):
        self.options = options

    def active_components(self) -> list[str]:
        return list(self.options.get_option(ACTIVE_COMPONENTS_OPTION, []) or [])

    def network_active_components(self) -> list[str]:
        if not self.options.runtime.multisite:
            return []
        return list(
            self.options.get_network_option(None, ACTIVE_SITEWIDE_COMPONENTS_OPTION, [])
            or []
        )

    def is_active(self, name: str) -> bool:
        """Active on the current site, either directly or network-wide."""
        return name in self.active_components() or self.is_active_for_network(name)

    def is_active_for_network(self, name: str) -> bool:
        return name in self.network_active_components()

    def activate(self, name: str, network_wide: bool = False) -> None:
        if network_wide and self.options.runtime.multisite:
            components = self.network_active_components()
            if name not in components:
                components.append(name)
                self.options.update_network_option(
                    None, ACTIVE_SITEWIDE_COMPONENTS_OPTION, sorted(components)
                )
            return

        components = self.active_components()
        if name not in components:
            components.append(name)
            self.options.update_option(ACTIVE_COMPONENTS_OPTION, sorted(components))

    def deactivate(self, name: str, network_wide: bool = False) -> None:
        if network_wide and self.options.runtime.multisite:
            components = self.network_active_components()
            if name in components:
                components.remove(name)
                self.options.update_network_option(
                    None, ACTIVE_SITEWIDE_COMPONENTS_OPTION, components
                )
            return

        components = self.active_components()
        if name in components:
            components.remove(name)
            self.options.update_option(ACTIVE_COMPONENTS_OPTION, components)
