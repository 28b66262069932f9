"""Activation of the plugin.

Prepares everything the plugin needs before it runs: the configuration
record, per-site setup on a network and the active flags. On a network-wide
activation the per-site part is repeated for every site.
"""

from __future__ import annotations

import logging
from typing import Any

from siteupdater.adapters.sqlite.site_repository import SqliteSiteRepository
from siteupdater.core.runtime import ACTIVATE_PLUGINS, MANAGE_NETWORK_PLUGINS
from siteupdater.models.exceptions import MissingDependencyError, PermissionDeniedError
from siteupdater.services.components_service import ComponentsService
from siteupdater.services.options_service import OptionsService

logger = logging.getLogger(__name__)


class Activator:
    """Runs the activation flow for one plugin."""

    def __init__(
        self,
        options: OptionsService,
        sites: SqliteSiteRepository,
        plugin_slug: str,
        required_components: list[str] | None = None,
    ):
        self.options = options
        self.sites = sites
        self.plugin_slug = plugin_slug
        self.required_components = list(required_components or [])
        self.components = ComponentsService(options)

    @property
    def runtime(self):
        return self.options.runtime

    def activate(
        self,
        network_wide: bool,
        configuration: dict[str, Any],
        configuration_option_name: str,
    ) -> list[int]:
        """Activate the plugin.

        Args:
            network_wide: Plugin is network-wide activated or not
            configuration: Default configuration record
            configuration_option_name: Option holding the configuration record

        Returns:
            Ids of the sites the per-site activation ran on

        Raises:
            PermissionDeniedError: The operator may not activate plugins here
            MissingDependencyError: A required component is not active
        """
        # Existing configuration is kept as it is
        self.options.add_network_option(None, configuration_option_name, configuration)

        if self.runtime.multisite and network_wide:
            self._require(MANAGE_NETWORK_PLUGINS, network_wide=True)

            activated = []
            for site_id in self.sites.list_site_ids(self.runtime.network_id):
                with self.runtime.switched_to_site(site_id):
                    self._check_dependencies(network_wide=True, site_id=site_id)
                    self.on_activation(configuration, configuration_option_name)
                activated.append(site_id)

            self.components.activate(self.plugin_slug, network_wide=True)
            logger.info("activated network-wide on sites %s", activated)
            return activated

        self._require(ACTIVATE_PLUGINS, network_wide=False)
        self._check_dependencies()
        self.on_activation(configuration, configuration_option_name)
        self.components.activate(self.plugin_slug)
        logger.info("activated on site %s", self.runtime.current_site_id)
        return [self.runtime.current_site_id]

    def activate_new_site(
        self,
        site_id: int,
        configuration: dict[str, Any],
        configuration_option_name: str,
    ) -> bool:
        """Set up a newly created site if the plugin is network-wide active.

        Returns:
            True when the per-site activation ran
        """
        if not self.components.is_active_for_network(self.plugin_slug):
            return False

        with self.runtime.switched_to_site(site_id):
            self._check_dependencies(network_wide=True, site_id=site_id)
            self.on_activation(configuration, configuration_option_name)
        logger.info("activated on new site %s", site_id)
        return True

    def on_activation(
        self, configuration: dict[str, Any], configuration_option_name: str
    ) -> None:
        """Per-site activation work, run with the site already switched to."""
        if self.runtime.multisite:
            # Each site tracks its own db-version
            self.options.add_option(configuration_option_name, configuration)

    def _require(self, capability: str, network_wide: bool) -> None:
        if self.runtime.current_user_can(capability):
            return
        self.components.deactivate(self.plugin_slug, network_wide=network_wide)
        raise PermissionDeniedError(
            capability, "You don't have proper authorization to activate a plugin!"
        )

    def _check_dependencies(
        self, network_wide: bool = False, site_id: int | None = None
    ) -> None:
        """Check whether the required components are active."""
        for component in self.required_components:
            if not self.components.is_active(component):
                self.components.deactivate(self.plugin_slug, network_wide=network_wide)
                raise MissingDependencyError(component, site_id if network_wide else None)
