"""Deactivation of the plugin. Options are kept until uninstall."""

from __future__ import annotations

import logging

from siteupdater.adapters.sqlite.site_repository import SqliteSiteRepository
from siteupdater.core.runtime import ACTIVATE_PLUGINS, MANAGE_NETWORK_PLUGINS
from siteupdater.models.exceptions import PermissionDeniedError
from siteupdater.services.components_service import ComponentsService
from siteupdater.services.options_service import OptionsService

logger = logging.getLogger(__name__)


class Deactivator:
    """Runs the deactivation flow for one plugin."""

    def __init__(
        self,
        options: OptionsService,
        sites: SqliteSiteRepository,
        plugin_slug: str,
    ):
        self.options = options
        self.sites = sites
        self.plugin_slug = plugin_slug
        self.components = ComponentsService(options)

    def deactivate(self, network_wide: bool) -> list[int]:
        """Deactivate the plugin on one site or on the whole network.

        Returns:
            Ids of the sites the per-site deactivation ran on

        Raises:
            PermissionDeniedError: The operator may not deactivate plugins here
        """
        runtime = self.options.runtime

        if runtime.multisite and network_wide:
            self._require(MANAGE_NETWORK_PLUGINS)
            deactivated = []
            for site_id in self.sites.list_site_ids(runtime.network_id):
                with runtime.switched_to_site(site_id):
                    self.on_deactivation()
                deactivated.append(site_id)
            self.components.deactivate(self.plugin_slug, network_wide=True)
            logger.info("deactivated network-wide on sites %s", deactivated)
            return deactivated

        self._require(ACTIVATE_PLUGINS)
        self.on_deactivation()
        logger.info("deactivated on site %s", runtime.current_site_id)
        return [runtime.current_site_id]

    def on_deactivation(self) -> None:
        """Per-site deactivation work, run with the site already switched to."""
        self.components.deactivate(self.plugin_slug)

    def _require(self, capability: str) -> None:
        if not self.options.runtime.current_user_can(capability):
            raise PermissionDeniedError(
                capability, "You don't have proper authorization to deactivate a plugin!"
            )
