"""Uninstall: removes every option the plugin created."""

from __future__ import annotations

import logging

from siteupdater.adapters.sqlite.site_repository import SqliteSiteRepository
from siteupdater.core.runtime import ACTIVATE_PLUGINS, MANAGE_NETWORK_PLUGINS
from siteupdater.models.exceptions import PermissionDeniedError
from siteupdater.services.components_service import ComponentsService
from siteupdater.services.options_service import OptionsService
from siteupdater.settings.network_settings import NetworkSettings
from siteupdater.settings.site_settings import Settings

logger = logging.getLogger(__name__)


class Uninstaller:
    """Deletes the configuration record and the settings of every scope."""

    def __init__(
        self,
        options: OptionsService,
        sites: SqliteSiteRepository,
        plugin_slug: str,
        configuration_option_name: str,
    ):
        self.options = options
        self.sites = sites
        self.plugin_slug = plugin_slug
        self.configuration_option_name = configuration_option_name
        self.settings = Settings(plugin_slug, options)
        self.network_settings = NetworkSettings(plugin_slug, options)
        self.components = ComponentsService(options)

    def uninstall(self) -> None:
        """Remove the plugin's data.

        Raises:
            PermissionDeniedError: The operator may not delete plugins here
        """
        runtime = self.options.runtime
        capability = MANAGE_NETWORK_PLUGINS if runtime.multisite else ACTIVATE_PLUGINS
        if not runtime.current_user_can(capability):
            raise PermissionDeniedError(
                capability, "You don't have proper authorization to delete a plugin!"
            )

        self.delete_config_options()

        if runtime.multisite:
            self.delete_network_options()
            for site_id in self.sites.list_site_ids(runtime.network_id):
                with runtime.switched_to_site(site_id):
                    self.delete_options()
                self.options.delete_blog_option(site_id, self.configuration_option_name)
            logger.info("uninstalled from network %s", runtime.network_id)
        else:
            self.delete_options()
            logger.info("uninstalled from site %s", runtime.current_site_id)

    def delete_config_options(self) -> None:
        """Delete the plugin's configuration data."""
        self.options.delete_network_option(None, self.configuration_option_name)

    def delete_network_options(self) -> None:
        """Delete the plugin's network options."""
        self.options.delete_network_option(
            None, self.network_settings.network_general_option_name
        )
        self.components.deactivate(self.plugin_slug, network_wide=True)

    def delete_options(self) -> None:
        """Delete the plugin's options on the current site."""
        for option_name in self.settings.option_names:
            self.options.delete_option(option_name)
        self.components.deactivate(self.plugin_slug)
