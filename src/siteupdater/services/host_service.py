"""Wires configuration, option store and runtime into one host object.

Usage:
    from siteupdater.services.host_service import get_host

    host = get_host()
    host.updater.update(DATABASE_VERSION, host.config.configuration_option_name)
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from functools import lru_cache

from siteupdater.adapters.sqlite.connection import get_connection
from siteupdater.adapters.sqlite.option_repository import SqliteOptionRepository
from siteupdater.adapters.sqlite.site_repository import SqliteSiteRepository
from siteupdater.core.runtime import Runtime
from siteupdater.lifecycle.activator import Activator
from siteupdater.lifecycle.deactivator import Deactivator
from siteupdater.lifecycle.uninstaller import Uninstaller
from siteupdater.models.config_models import AppConfig
from siteupdater.services.config_service import get_config_service
from siteupdater.services.options_service import OptionsService
from siteupdater.settings.network_settings import NetworkSettings
from siteupdater.settings.site_settings import Settings
from siteupdater.updater.registry import RoutineRegistry
from siteupdater.updater.routines import registry as default_registry
from siteupdater.updater.runner import Updater
from siteupdater.updater.version_store import VersionStore


@dataclass
class Host:
    """Everything a lifecycle command needs, bound to one option store."""

    config: AppConfig
    runtime: Runtime
    options: OptionsService
    sites: SqliteSiteRepository
    registry: RoutineRegistry

    @property
    def slug(self) -> str:
        return self.config.plugin_slug

    @property
    def default_configuration(self) -> dict:
        return {"db-version": 0}

    @property
    def version_store(self) -> VersionStore:
        return VersionStore(self.options, self.config.configuration_option_name)

    @property
    def updater(self) -> Updater:
        return Updater(self.options, self.sites, self.registry, self.slug)

    @property
    def activator(self) -> Activator:
        return Activator(
            self.options, self.sites, self.slug, self.config.required_components
        )

    @property
    def deactivator(self) -> Deactivator:
        return Deactivator(self.options, self.sites, self.slug)

    @property
    def uninstaller(self) -> Uninstaller:
        return Uninstaller(
            self.options, self.sites, self.slug, self.config.configuration_option_name
        )

    @property
    def settings(self) -> Settings:
        return Settings(self.slug, self.options)

    @property
    def network_settings(self) -> NetworkSettings:
        return NetworkSettings(self.slug, self.options)


def build_host(
    config: AppConfig,
    connection: sqlite3.Connection,
    registry: RoutineRegistry | None = None,
) -> Host:
    """Create a host over *connection* described by *config*."""
    sites = SqliteSiteRepository(connection=connection)
    main_site_id = sites.ensure_main_site(config.network_id)
    runtime = Runtime(
        network_id=config.network_id,
        multisite=config.multisite,
        main_site_id=main_site_id,
        capabilities=config.capabilities,
        time_limit=config.time_limit,
    )
    options = OptionsService(SqliteOptionRepository(connection=connection), runtime)
    return Host(
        config=config,
        runtime=runtime,
        options=options,
        sites=sites,
        registry=registry or default_registry,
    )


@lru_cache(maxsize=1)
def get_host() -> Host:
    """Get the cached host for the configured option store."""
    config_service = get_config_service()
    connection = get_connection(config_service.database_path)
    return build_host(config_service.config, connection)
