"""Shared test fixtures and configuration.

Provides in-memory option stores and hosts so tests never touch the real
config or data directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from siteupdater.adapters.sqlite.connection import open_memory_connection
from siteupdater.adapters.sqlite.option_repository import SqliteOptionRepository
from siteupdater.adapters.sqlite.site_repository import SqliteSiteRepository
from siteupdater.core.runtime import Runtime
from siteupdater.models.config_models import AppConfig
from siteupdater.services.host_service import build_host
from siteupdater.services.options_service import OptionsService


# ---------------------------------------------------------------------------
# Option store
# ---------------------------------------------------------------------------


@pytest.fixture()
def connection():
    conn = open_memory_connection()
    yield conn
    conn.close()


@pytest.fixture()
def repository(connection) -> SqliteOptionRepository:
    return SqliteOptionRepository(connection=connection)


@pytest.fixture()
def sites(connection) -> SqliteSiteRepository:
    repo = SqliteSiteRepository(connection=connection)
    repo.ensure_main_site()
    return repo


@pytest.fixture()
def runtime() -> Runtime:
    """Single-site runtime with full capabilities."""
    return Runtime(capabilities={"activate_plugins", "manage_network_plugins"})


@pytest.fixture()
def network_runtime() -> Runtime:
    """Multi-site runtime with full capabilities."""
    return Runtime(
        multisite=True, capabilities={"activate_plugins", "manage_network_plugins"}
    )


@pytest.fixture()
def options(repository, runtime) -> OptionsService:
    return OptionsService(repository, runtime)


@pytest.fixture()
def network_options(repository, network_runtime) -> OptionsService:
    return OptionsService(repository, network_runtime)


@pytest.fixture()
def network_sites(sites) -> SqliteSiteRepository:
    """Site registry with three sites (ids 1, 2, 3)."""
    sites.add_site("two.example.com")
    sites.add_site("three.example.com")
    return sites


# ---------------------------------------------------------------------------
# Hosts
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_host(connection):
    """Factory building a host over the in-memory store."""

    def _make(**config_overrides):
        return build_host(AppConfig(**config_overrides), connection)

    return _make


@pytest.fixture()
def patch_host(make_host):
    """Patch get_host() in every command module with an in-memory host.

    Usage:
        host = patch_host(multisite=True)
    """
    patchers = []

    def _patch(**config_overrides):
        host = make_host(**config_overrides)
        for module in (
            "activate_command",
            "deactivate_command",
            "update_command",
            "status_command",
            "uninstall_command",
            "sites",
            "settings",
        ):
            patcher = patch(
                f"siteupdater.commands.{module}.get_host", return_value=host
            )
            patcher.start()
            patchers.append(patcher)
        return host

    yield _patch

    for patcher in patchers:
        patcher.stop()


@pytest.fixture(autouse=True)
def isolate_logger(tmp_path):
    """Keep the application log file inside the test's tmp dir."""
    import siteupdater.utils.logger as logger_mod

    original = logger_mod._logger
    logger_mod._logger = None
    with patch("siteupdater.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield

    app_logger = logging.getLogger("siteupdater")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    logger_mod._logger = original
