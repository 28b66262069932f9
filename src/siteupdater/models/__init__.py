"""siteupdater domain models.

Pydantic models and value types shared by the option store, the updater and
the lifecycle flows.
"""

from .config_models import AppConfig, OutputConfig
from .configuration import DB_VERSION_KEY, ConfigurationRecord, Scope
from .exceptions import (
    InvalidConfigurationError,
    MissingDependencyError,
    PermissionDeniedError,
    RoutineNotFoundError,
    RoutineRegistryError,
    SiteNotFoundError,
    SiteUpdaterError,
)

__all__ = [
    "AppConfig",
    "OutputConfig",
    "DB_VERSION_KEY",
    "ConfigurationRecord",
    "Scope",
    "SiteUpdaterError",
    "RoutineNotFoundError",
    "RoutineRegistryError",
    "InvalidConfigurationError",
    "PermissionDeniedError",
    "MissingDependencyError",
    "SiteNotFoundError",
]
