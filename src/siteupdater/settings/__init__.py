"""Settings option arrays and their sanitizers."""

from .base import SettingsBase
from .network_settings import NetworkSettings
from .site_settings import Settings

__all__ = ["SettingsBase", "Settings", "NetworkSettings"]
