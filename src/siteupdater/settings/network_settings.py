"""Network-wide settings stored in the network options."""

from __future__ import annotations

from typing import Any

from siteupdater.services.options_service import OptionsService
from siteupdater.settings.base import CHECKBOX_SUFFIX, SettingsBase


class NetworkSettings(SettingsBase):
    """General options shared by every site of the network."""

    def __init__(self, plugin_slug: str, options: OptionsService):
        self.plugin_slug = plugin_slug
        self.options = options
        self.network_general_option_name = f"{plugin_slug}-network-general"
        self.debug_id = "debug" + CHECKBOX_SUFFIX

    @property
    def network_id(self) -> int:
        return self.options.runtime.network_id

    def default_network_general_options(self) -> dict[str, Any]:
        return {self.debug_id: False}

    def get_network_general_options(self) -> dict[str, Any]:
        """Return the network general options, creating the defaults on first read."""
        stored = self.options.get_network_option(
            self.network_id, self.network_general_option_name, {}
        )
        if stored == {} or stored is None:
            stored = self.default_network_general_options()
            self.options.update_network_option(
                self.network_id, self.network_general_option_name, stored
            )
        return stored

    def update_network_options(self, input: dict[str, Any] | None) -> dict[str, Any]:
        """Sanitize and store submitted network options."""
        sanitized = self.sanitize_options(input)
        self.options.update_network_option(
            self.network_id, self.network_general_option_name, sanitized
        )
        return sanitized

    def update_field(self, field_id: str, value: Any) -> dict[str, Any]:
        current = dict(self.get_network_general_options())
        current[field_id] = value
        return self.update_network_options(current)

    def get_debug(self) -> bool:
        return bool(self.get_network_general_options().get(self.debug_id, False))
