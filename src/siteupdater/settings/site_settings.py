"""Per-site settings: the general options and the input examples."""

from __future__ import annotations

from typing import Any

from siteupdater.services.options_service import OptionsService
from siteupdater.settings.base import (
    CHECKBOX_SUFFIX,
    RADIO_SUFFIX,
    SELECT_SUFFIX,
    TEXT_SUFFIX,
    TEXTAREA_SUFFIX,
    SettingsBase,
)


class Settings(SettingsBase):
    """Settings stored in the current site's options."""

    def __init__(self, plugin_slug: str, options: OptionsService):
        self.plugin_slug = plugin_slug
        self.options = options

        self.general_option_name = f"{plugin_slug}-general"
        self.example_option_name = f"{plugin_slug}-example"

        self.debug_id = "debug" + CHECKBOX_SUFFIX

        self.text_example_id = "text-example" + TEXT_SUFFIX
        self.textarea_example_id = "textarea-example" + TEXTAREA_SUFFIX
        self.checkbox_example_id = "checkbox-example" + CHECKBOX_SUFFIX
        self.radio_example_id = "radio-example" + RADIO_SUFFIX
        self.select_example_id = "select-example" + SELECT_SUFFIX

    @property
    def option_names(self) -> list[str]:
        return [self.general_option_name, self.example_option_name]

    # General options

    def default_general_options(self) -> dict[str, Any]:
        return {self.debug_id: False}

    def get_general_options(self) -> dict[str, Any]:
        """Return the general options, creating the defaults on first read."""
        return self._get_or_create(self.general_option_name, self.default_general_options)

    def update_general_options(self, input: dict[str, Any] | None) -> dict[str, Any]:
        sanitized = self.sanitize_options(input)
        self.options.update_option(self.general_option_name, sanitized)
        return sanitized

    def get_debug(self) -> bool:
        return bool(self.get_general_options().get(self.debug_id, False))

    # Example options

    def default_example_options(self) -> dict[str, Any]:
        return {
            self.text_example_id: "default input example",
            self.textarea_example_id: "",
            self.checkbox_example_id: False,
            self.radio_example_id: "2",
            self.select_example_id: "default",
        }

    def get_example_options(self) -> dict[str, Any]:
        """Return the example options, creating the defaults on first read."""
        return self._get_or_create(self.example_option_name, self.default_example_options)

    def update_example_options(self, input: dict[str, Any] | None) -> dict[str, Any]:
        sanitized = self.sanitize_options(input)
        self.options.update_option(self.example_option_name, sanitized)
        return sanitized

    def get_text_example(self) -> str:
        return self.get_example_options().get(self.text_example_id, "")

    def get_textarea_example(self) -> str:
        return self.get_example_options().get(self.textarea_example_id, "")

    def get_checkbox_example(self) -> bool:
        return bool(self.get_example_options().get(self.checkbox_example_id, False))

    def get_radio_example(self) -> str:
        return self.get_example_options().get(self.radio_example_id, "")

    def get_select_example(self) -> str:
        return self.get_example_options().get(self.select_example_id, "")

    # Helpers

    def option_group(self, option_name: str) -> dict[str, Any]:
        """Return the named option array (general or example)."""
        if option_name in ("general", self.general_option_name):
            return self.get_general_options()
        if option_name in ("example", self.example_option_name):
            return self.get_example_options()
        raise ValueError(f"Unknown settings group '{option_name}'")

    def update_field(self, option_name: str, field_id: str, value: Any) -> dict[str, Any]:
        """Change one field of an option array, sanitizing the whole array."""
        current = dict(self.option_group(option_name))
        current[field_id] = value
        if option_name in ("general", self.general_option_name):
            return self.update_general_options(current)
        return self.update_example_options(current)

    def _get_or_create(self, name: str, defaults) -> dict[str, Any]:
        stored = self.options.get_option(name, {})
        if stored == {} or stored is None:
            stored = defaults()
            self.options.update_option(name, stored)
        return stored
