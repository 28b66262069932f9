"""Base settings class.

Every field id ends with a type suffix; the suffix selects the sanitizer
applied to the submitted value.
"""

from __future__ import annotations

from typing import Any

from siteupdater.settings.sanitizers import (
    sanitize_key,
    sanitize_text_field,
    sanitize_textarea_field,
)

TEXT_SUFFIX = "-tx"
TEXTAREA_SUFFIX = "-ta"
CHECKBOX_SUFFIX = "-cb"
RADIO_SUFFIX = "-rb"
SELECT_SUFFIX = "-sl"

_UNCHECKED = {"", "0", "false", "off", "no"}


def is_checked(value: Any) -> bool:
    """Interpret a submitted checkbox value."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _UNCHECKED
    return bool(value)


class SettingsBase:
    """Shared sanitizing for option arrays made of suffixed field ids."""

    TEXT_SUFFIX = TEXT_SUFFIX
    TEXTAREA_SUFFIX = TEXTAREA_SUFFIX
    CHECKBOX_SUFFIX = CHECKBOX_SUFFIX
    RADIO_SUFFIX = RADIO_SUFFIX
    SELECT_SUFFIX = SELECT_SUFFIX

    def sanitize_options(self, input: dict[str, Any] | None = None) -> dict[str, Any]:
        """Sanitize a collection of submitted options.

        Args:
            input: The unsanitized options keyed by field id

        Returns:
            The sanitized options
        """
        if input is None:
            return {}

        output: dict[str, Any] = {}
        for key, value in input.items():
            if key.endswith(CHECKBOX_SUFFIX):
                output[key] = is_checked(value)
            elif value is None:
                output[key] = ""
            elif key.endswith(RADIO_SUFFIX) or key.endswith(SELECT_SUFFIX):
                # Must be a slug: [a-z0-9_-]
                output[key] = sanitize_key(value)
            elif key.endswith(TEXTAREA_SUFFIX):
                output[key] = sanitize_textarea_field(value)
            else:
                # TEXT_SUFFIX and unknown suffixes
                output[key] = sanitize_text_field(value)
        return output
