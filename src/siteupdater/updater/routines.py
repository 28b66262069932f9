"""The shipped update routines.

Each routine runs with the runtime switched to the scope being updated, so
plain option calls act on that site.
"""

from __future__ import annotations

from siteupdater.settings.site_settings import Settings
from siteupdater.updater.registry import RoutineRegistry
from siteupdater.updater.runner import UpdateContext

registry = RoutineRegistry()


@registry.register(1, "Back-fill default general and example settings")
def backfill_default_settings(context: UpdateContext) -> None:
    settings = Settings(context.plugin_slug, context.options)
    stored_general = context.options.get_option(settings.general_option_name, {}) or {}
    stored_example = context.options.get_option(settings.example_option_name, {}) or {}

    # Stored values win over defaults
    context.options.update_option(
        settings.general_option_name,
        {**settings.default_general_options(), **stored_general},
    )
    context.options.update_option(
        settings.example_option_name,
        {**settings.default_example_options(), **stored_example},
    )


@registry.register(2, "Re-sanitize stored site settings")
def resanitize_settings(context: UpdateContext) -> None:
    settings = Settings(context.plugin_slug, context.options)
    for option_name in settings.option_names:
        stored = context.options.get_option(option_name)
        if isinstance(stored, dict):
            context.options.update_option(option_name, settings.sanitize_options(stored))


registry.validate()

DATABASE_VERSION = registry.latest_version
