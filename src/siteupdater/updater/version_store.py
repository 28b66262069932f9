"""Persistence of configuration records per scope."""

from __future__ import annotations

from siteupdater.models.configuration import ConfigurationRecord, Scope
from siteupdater.services.options_service import OptionsService


class VersionStore:
    """Reads and writes the configuration record holding ``db-version``.

    A write is a full overwrite of the record; callers read-modify-write.
    """

    def __init__(self, options: OptionsService, option_name: str):
        self.options = options
        self.option_name = option_name

    def read(self, scope: Scope) -> ConfigurationRecord:
        """Return the record for *scope* (an empty record if none is stored)."""
        if scope.kind == "network":
            raw = self.options.get_network_option(scope.id, self.option_name)
        else:
            raw = self.options.get_blog_option(scope.id, self.option_name)
        return ConfigurationRecord.from_option(raw)

    def write(self, scope: Scope, record: ConfigurationRecord) -> None:
        value = record.to_option()
        if scope.kind == "network":
            self.options.update_network_option(scope.id, self.option_name, value)
        else:
            self.options.update_blog_option(scope.id, self.option_name, value)

    def current_version(self, scope: Scope) -> int:
        return self.read(scope).db_version
