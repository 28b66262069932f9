"""Persisted configuration record and the scopes it lives in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidConfigurationError

DB_VERSION_KEY = "db-version"


@dataclass(frozen=True)
class Scope:
    """A deployment unit owning one configuration record.

    ``network`` scopes live in the network option table (or, on a single-site
    deployment, in the main site's options); ``site`` scopes belong to one
    tenant site.
    """

    kind: Literal["network", "site"]
    id: int

    @classmethod
    def network(cls, network_id: int) -> Scope:
        return cls("network", network_id)

    @classmethod
    def site(cls, site_id: int) -> Scope:
        return cls("site", site_id)

    def __str__(self) -> str:
        return f"{self.kind}:{self.id}"


class ConfigurationRecord(BaseModel):
    """Configuration record with the reserved ``db-version`` key.

    Unknown keys are preserved so a read-modify-write never drops them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, strict=True)

    db_version: int = Field(default=0, alias=DB_VERSION_KEY, ge=0)

    @classmethod
    def from_option(cls, value: Any) -> ConfigurationRecord:
        """Build a record from a raw option value (missing -> empty record)."""
        if value is None or value == {}:
            return cls()
        if not isinstance(value, dict):
            raise InvalidConfigurationError(
                f"Configuration record must be a mapping, got {type(value).__name__}"
            )
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid configuration record: {e}") from e

    def to_option(self) -> dict[str, Any]:
        """Serialize back to the stored mapping."""
        return self.model_dump(by_alias=True)
