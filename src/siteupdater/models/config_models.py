"""Configuration models for siteupdater.

The application configuration describes the deployment the CLI operates on:
which option database to open, whether it is a multi-site network, and which
capabilities the operator holds.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_CAPABILITIES = ["activate_plugins", "manage_network_plugins"]


class OutputConfig(BaseModel):
    """Default output of the listing commands (overridden by --output)."""

    format: Literal["table", "json", "yaml"] = Field(default="table")


class AppConfig(BaseModel):
    """Main siteupdater configuration"""

    plugin_slug: str = Field(default="plugin-name", description="Plugin identifier")
    database_path: str | None = Field(
        default=None, description="Option store path (defaults to the data dir)"
    )
    multisite: bool = Field(default=False, description="Multi-site network deployment")
    network_id: int = Field(default=1, ge=1)
    capabilities: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CAPABILITIES),
        description="Capabilities granted to the operator",
    )
    required_components: list[str] = Field(
        default_factory=list,
        description="Components that must be active before activation",
    )
    time_limit: int = Field(default=30, ge=0, description="Execution time limit (s)")

    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("plugin_slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Slugs must be usable as option name prefixes."""
        v = v.strip()
        if not v:
            raise ValueError("plugin_slug cannot be empty")
        return v

    @property
    def configuration_option_name(self) -> str:
        """Name of the option holding the configuration record."""
        return f"{self.plugin_slug}-configuration"
