"""Configuration service for siteupdater.

This module provides the ConfigService class, the single source of truth for
the CLI configuration. It handles:

- Loading and saving config.json
- Dot-separated key access (get / set / reset)
- Resolving the option store location
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from siteupdater.models.config_models import AppConfig


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("siteupdater"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("siteupdater"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def database_path(self) -> Path:
        """Location of the option store."""
        if self.config.database_path:
            return Path(self.config.database_path).expanduser()
        return self.data_dir / "network.db"

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except ValidationError as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
            ValueError: If the value does not validate
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(f"Configuration key '{key}' not found")
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(f"Configuration key '{key}' not found")

        current[keys[-1]] = value

        try:
            self._config = AppConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {e}") from e
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset configuration (or one key) to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default_value = self.get_from_config(AppConfig(), key)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump()
        self.set(key, default_value)

    @staticmethod
    def get_from_config(config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
