"""Environment-based settings.

This module handles only simple environment variables (strings, numbers, booleans).
Structured application configuration lives in config.yaml and config_data.py.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fitness_tracker.runtime.config.config_data import ConfigData


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    config_file: str = Field(default="config.yaml", validation_alias="CONFIG_FILE")
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")
    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

    def apply_to(self, config: ConfigData) -> ConfigData:
        """Return ``config`` with explicitly set environment values layered on top."""
        update: dict[str, object] = {
            "app": config.app.model_copy(update={"environment": self.environment}),
        }
        if self.log_level:
            update["logging"] = config.logging.model_copy(update={"level": self.log_level})
        if self.database_url:
            update["database"] = config.database.model_copy(update={"url": self.database_url})
        return config.model_copy(update=update)
