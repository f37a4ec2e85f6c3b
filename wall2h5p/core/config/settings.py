# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for wall2h5p.
Settings are loaded from environment variables with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings().

Example:
    >>> from wall2h5p.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.h5p.default_language)
    'en'
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class H5PSettings(BaseSettings):
    """H5P output configuration.

    Controls the h5p.json metadata block shared by every converter.

    Attributes:
        default_language: Language used when the activity does not declare one.
        license: License code written to h5p.json ("U" = undisclosed).
        embed_types: Embed types advertised in h5p.json.
        locales_dir: Optional override for the l10n JSON directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="H5P_",
        extra="ignore",
    )

    default_language: str = "en"
    license: str = "U"
    embed_types: list[str] = Field(default_factory=lambda: ["div"])
    locales_dir: Path | None = None


class CrosswordSettings(BaseSettings):
    """Crossword layout configuration.

    Attributes:
        min_answer_length: Answers shorter than this are never placed.
    """

    model_config = SettingsConfigDict(
        env_prefix="CROSSWORD_",
        extra="ignore",
    )

    min_answer_length: int = Field(default=1, ge=1)


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        h5p: H5P output settings.
        crossword: Crossword layout settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    h5p: H5PSettings = Field(default_factory=H5PSettings)
    crossword: CrosswordSettings = Field(default_factory=CrosswordSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing.
    """
    get_settings.cache_clear()
