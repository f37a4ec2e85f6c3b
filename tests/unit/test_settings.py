# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for application settings."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from wall2h5p.core.config.settings import (
    CrosswordSettings,
    H5PSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)


class TestH5PSettings:
    """Tests for H5PSettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        settings = H5PSettings()

        assert settings.default_language == "en"
        assert settings.license == "U"
        assert settings.embed_types == ["div"]
        assert settings.locales_dir is None

    def test_loads_from_environment(self) -> None:
        """Test that settings load from environment variables."""
        env = {
            "H5P_DEFAULT_LANGUAGE": "fr",
            "H5P_LICENSE": "CC BY",
            "H5P_EMBED_TYPES": '["div", "iframe"]',
            "H5P_LOCALES_DIR": "/srv/locales",
        }

        with patch.dict(os.environ, env, clear=False):
            settings = H5PSettings()

        assert settings.default_language == "fr"
        assert settings.license == "CC BY"
        assert settings.embed_types == ["div", "iframe"]
        assert settings.locales_dir == Path("/srv/locales")


class TestCrosswordSettings:
    """Tests for CrosswordSettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        assert CrosswordSettings().min_answer_length == 1

    def test_loads_from_environment(self) -> None:
        """Test that settings load from environment variables."""
        with patch.dict(os.environ, {"CROSSWORD_MIN_ANSWER_LENGTH": "3"}, clear=False):
            settings = CrosswordSettings()

        assert settings.min_answer_length == 3

    def test_min_answer_length_must_be_positive(self) -> None:
        """Test that zero is rejected."""
        with pytest.raises(ValidationError):
            CrosswordSettings(min_answer_length=0)


class TestSettings:
    """Tests for main Settings class."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_subsettings_loaded(self) -> None:
        """Test that all subsettings are loaded."""
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert isinstance(settings.h5p, H5PSettings)
        assert isinstance(settings.crossword, CrosswordSettings)

    def test_invalid_log_level_rejected(self) -> None:
        """Test that unknown log levels fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="VERBOSE")  # type: ignore[call-arg, arg-type]

    def test_is_development_property(self) -> None:
        """Test is_development property."""
        dev_settings = Settings(_env_file=None, environment="development")  # type: ignore[call-arg]
        prod_settings = Settings(_env_file=None, environment="production")  # type: ignore[call-arg]

        assert dev_settings.is_development is True
        assert prod_settings.is_development is False

    def test_is_production_property(self) -> None:
        """Test is_production property."""
        dev_settings = Settings(_env_file=None, environment="development")  # type: ignore[call-arg]
        prod_settings = Settings(_env_file=None, environment="production")  # type: ignore[call-arg]

        assert dev_settings.is_production is False
        assert prod_settings.is_production is True


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self) -> None:
        """Test that get_settings returns a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self) -> None:
        """Test that get_settings returns cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_clear_cache_allows_reload(self) -> None:
        """Test that clearing cache picks up environment changes."""
        settings1 = get_settings()

        with patch.dict(os.environ, {"H5P_DEFAULT_LANGUAGE": "fr"}, clear=False):
            clear_settings_cache()
            settings2 = get_settings()

        assert settings1 is not settings2
        assert settings2.h5p.default_language == "fr"
