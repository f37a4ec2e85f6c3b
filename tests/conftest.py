# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all unit tests:
- Activity payload factory
- Settings isolation
- The default converter registry
"""

from collections.abc import Callable, Generator
from typing import Any

import pytest

from wall2h5p.core.config.settings import Settings, clear_settings_cache
from wall2h5p.services.h5p.converters.registry import ConverterRegistry
from wall2h5p.services.h5p.models import ActivityPayload


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_settings() -> Generator[None, None, None]:
    """Reload settings from a clean cache around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Provide default settings, independent of the environment."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


# =============================================================================
# Activity Fixtures
# =============================================================================


@pytest.fixture
def make_activity() -> Callable[..., ActivityPayload]:
    """Factory for activity payloads.

    Usage:
        activity = make_activity("Missing word", items=[{...}])
        activity = make_activity("Crossword", clues=[{...}])
    """

    def _make(
        template: str = "",
        items: Any = None,
        language: str | None = None,
        title: str = "Test Activity",
        **extra: Any,
    ) -> ActivityPayload:
        data: dict[str, Any] = {
            "id": "act-1",
            "url": "https://example.com/resource/1",
            "title": title,
            "template": template,
            "content": {"items": [] if items is None else items},
            "metadata": {"language": language} if language else {},
        }
        data.update(extra)
        return ActivityPayload.from_raw(data)

    return _make


@pytest.fixture
def registry(settings: Settings) -> ConverterRegistry:
    """Provide a registry with every built-in converter."""
    return ConverterRegistry(settings=settings)


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
