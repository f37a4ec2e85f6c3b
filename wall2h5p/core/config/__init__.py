# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for wall2h5p.

Example:
    >>> from wall2h5p.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from wall2h5p.core.config.settings import (
    CrosswordSettings,
    H5PSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "H5PSettings",
    "CrosswordSettings",
    "get_settings",
    "clear_settings_cache",
]
