# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for wall2h5p.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
"""

from wall2h5p.utils.logging import (
    bind_context,
    bound_context,
    clear_context,
    get_logger,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "bind_context",
    "bound_context",
    "clear_context",
]
