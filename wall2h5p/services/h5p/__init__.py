# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""H5P Conversion Service.

This package converts scraped learning activities into H5P package data.
It includes:
- Models: ActivityPayload (input) and H5PPackageData (output)
- Converters: one per source template kind, looked up through a registry
- CrosswordLayout: greedy grid placement for crossword activities
- Service: single and batch conversion entry points

Usage:
    from wall2h5p.services.h5p import convert_activity

    package = convert_activity({"template": "Missing word", "content": {"items": [...]}})
    files = package.to_h5p()
"""

from wall2h5p.services.h5p.converters import BaseH5PConverter, ConverterRegistry, get_registry
from wall2h5p.services.h5p.crossword_layout import CrosswordEntry, CrosswordLayout, CrosswordResult
from wall2h5p.services.h5p.exceptions import (
    H5PConversionError,
    H5PError,
    UnsupportedTemplateError,
)
from wall2h5p.services.h5p.models import (
    ActivityPayload,
    H5PDependency,
    H5PJson,
    H5PPackageData,
    PlacedWord,
)
from wall2h5p.services.h5p.service import ConversionResult, convert_activity, convert_many

__all__ = [
    "ActivityPayload",
    "H5PDependency",
    "H5PJson",
    "H5PPackageData",
    "PlacedWord",
    "BaseH5PConverter",
    "ConverterRegistry",
    "get_registry",
    "CrosswordEntry",
    "CrosswordLayout",
    "CrosswordResult",
    "ConversionResult",
    "convert_activity",
    "convert_many",
    "H5PError",
    "H5PConversionError",
    "UnsupportedTemplateError",
]
