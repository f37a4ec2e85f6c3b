# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity to H5P Converters.

This package provides converters that transform scraped activities into
H5P package data (h5p.json + content.json). Each source template kind
has a dedicated converter that handles its loosely-typed input shapes.

The converter system follows a registry pattern:
1. BaseH5PConverter: Abstract base class defining the converter interface
2. ConverterRegistry: Immutable dispatch table from template kind to converter
3. Template-specific converters: Implement the actual conversion logic

Usage:
    from wall2h5p.services.h5p.converters import get_registry

    registry = get_registry()
    converter = registry.select("Group sort")
    package = converter.convert(activity)

Available Converters:
- Assessment: FillBlanks, Quiz, TrueFalse
- Vocabulary: Flashcards, Crossword, WordSearch, Anagram
- Game: GroupSort, Matchup, Unjumble, RankOrder, RandomWheel
"""

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.converters.registry import (
    ConverterRegistry,
    default_converters,
    get_registry,
    normalize_template_kind,
)

__all__ = [
    "BaseH5PConverter",
    "ConverterRegistry",
    "default_converters",
    "get_registry",
    "normalize_template_kind",
]
