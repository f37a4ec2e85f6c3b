# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""H5P Converter Registry.

This module provides the dispatch table from source template kinds to
converters. Template kinds are free text as scraped ("Group sort",
"Match up", "True/False"), so lookups go through normalize_template_kind().

The table is built once at construction and is read-only afterwards, so a
registry can be shared across threads.

Usage:
    from wall2h5p.services.h5p.converters import get_registry

    registry = get_registry()

    # Select the converter for a scraped template kind
    converter = registry.select("Missing word")

    # Or convert in one step
    package = registry.convert(activity)

    # List supported template kinds
    kinds = registry.list_template_kinds()
"""

import logging
import re
from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from wall2h5p.core.config.settings import Settings
from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.exceptions import UnsupportedTemplateError
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData

logger = logging.getLogger(__name__)

_KIND_SEPARATORS_RE = re.compile(r"[\s\-_/]+")


def normalize_template_kind(template: str | None) -> str:
    """Normalize a free-text template kind into a lookup key.

    Lowercases and removes whitespace and the separators ``-``, ``_``
    and ``/``: "Group sort" -> "groupsort", "True/False" -> "truefalse".

    Args:
        template: Template kind as scraped. None is treated as "".

    Returns:
        Normalized key.
    """
    return _KIND_SEPARATORS_RE.sub("", template or "").lower()


class ConverterRegistry:
    """Immutable registry of activity converters.

    Each converter is registered under every kind in its template_kinds.
    When two converters claim the same kind, the later one wins and a
    warning is logged.

    Attributes:
        kinds: Read-only mapping of normalized kind to converter.
    """

    def __init__(
        self,
        converters: Iterable[BaseH5PConverter] | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the converter registry.

        Args:
            converters: Converters to register. If None, the default
                converters are loaded.
            settings: Settings passed to the default converters.
        """
        if converters is None:
            converters = default_converters(settings)

        table: dict[str, BaseH5PConverter] = {}
        for converter in converters:
            self._register(table, converter)

        self._kinds: Mapping[str, BaseH5PConverter] = MappingProxyType(table)

    @staticmethod
    def _register(table: dict[str, BaseH5PConverter], converter: BaseH5PConverter) -> None:
        for kind in converter.template_kinds:
            key = normalize_template_kind(kind)
            existing = table.get(key)
            if existing is not None and existing is not converter:
                logger.warning(
                    "Replacing converter for template kind '%s': %s -> %s",
                    key,
                    existing.content_type,
                    converter.content_type,
                )
            table[key] = converter

        logger.debug(
            "Registered converter: %s (%s) for %s",
            converter.content_type,
            converter.library,
            ", ".join(converter.template_kinds),
        )

    @property
    def kinds(self) -> Mapping[str, BaseH5PConverter]:
        return self._kinds

    def get(self, template: str | None) -> BaseH5PConverter | None:
        """Get converter by template kind.

        Args:
            template: Template kind, in any case or spacing.

        Returns:
            Converter instance or None if not found.
        """
        return self._kinds.get(normalize_template_kind(template))

    def select(self, template: str | None) -> BaseH5PConverter:
        """Get the converter for a template kind or fail.

        Args:
            template: Template kind, in any case or spacing.

        Returns:
            Converter instance.

        Raises:
            UnsupportedTemplateError: If no converter handles the kind.
        """
        normalized = normalize_template_kind(template)
        converter = self._kinds.get(normalized)
        if converter is None:
            raise UnsupportedTemplateError(
                template=template or "",
                normalized=normalized,
                supported=self.list_template_kinds(),
            )
        return converter

    def get_by_library(self, library: str) -> BaseH5PConverter | None:
        """Get the first converter emitting an H5P library.

        Args:
            library: H5P library identifier (e.g., "H5P.Blanks 1.14").

        Returns:
            Converter instance or None if not found.
        """
        for converter in self._unique_converters():
            if converter.library == library:
                return converter
        return None

    def has(self, template: str | None) -> bool:
        """Check if a converter handles the template kind."""
        return normalize_template_kind(template) in self._kinds

    def list_template_kinds(self) -> list[str]:
        """List all normalized template kinds, sorted."""
        return sorted(self._kinds)

    def list_content_types(self) -> list[str]:
        """List content types of the registered converters."""
        return [converter.content_type for converter in self._unique_converters()]

    def list_by_category(self, category: str) -> list[str]:
        """List content types by category.

        Args:
            category: Category name (assessment, vocabulary, game).

        Returns:
            List of content type identifiers in the category.
        """
        return [
            converter.content_type
            for converter in self._unique_converters()
            if converter.category == category
        ]

    def get_all_info(self) -> list[dict[str, Any]]:
        """Get information about all registered converters."""
        return [converter.get_content_info() for converter in self._unique_converters()]

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert an activity with the converter for its template.

        Args:
            activity: Normalized activity payload.
            language: Language override.

        Returns:
            H5P package data.

        Raises:
            UnsupportedTemplateError: If no converter handles the template.
            H5PConversionError: If conversion fails.
        """
        converter = self.select(activity.template)
        return converter.safe_convert(activity, language)

    def _unique_converters(self) -> list[BaseH5PConverter]:
        seen: dict[int, BaseH5PConverter] = {}
        for converter in self._kinds.values():
            seen.setdefault(id(converter), converter)
        return list(seen.values())

    def __len__(self) -> int:
        """Get number of registered template kinds."""
        return len(self._kinds)

    def __contains__(self, template: object) -> bool:
        """Check if a template kind is registered."""
        return isinstance(template, str) and self.has(template)


def default_converters(settings: Settings | None = None) -> list[BaseH5PConverter]:
    """Instantiate every built-in converter."""
    from wall2h5p.services.h5p.converters.anagram import AnagramConverter
    from wall2h5p.services.h5p.converters.crossword import CrosswordConverter
    from wall2h5p.services.h5p.converters.fill_blanks import FillBlanksConverter
    from wall2h5p.services.h5p.converters.flashcards import FlashcardsConverter
    from wall2h5p.services.h5p.converters.group_sort import GroupSortConverter
    from wall2h5p.services.h5p.converters.matchup import MatchupConverter
    from wall2h5p.services.h5p.converters.quiz import QuizConverter
    from wall2h5p.services.h5p.converters.random_wheel import RandomWheelConverter
    from wall2h5p.services.h5p.converters.rank_order import RankOrderConverter
    from wall2h5p.services.h5p.converters.true_false import TrueFalseConverter
    from wall2h5p.services.h5p.converters.unjumble import UnjumbleConverter
    from wall2h5p.services.h5p.converters.word_search import WordSearchConverter

    converter_classes: list[type[BaseH5PConverter]] = [
        FillBlanksConverter,
        GroupSortConverter,
        MatchupConverter,
        FlashcardsConverter,
        QuizConverter,
        TrueFalseConverter,
        WordSearchConverter,
        AnagramConverter,
        UnjumbleConverter,
        RankOrderConverter,
        RandomWheelConverter,
        CrosswordConverter,
    ]

    return [converter_class(settings) for converter_class in converter_classes]


@lru_cache(maxsize=1)
def get_registry() -> ConverterRegistry:
    """Get the process-wide default registry."""
    return ConverterRegistry()
