# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Base H5P Converter.

This module defines the abstract base class for all activity converters.
Each template converter must inherit from this class and implement the
required properties and convert().

The converter is responsible for:
1. Reading the loosely-typed activity items with safe defaults
2. Building the template-specific content.json block
3. Building the h5p.json metadata block (title, language, dependencies)
4. Providing localization support

Converters hold no per-conversion state, so one instance can serve any
number of conversions, including concurrent ones.

Example:
    class RankOrderConverter(BaseH5PConverter):
        @property
        def content_type(self) -> str:
            return "rank-order"

        @property
        def library(self) -> str:
            return "H5P.DragText 1.10"

        @property
        def template_kinds(self) -> tuple[str, ...]:
            return ("rankorder",)

        def convert(self, activity, language=None):
            ...
            return self.build_package(activity, content_json, language)
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

from wall2h5p.core.config.settings import Settings, get_settings
from wall2h5p.services.h5p.exceptions import H5PConversionError, H5PError
from wall2h5p.services.h5p.models import (
    ActivityPayload,
    H5PDependency,
    H5PJson,
    H5PPackageData,
)

logger = logging.getLogger(__name__)

_LOCALES_DIR = Path(__file__).resolve().parents[1] / "locales"

CORRUPTED_ITEMS_WARNING = "Activity items were not a sequence; converted as empty"


@lru_cache(maxsize=256)
def _load_locale_file(path: str) -> dict[str, Any]:
    """Load and cache a JSON locale file."""
    p = Path(path)
    if not p.exists():
        return {}
    with p.open(encoding="utf-8") as f:
        return json.load(f)


class BaseH5PConverter(ABC):
    """Abstract base class for activity to H5P converters.

    Attributes:
        content_type: Identifier of the H5P content type (e.g. "fill-blanks").
        library: Full H5P library identifier (e.g. "H5P.Blanks 1.14").
        template_kinds: Normalized source template kinds handled.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize the converter.

        Args:
            settings: Optional settings. Defaults to get_settings().
        """
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    @abstractmethod
    def content_type(self) -> str:
        """Get the content type identifier.

        Returns:
            Content type string, also the locale directory name.
        """
        pass

    @property
    @abstractmethod
    def library(self) -> str:
        """Get the main H5P library identifier.

        Returns:
            Full H5P library string (e.g., "H5P.Blanks 1.14").
        """
        pass

    @property
    @abstractmethod
    def template_kinds(self) -> tuple[str, ...]:
        """Get the normalized template kinds this converter handles.

        Kinds are lowercase with whitespace and separators removed
        ("Missing word" -> "missingword").
        """
        pass

    @property
    def default_title(self) -> str:
        """Title used when the activity has none."""
        return "Activity"

    @property
    def category(self) -> str:
        """Get the content category (assessment, vocabulary, game)."""
        return "assessment"

    @property
    def dependencies(self) -> list[str]:
        """Get the preloaded dependencies written to h5p.json.

        The main library must come first.
        """
        return [self.library]

    @property
    def embed_types(self) -> list[str]:
        """Get the embed types written to h5p.json."""
        return list(self.settings.h5p.embed_types)

    @property
    def machine_name(self) -> str:
        """Main library name without version (h5p.json mainLibrary)."""
        return self.library.split(" ", 1)[0]

    @abstractmethod
    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a scraped activity to H5P package data.

        Implementations must be total: missing or malformed fields are
        replaced with defaults, never raised.

        Args:
            activity: Normalized activity payload.
            language: Language override. Defaults to the activity language.

        Returns:
            H5P package data.
        """
        pass

    def safe_convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert with structural checks and error wrapping.

        Args:
            activity: Normalized activity payload.
            language: Language override.

        Returns:
            H5P package data.

        Raises:
            H5PConversionError: If the converter failed unexpectedly.
        """
        try:
            package = self.convert(activity, language)
        except H5PError:
            raise
        except Exception as e:
            raise H5PConversionError(
                message=f"Conversion failed: {str(e)}",
                content_type=self.content_type,
                source_format=activity.template or "activity",
                details={"error": str(e), "activity_id": activity.id},
            ) from e

        if activity.content.corrupted and CORRUPTED_ITEMS_WARNING not in package.warnings:
            package.warnings.insert(0, CORRUPTED_ITEMS_WARNING)

        return package

    def resolve_language(self, activity: ActivityPayload, language: str | None = None) -> str:
        """Pick the output language: explicit, then activity, then default."""
        return language or activity.language or self.settings.h5p.default_language

    def collect_items(self, activity: ActivityPayload, *keys: str) -> list[Any]:
        """Get the source items for this template.

        Template-specific top-level collections (e.g. "clues") take
        precedence over content.items. A collection that is present but
        not a list yields no items.

        Args:
            activity: Activity payload.
            *keys: Top-level collection names to try, in order.

        Returns:
            A list of items (possibly empty).
        """
        for key in keys:
            value = activity.extra(key)
            if isinstance(value, (list, tuple)):
                return list(value)
            if value is not None:
                logger.warning(
                    "Non-sequence '%s' collection on activity %s, converting as empty",
                    key,
                    activity.id or "<unknown>",
                )
                return []
        return list(activity.items)

    def get_l10n(self, language: str = "en", content_type: str | None = None) -> dict[str, Any]:
        """Load l10n strings from JSON locale files.

        Merges: _common/{lang}.json + {content_type}/{lang}.json
        Content-type strings override common strings.
        Falls back to English if the requested language file is not found.

        Args:
            language: Language code (e.g., "en", "fr").
            content_type: Locale directory to read. Defaults to self.content_type.

        Returns:
            Merged dictionary of localized strings.
        """
        locales_dir = self.settings.h5p.locales_dir or _LOCALES_DIR
        ct = content_type or self.content_type

        common = dict(_load_locale_file(str(locales_dir / "_common" / "en.json")))
        if language != "en":
            common.update(_load_locale_file(str(locales_dir / "_common" / f"{language}.json")))

        ct_strings = dict(_load_locale_file(str(locales_dir / ct / "en.json")))
        if language != "en":
            ct_strings.update(_load_locale_file(str(locales_dir / ct / f"{language}.json")))

        merged = common
        merged.update(ct_strings)
        return merged

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior settings for this content type."""
        return {
            "enableRetry": True,
            "enableSolutionsButton": True,
        }

    def build_h5p_json(self, activity: ActivityPayload, language: str) -> H5PJson:
        """Build the h5p.json metadata block.

        Args:
            activity: Source activity (for the title).
            language: Resolved output language.

        Returns:
            H5PJson model.
        """
        return H5PJson(
            title=activity.title or self.default_title,
            language=language,
            main_library=self.machine_name,
            embed_types=self.embed_types,
            license=self.settings.h5p.license,
            preloaded_dependencies=[H5PDependency.parse(lib) for lib in self.dependencies],
        )

    def build_package(
        self,
        activity: ActivityPayload,
        content_json: dict[str, Any],
        language: str,
        warnings: Sequence[str] = (),
    ) -> H5PPackageData:
        """Assemble the package from its content block.

        Args:
            activity: Source activity.
            content_json: Template-specific content block.
            language: Resolved output language.
            warnings: Non-fatal diagnostics to attach.

        Returns:
            H5PPackageData.
        """
        return H5PPackageData(
            h5p_json=self.build_h5p_json(activity, language),
            content_json=content_json,
            warnings=list(warnings),
        )

    def get_content_info(self) -> dict[str, Any]:
        """Get content type information for documentation.

        Returns:
            Dictionary with content type details.
        """
        return {
            "content_type": self.content_type,
            "library": self.library,
            "category": self.category,
            "template_kinds": list(self.template_kinds),
        }
