# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Match Up H5P Converter.

Converts match-up (paired matching) activities to H5P.MemoryGame format.
"""

from collections.abc import Mapping
from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import IMAGE_KEYS, display_text, resolve_field

LEFT_KEYS: tuple[str, ...] = ("term", "question")
RIGHT_KEYS: tuple[str, ...] = ("definition", "answer")


def image_ref(value: Any) -> dict[str, str] | None:
    """Return an H5P image reference, or None for a missing/blank path."""
    if isinstance(value, str) and value.strip():
        return {"path": value}
    return None


class MatchupConverter(BaseH5PConverter):
    """Converter for H5P.MemoryGame content type.

    Source formats:
        pairs: [{"left": "Chien", "right": "Dog", "leftImage": "dog.png"}]
        content.items: [{"term": "Chien", "definition": "Dog", "image": "dog.png"}]

    Each pair becomes one card whose text and matchAlt are the two sides.
    """

    @property
    def content_type(self) -> str:
        return "memory-game"

    @property
    def library(self) -> str:
        return "H5P.MemoryGame 1.3"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("matchup", "match", "pairs", "matchingpairs")

    @property
    def default_title(self) -> str:
        return "Match Up"

    @property
    def category(self) -> str:
        return "game"

    @property
    def dependencies(self) -> list[str]:
        return [self.library, "H5P.Text 1.1", "FontAwesome 4.5", "H5P.JoubelUI 1.3"]

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a match-up activity to H5P MemoryGame format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        pairs = activity.extra("pairs")
        if isinstance(pairs, list):
            cards = [self.convert_pair(pair) for pair in pairs]
        else:
            cards = [self.convert_item(item) for item in activity.items]

        content_json = {
            "cards": cards,
            "behaviour": self.get_default_behavior(),
            "l10n": dict(l10n.get("l10n", {})),
        }

        return self.build_package(activity, content_json, language)

    def convert_pair(self, pair: Any) -> dict[str, Any]:
        """Build a card from a {left, right, leftImage|image} pair."""
        if not isinstance(pair, Mapping):
            pair = {}
        return {
            "image": image_ref(pair.get("leftImage")) or image_ref(pair.get("image")),
            "text": display_text(pair.get("left")),
            "matchAlt": display_text(pair.get("right")),
        }

    def convert_item(self, item: Any) -> dict[str, Any]:
        """Build a card from a term/definition item."""
        return {
            "image": image_ref(resolve_field(item, IMAGE_KEYS)),
            "text": resolve_field(item, LEFT_KEYS),
            "matchAlt": resolve_field(item, RIGHT_KEYS),
        }

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior for MemoryGame."""
        return {
            "allowRetry": True,
            "useGrid": True,
            "cardsToUse": "all",
        }
