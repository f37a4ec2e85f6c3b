# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Flashcards H5P Converter.

Converts flashcard activities to H5P.Flashcards format.
"""

from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.converters.matchup import image_ref
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import IMAGE_KEYS, resolve_field

FRONT_KEYS: tuple[str, ...] = ("front", "term", "question")
BACK_KEYS: tuple[str, ...] = ("back", "definition", "answer")


class FlashcardsConverter(BaseH5PConverter):
    """Converter for H5P.Flashcards content type.

    Source formats:
        cards: [{"front": "Bonjour", "back": "Hello", "image": "hi.png"}]
        content.items: [{"term": "Bonjour", "definition": "Hello"}]
    """

    @property
    def content_type(self) -> str:
        return "flashcards"

    @property
    def library(self) -> str:
        return "H5P.Flashcards 1.5"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("flashcard", "flashcards", "cards", "flipcards")

    @property
    def default_title(self) -> str:
        return "Flashcards"

    @property
    def category(self) -> str:
        return "vocabulary"

    @property
    def dependencies(self) -> list[str]:
        return [self.library, "H5P.Text 1.1", "FontAwesome 4.5", "H5P.Image 1.1"]

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a flashcard activity to H5P Flashcards format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        cards = [self.convert_card(card) for card in self.collect_items(activity, "cards")]

        content_json = {
            "description": l10n["description"],
            "cards": cards,
            "progressText": l10n["progressText"],
            "next": l10n["next"],
            "previous": l10n["previous"],
            "checkAnswerText": l10n["checkAnswer"],
            "showSolutionsRequiresInput": True,
            "behaviour": self.get_default_behavior(),
        }

        return self.build_package(activity, content_json, language)

    def convert_card(self, card: Any) -> dict[str, Any]:
        """Build one flashcard."""
        return {
            "text": resolve_field(card, FRONT_KEYS),
            "answer": resolve_field(card, BACK_KEYS),
            "image": image_ref(resolve_field(card, IMAGE_KEYS)),
            "tip": "",
        }

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior for Flashcards."""
        return {
            "enableRetry": True,
            "randomCards": True,
        }
