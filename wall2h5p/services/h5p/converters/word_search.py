# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Word Search H5P Converter.

Converts word search activities to H5P.WordSearch format. The grid is
generated by the player from the word list.
"""

from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.converters.drag_text import item_text
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import ANSWER_KEYS, PROMPT_KEYS

WORD_KEYS: tuple[str, ...] = ("word",) + ANSWER_KEYS + PROMPT_KEYS


class WordSearchConverter(BaseH5PConverter):
    """Converter for H5P.WordSearch content type.

    Source formats:
        words: ["cat", "dog"]
        content.items: [{"answer": "cat"}, "dog"]
    """

    @property
    def content_type(self) -> str:
        return "word-search"

    @property
    def library(self) -> str:
        return "H5P.WordSearch 1.4"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("wordsearch", "wordfind")

    @property
    def default_title(self) -> str:
        return "Word Search"

    @property
    def category(self) -> str:
        return "vocabulary"

    @property
    def embed_types(self) -> list[str]:
        return ["iframe"]

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a word search activity to H5P WordSearch format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        words = [item_text(entry, WORD_KEYS) for entry in self.collect_items(activity, "words")]

        content_json = {
            "taskDescription": l10n["taskDescription"],
            "wordList": ", ".join(word for word in words if word.strip()),
            "behaviour": self.get_default_behavior(),
            "l10n": dict(l10n.get("l10n", {})),
        }

        return self.build_package(activity, content_json, language)

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior for WordSearch."""
        return {
            "enableRetry": True,
            "showSolutionsButton": True,
        }
