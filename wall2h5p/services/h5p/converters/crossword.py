# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Crossword H5P Converter.

Converts crossword activities to H5P.Crossword format. Words are laid out
by CrosswordLayout; entries it cannot place are reported as package
warnings rather than errors.
"""

from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.crossword_layout import CrosswordEntry, CrosswordLayout
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import CLUE_KEYS, CROSSWORD_ANSWER_KEYS, resolve_field


class CrosswordConverter(BaseH5PConverter):
    """Converter for H5P.Crossword content type.

    Source formats:
        clues: [{"clue": "Feline pet", "answer": "CAT"}]
        content.items: [{"question": "Feline pet", "answer": "CAT"}]

    Answers keep their case and characters. Placement is greedy, so some
    entries may be skipped; each skip is listed in package.warnings.
    """

    @property
    def content_type(self) -> str:
        return "crossword"

    @property
    def library(self) -> str:
        return "H5P.Crossword 0.4"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("crossword",)

    @property
    def default_title(self) -> str:
        return "Crossword"

    @property
    def category(self) -> str:
        return "vocabulary"

    def get_layout(self) -> CrosswordLayout:
        """Build the layout engine from settings."""
        return CrosswordLayout(min_answer_length=self.settings.crossword.min_answer_length)

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a crossword activity to H5P Crossword format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        entries = [self.convert_item(item) for item in self.collect_items(activity, "clues")]
        result = self.get_layout().place(entries)

        content_json = {
            "taskDescription": l10n["taskDescription"],
            "words": [word.to_h5p() for word in result.words],
            "behaviour": self.get_default_behavior(),
            "l10n": dict(l10n.get("l10n", {})),
        }

        return self.build_package(activity, content_json, language, warnings=result.skipped)

    def convert_item(self, item: Any) -> CrosswordEntry:
        """Read one clue/answer pair from a source item."""
        return CrosswordEntry(
            clue=resolve_field(item, CLUE_KEYS),
            answer=resolve_field(item, CROSSWORD_ANSWER_KEYS),
        )

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior for Crossword."""
        return {
            "words": {
                "showSolution": True,
                "enableRetry": True,
            },
            "score": {
                "showScore": True,
            },
        }
