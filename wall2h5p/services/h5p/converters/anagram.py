# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Anagram H5P Converter.

Converts anagram activities to H5P.DragWords format. The scrambled form
is not kept: the player scrambles the drop zones itself.
"""

from typing import Any

from wall2h5p.services.h5p.converters.drag_text import DragTextConverter, item_text
from wall2h5p.services.h5p.text import ANSWER_KEYS


class AnagramConverter(DragTextConverter):
    """Converter for anagram activities.

    Source formats:
        words: [{"scrambled": "tac", "answer": "cat"}]
        content.items: [{"question": "tac", "answer": "cat"}]

    One ``*answer*`` per line. A word without an answer keeps its line
    as an empty ``**`` zone.
    """

    drop_blank_entries = False

    @property
    def content_type(self) -> str:
        return "anagram"

    @property
    def library(self) -> str:
        return "H5P.DragWords 1.11"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("anagram",)

    @property
    def default_title(self) -> str:
        return "Anagram"

    @property
    def category(self) -> str:
        return "vocabulary"

    @property
    def collection_key(self) -> str:
        return "words"

    def entry_text(self, entry: Any) -> str:
        return item_text(entry, ANSWER_KEYS + ("word",))
