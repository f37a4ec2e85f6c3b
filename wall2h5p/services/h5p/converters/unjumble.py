# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unjumble H5P Converter.

Converts unjumble (sentence reordering) activities to H5P.DragText format.
"""

from typing import Any

from wall2h5p.services.h5p.converters.drag_text import DragTextConverter, item_text
from wall2h5p.services.h5p.text import ANSWER_KEYS, PROMPT_KEYS, emphasize

SENTENCE_KEYS: tuple[str, ...] = ("correct",) + ANSWER_KEYS + PROMPT_KEYS


class UnjumbleConverter(DragTextConverter):
    """Converter for unjumble activities.

    Source formats:
        sentences: [{"jumbled": ["sat", "the", "cat"], "correct": "the cat sat"}]
        content.items: [{"answer": "the cat sat"}]

    Each word of the correct sentence becomes a drop zone; punctuation
    stays attached to its word. The jumbled order is ignored.
    Sentences are separated by a blank line.
    """

    @property
    def content_type(self) -> str:
        return "unjumble"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("unjumble", "sentenceorder")

    @property
    def default_title(self) -> str:
        return "Unjumble"

    @property
    def collection_key(self) -> str:
        return "sentences"

    @property
    def separator(self) -> str:
        return "\n\n"

    def entry_text(self, entry: Any) -> str:
        return item_text(entry, SENTENCE_KEYS)

    def serialize_entry(self, text: str) -> str:
        return " ".join(emphasize(word) for word in text.split())
