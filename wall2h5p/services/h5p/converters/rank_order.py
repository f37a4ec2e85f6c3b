# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rank Order H5P Converter.

Converts rank-order activities to H5P.DragText format.
"""

from typing import Any

from wall2h5p.services.h5p.converters.drag_text import DragTextConverter, item_text

RANK_KEYS: tuple[str, ...] = ("term", "question", "answer", "definition", "text")


class RankOrderConverter(DragTextConverter):
    """Converter for rank-order activities.

    Source formats:
        items: ["First", "Second", "Third"]
        content.items: ["First", {"term": "Second"}, {"answer": "Third"}]

    Entries are kept in their correct order, space-joined. Blank entries
    are dropped.
    """

    @property
    def content_type(self) -> str:
        return "rank-order"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("rankorder",)

    @property
    def default_title(self) -> str:
        return "Rank Order"

    @property
    def embed_types(self) -> list[str]:
        return ["iframe"]

    @property
    def collection_key(self) -> str:
        return "items"

    @property
    def separator(self) -> str:
        return " "

    def entry_text(self, entry: Any) -> str:
        return item_text(entry, RANK_KEYS)
