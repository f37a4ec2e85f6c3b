# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Drag Text base converter.

Shared serialization for the word and sequence templates (anagram,
unjumble, rank order, random wheel). Each source entry is turned into one
or more ``*token*`` drop zones, and the zones are joined into the
textField of an H5P.DragText (or H5P.DragWords) task.
"""

from abc import abstractmethod
from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import display_text, emphasize, resolve_field


def item_text(item: Any, keys: tuple[str, ...]) -> str:
    """Get the text of an entry that may be a plain string, number or mapping."""
    if isinstance(item, str):
        return item
    if isinstance(item, (int, float)) and not isinstance(item, bool):
        return display_text(item)
    return resolve_field(item, keys)


class DragTextConverter(BaseH5PConverter):
    """Base class for templates serialized as a list of drop zones.

    Subclasses define where entries come from (collection_key) and how
    one entry becomes text (entry_text). The base handles collection,
    wrapping and joining.
    """

    drop_blank_entries: bool = True

    @property
    def library(self) -> str:
        return "H5P.DragText 1.10"

    @property
    def category(self) -> str:
        return "game"

    @property
    @abstractmethod
    def collection_key(self) -> str:
        """Top-level collection read before content.items."""
        pass

    @property
    def separator(self) -> str:
        """Separator placed between serialized entries."""
        return "\n"

    @abstractmethod
    def entry_text(self, entry: Any) -> str:
        """Get the raw text of one source entry."""
        pass

    def serialize_entry(self, text: str) -> str:
        """Turn the text of one entry into drop-zone markup."""
        return emphasize(text)

    def build_text_field(self, entries: list[Any]) -> str:
        """Serialize all entries, in order, into the textField string."""
        parts = []
        for entry in entries:
            text = self.entry_text(entry)
            if self.drop_blank_entries and not text.strip():
                continue
            parts.append(self.serialize_entry(text))
        return self.separator.join(parts)

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert the activity to a drag-text task."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        entries = self.collect_items(activity, self.collection_key)

        content_json = {
            "taskDescription": l10n["taskDescription"],
            "textField": self.build_text_field(entries),
            "behaviour": self.get_default_behavior(),
            "checkAnswer": l10n["checkAnswer"],
            "tryAgain": l10n["tryAgain"],
            "showSolution": l10n["showSolution"],
        }

        return self.build_package(activity, content_json, language)

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior for DragText."""
        return {
            "enableRetry": True,
            "enableSolutionsButton": True,
            "instantFeedback": False,
        }
