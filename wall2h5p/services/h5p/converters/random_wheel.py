# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Random Wheel H5P Converter.

H5P has no spinner, so the wheel segments are listed as DragText options.
"""

from typing import Any

from wall2h5p.services.h5p.converters.drag_text import DragTextConverter, item_text
from wall2h5p.services.h5p.text import PROMPT_KEYS

SEGMENT_KEYS: tuple[str, ...] = ("text",) + PROMPT_KEYS


class RandomWheelConverter(DragTextConverter):
    """Converter for random wheel activities.

    Source formats:
        segments: [{"text": "Red"}, {"text": "Blue"}]
        content.items: [{"question": "Red"}]

    One ``*segment*`` per line. A segment without text is kept as ``**``
    so that the number of options matches the wheel.
    """

    drop_blank_entries = False

    @property
    def content_type(self) -> str:
        return "random-wheel"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("randomwheel", "spinwheel", "wheel")

    @property
    def default_title(self) -> str:
        return "Random Wheel Options"

    @property
    def collection_key(self) -> str:
        return "segments"

    def entry_text(self, entry: Any) -> str:
        return item_text(entry, SEGMENT_KEYS)
