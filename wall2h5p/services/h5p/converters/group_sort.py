# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Group Sort H5P Converter.

Converts group-sort (classification) activities to H5P.DragText format.
"""

import logging
from collections.abc import Mapping
from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import (
    PROMPT_KEYS,
    escape_html,
    option_text,
    resolve_field,
    resolve_list,
)

logger = logging.getLogger(__name__)

GROUP_KEYS: tuple[str, ...] = ("answer", "group", "category")
LABEL_KEYS: tuple[str, ...] = ("label", "title", "name")

EMPTY_TEXT_FIELD = "*Empty Group*: :Empty Item:"


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def build_groups(items: list[Any]) -> dict[str, list[str]]:
    """Infer label -> members from items of mixed shapes.

    Shapes, detected per item:
        A: prompt is the label, ``options`` are the members. A repeated
           label replaces the members of the earlier item.
        B: prompt is a member, ``answer`` names the group. Members
           accumulate in input order.
        Nested: ``label`` plus an ``items`` list, handled like shape A.

    Shapes are tried in the order A, B, nested; an item carrying both an
    ``answer`` and ``label``/``items`` is read as shape B. Items matching
    no shape are dropped. Label order is first-seen order.

    Args:
        items: Source activity items.

    Returns:
        Ordered mapping of raw (unescaped) labels to raw members.
    """
    groups: dict[str, list[str]] = {}

    for item in items:
        options = resolve_list(item)
        nested = resolve_list(item, ("items",))

        if options:
            label = resolve_field(item, PROMPT_KEYS)
            if not _is_blank(label):
                groups[label] = [option_text(option) for option in options]
        elif resolve_field(item, GROUP_KEYS):
            label = resolve_field(item, GROUP_KEYS)
            member = resolve_field(item, PROMPT_KEYS)
            groups.setdefault(label, []).append(member)
        elif nested and resolve_field(item, LABEL_KEYS):
            label = resolve_field(item, LABEL_KEYS)
            groups[label] = [option_text(member) for member in nested]
        else:
            logger.debug("Dropping group-sort item with no usable shape: %r", item)

    return groups


def serialize_groups(groups: Mapping[str, list[str]]) -> str:
    """Serialize groups to the DragText drop-zone syntax.

    One line per group: ``*Label*: :member1: :member2:``. Labels and
    members are HTML-escaped here, once. Blank labels, blank members and
    groups left without members are skipped.

    Args:
        groups: Ordered label -> members mapping.

    Returns:
        Newline-joined text field, or EMPTY_TEXT_FIELD if nothing remains.
    """
    lines = []
    for label, members in groups.items():
        if _is_blank(label):
            continue
        kept = [member for member in members if not _is_blank(member)]
        if not kept:
            continue
        zones = "".join(f" :{escape_html(member)}:" for member in kept)
        lines.append(f"*{escape_html(label)}*:{zones}")

    return "\n".join(lines) or EMPTY_TEXT_FIELD


class GroupSortConverter(BaseH5PConverter):
    """Converter for group-sort activities (H5P.DragText).

    Source formats:
        content.items (shape A): {"question": "Fruit", "options": ["Apple", "Pear"]}
        content.items (shape B): {"question": "Apple", "answer": "Fruit"}
        content.groups: [{"label": "Fruit", "items": ["Apple", {"text": "Pear"}]}]

    content.groups, when present, takes precedence over content.items.
    """

    @property
    def content_type(self) -> str:
        return "group-sort"

    @property
    def library(self) -> str:
        return "H5P.DragText 1.10"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("groupsort",)

    @property
    def default_title(self) -> str:
        return "Group Sort"

    @property
    def category(self) -> str:
        return "game"

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a group-sort activity to H5P DragText format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        direct_groups = (activity.content.model_extra or {}).get("groups")
        if isinstance(direct_groups, list) and direct_groups:
            groups = self._from_direct_groups(direct_groups)
        else:
            groups = build_groups(self.collect_items(activity))

        content_json = {
            "taskDescription": l10n["taskDescription"],
            "textField": serialize_groups(groups),
            "behaviour": self.get_default_behavior(),
            "l10n": {
                "checkAnswer": l10n["checkAnswer"],
                "tryAgain": l10n["tryAgain"],
                "showSolution": l10n["showSolution"],
                "scoreBarLabel": l10n["scoreBarLabel"],
            },
        }

        return self.build_package(activity, content_json, language)

    def _from_direct_groups(self, direct_groups: list[Any]) -> dict[str, list[str]]:
        """Read an explicit [{label, items}] group list."""
        groups: dict[str, list[str]] = {}
        for group in direct_groups:
            label = resolve_field(group, LABEL_KEYS)
            if _is_blank(label):
                continue
            members = [option_text(member) for member in resolve_list(group, ("items",))]
            groups.setdefault(label, []).extend(members)
        return groups

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior for DragText."""
        return {
            "enableRetry": True,
            "enableSolutionsButton": True,
            "instantFeedback": False,
        }
