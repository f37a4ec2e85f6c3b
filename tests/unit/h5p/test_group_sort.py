# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the group-sort converter."""

import pytest

from wall2h5p.core.config.settings import Settings
from wall2h5p.services.h5p.converters.group_sort import (
    EMPTY_TEXT_FIELD,
    GroupSortConverter,
    build_groups,
    serialize_groups,
)
from wall2h5p.services.h5p.models import ActivityPayload


@pytest.fixture
def converter(settings: Settings) -> GroupSortConverter:
    return GroupSortConverter(settings)


class TestBuildGroups:
    """Tests for group inference from item shapes."""

    def test_answer_shape_accumulates(self) -> None:
        """Test prompt-is-member items accumulate per group."""
        items = [
            {"question": "Apple", "answer": "Fruit"},
            {"question": "Carrot", "answer": "Veggie"},
            {"question": "Banana", "answer": "Fruit"},
        ]

        assert build_groups(items) == {"Fruit": ["Apple", "Banana"], "Veggie": ["Carrot"]}

    def test_options_shape(self) -> None:
        """Test prompt-is-label items with options."""
        items = [{"question": "Fruit", "options": ["Apple", {"text": "Pear"}, 3]}]

        assert build_groups(items) == {"Fruit": ["Apple", "Pear", "3"]}

    def test_repeated_options_label_replaces(self) -> None:
        """Test a later options item with the same label replaces members."""
        items = [
            {"question": "Fruit", "options": ["Apple"]},
            {"question": "Fruit", "options": ["Pear"]},
        ]

        assert build_groups(items) == {"Fruit": ["Pear"]}

    def test_answer_items_append_to_options_group(self) -> None:
        """Test the two shapes share labels."""
        items = [
            {"question": "Fruit", "options": ["Apple"]},
            {"question": "Banana", "answer": "Fruit"},
        ]

        assert build_groups(items) == {"Fruit": ["Apple", "Banana"]}

    def test_nested_label_items_shape(self) -> None:
        """Test items carrying their own label and members."""
        items = [{"label": "Metals", "items": ["Iron", "Gold"]}]

        assert build_groups(items) == {"Metals": ["Iron", "Gold"]}

    def test_answer_shape_wins_over_nested(self) -> None:
        """Test an item with both an answer and label/items is a member."""
        items = [{"question": "Iron", "answer": "Metals", "label": "Gases", "items": ["Neon"]}]

        assert build_groups(items) == {"Metals": ["Iron"]}

    def test_unusable_items_dropped(self) -> None:
        """Test items matching no shape are ignored."""
        assert build_groups([{"question": "Lonely"}, None, "text"]) == {}

    def test_first_seen_label_order(self) -> None:
        """Test groups keep the order labels first appear in."""
        items = [
            {"question": "x", "answer": "B"},
            {"question": "y", "answer": "A"},
            {"question": "z", "answer": "B"},
        ]

        assert list(build_groups(items)) == ["B", "A"]


class TestSerializeGroups:
    """Tests for DragText serialization."""

    def test_line_per_group(self) -> None:
        """Test one drop-zone line per group."""
        text = serialize_groups({"Fruit": ["Apple", "Banana"], "Veggie": ["Carrot"]})

        assert text == "*Fruit*: :Apple: :Banana:\n*Veggie*: :Carrot:"

    def test_labels_and_members_escaped_once(self) -> None:
        """Test markup characters are escaped exactly once."""
        text = serialize_groups({"Salt & Pepper": ["<b>"]})

        assert text == "*Salt &amp; Pepper*: :&lt;b&gt;:"

    def test_blank_members_and_empty_groups_dropped(self) -> None:
        """Test whitespace-only members and groups left empty."""
        text = serialize_groups({"A": ["  ", "x"], "B": [""], " ": ["y"]})

        assert text == "*A*: :x:"

    def test_empty_sentinel(self) -> None:
        """Test the sentinel when nothing remains."""
        assert serialize_groups({}) == EMPTY_TEXT_FIELD
        assert EMPTY_TEXT_FIELD == "*Empty Group*: :Empty Item:"


class TestGroupSortConverter:
    """Tests for GroupSortConverter."""

    def test_fruit_and_veggie(self, converter: GroupSortConverter, make_activity) -> None:
        """Test classification items produce one line per group."""
        activity = make_activity(
            "Group sort",
            items=[
                {"question": "Apple", "answer": "Fruit"},
                {"question": "Carrot", "answer": "Veggie"},
                {"question": "Banana", "answer": "Fruit"},
            ],
        )

        package = converter.convert(activity)

        lines = package.content_json["textField"].split("\n")
        assert "*Fruit*: :Apple: :Banana:" in lines
        assert "*Veggie*: :Carrot:" in lines

    def test_direct_groups_take_precedence(self, converter: GroupSortConverter) -> None:
        """Test content.groups wins over content.items."""
        activity = ActivityPayload.from_raw(
            {
                "template": "Group sort",
                "content": {
                    "items": [{"question": "Apple", "answer": "Fruit"}],
                    "groups": [
                        {"label": "Metals", "items": ["Iron", {"text": "Gold"}]},
                        {"title": "Gases", "items": ["Neon"]},
                    ],
                },
            }
        )

        package = converter.convert(activity)

        assert package.content_json["textField"] == "*Metals*: :Iron: :Gold:\n*Gases*: :Neon:"

    def test_empty_activity(self, converter: GroupSortConverter, make_activity) -> None:
        """Test empty input yields the sentinel."""
        package = converter.convert(make_activity("Group sort"))

        assert package.content_json["textField"] == "*Empty Group*: :Empty Item:"
        assert package.main_library == "H5P.DragText"

    def test_task_description_localized(
        self, converter: GroupSortConverter, make_activity
    ) -> None:
        """Test the task description comes from the locale."""
        en = converter.convert(make_activity("Group sort"))
        fr = converter.convert(make_activity("Group sort", language="fr"))

        assert en.content_json["taskDescription"] == "Drag the items to their correct groups."
        assert fr.content_json["taskDescription"] != en.content_json["taskDescription"]
