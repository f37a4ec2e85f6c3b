# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for activity and package models."""

import logging

import pytest
from pydantic import ValidationError

from wall2h5p.services.h5p.models import (
    ActivityPayload,
    H5PDependency,
    H5PJson,
    H5PPackageData,
    PlacedWord,
)


class TestActivityPayload:
    """Tests for ActivityPayload."""

    def test_defaults_for_empty_input(self) -> None:
        """Test an empty mapping yields an empty activity."""
        activity = ActivityPayload.from_raw({})

        assert activity.id == ""
        assert activity.title == ""
        assert activity.template == ""
        assert activity.items == []
        assert activity.language is None
        assert activity.content.corrupted is False

    def test_none_input(self) -> None:
        """Test None is treated as an empty activity."""
        assert ActivityPayload.from_raw(None).items == []

    def test_null_scalars_become_empty_strings(self) -> None:
        """Test null and non-string scalar fields are coerced."""
        activity = ActivityPayload.from_raw({"id": 42, "title": None, "template": "Quiz"})

        assert activity.id == "42"
        assert activity.title == ""
        assert activity.template == "Quiz"

    def test_items_keep_order(self) -> None:
        """Test items are kept in source order."""
        items = [{"question": "a"}, {"question": "b"}, {"question": "c"}]
        activity = ActivityPayload.from_raw({"content": {"items": items}})

        assert [item["question"] for item in activity.items] == ["a", "b", "c"]

    def test_non_list_items_marked_corrupted(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a non-sequence items value is replaced with an empty list."""
        with caplog.at_level(logging.WARNING):
            activity = ActivityPayload.from_raw({"content": {"items": "broken"}})

        assert activity.items == []
        assert activity.content.corrupted is True
        assert "not a sequence" in caplog.text

    def test_non_mapping_content_marked_corrupted(self) -> None:
        """Test a non-mapping content block."""
        activity = ActivityPayload.from_raw({"content": ["a", "b"]})

        assert activity.items == []
        assert activity.content.corrupted is True

    def test_metadata_language(self) -> None:
        """Test language shortcut and createdAt alias."""
        activity = ActivityPayload.from_raw(
            {"metadata": {"language": "fr", "createdAt": "2024-01-01"}}
        )

        assert activity.language == "fr"
        assert activity.metadata.created_at == "2024-01-01"

    def test_non_string_metadata_stringified(self) -> None:
        """Test wrong-typed metadata values are kept as text."""
        activity = ActivityPayload.from_raw(
            {"metadata": {"language": 5, "author": 7, "createdAt": 20240101}}
        )

        assert activity.language == "5"
        assert activity.metadata.author == "7"
        assert activity.metadata.created_at == "20240101"

    def test_non_mapping_rejected(self) -> None:
        """Test a record that is not a mapping fails validation."""
        with pytest.raises(ValidationError):
            ActivityPayload.from_raw("not an activity")  # type: ignore[arg-type]

    def test_extra_top_level_collections_preserved(self) -> None:
        """Test template-specific collections are reachable through extra()."""
        activity = ActivityPayload.from_raw({"clues": [{"clue": "c", "answer": "a"}]})

        assert activity.extra("clues") == [{"clue": "c", "answer": "a"}]
        assert activity.extra("cards") is None
        assert activity.extra("cards", []) == []

    def test_content_extra_keys_preserved(self) -> None:
        """Test extra content keys such as groups."""
        activity = ActivityPayload.from_raw({"content": {"groups": [{"label": "A"}]}})

        assert activity.content.model_extra == {"groups": [{"label": "A"}]}


class TestH5PDependency:
    """Tests for H5PDependency."""

    def test_parse_library_string(self) -> None:
        """Test parsing a versioned library string."""
        dep = H5PDependency.parse("H5P.Blanks 1.14")

        assert dep.machine_name == "H5P.Blanks"
        assert dep.major_version == 1
        assert dep.minor_version == 14
        assert str(dep) == "H5P.Blanks 1.14"

    def test_wire_names(self) -> None:
        """Test serialization uses camelCase names."""
        dep = H5PDependency.parse("FontAwesome 4.5")

        assert dep.model_dump(by_alias=True) == {
            "machineName": "FontAwesome",
            "majorVersion": 4,
            "minorVersion": 5,
        }


class TestH5PPackageData:
    """Tests for H5PPackageData."""

    def test_to_h5p(self) -> None:
        """Test wire format output of both documents."""
        package = H5PPackageData(
            h5p_json=H5PJson(
                title="Quiz",
                main_library="H5P.QuestionSet",
                preloaded_dependencies=[H5PDependency.parse("H5P.QuestionSet 1.20")],
            ),
            content_json={"questions": []},
        )

        files = package.to_h5p()

        assert files["h5p.json"]["mainLibrary"] == "H5P.QuestionSet"
        assert files["h5p.json"]["embedTypes"] == ["div"]
        assert files["h5p.json"]["license"] == "U"
        assert files["h5p.json"]["preloadedDependencies"][0]["machineName"] == "H5P.QuestionSet"
        assert files["content.json"] == {"questions": []}
        assert package.main_library == "H5P.QuestionSet"
        assert package.warnings == []


class TestPlacedWord:
    """Tests for PlacedWord."""

    def test_to_h5p(self) -> None:
        """Test the crossword word entry uses clueId."""
        word = PlacedWord(clue="Pet", answer="CAT", row=1, col=0, orientation="across", clue_id=1)

        assert word.to_h5p() == {
            "clue": "Pet",
            "answer": "CAT",
            "row": 1,
            "col": 0,
            "orientation": "across",
            "clueId": 1,
        }

    def test_rejects_negative_coordinates(self) -> None:
        """Test placed coordinates must be non-negative."""
        with pytest.raises(ValidationError):
            PlacedWord(clue="Pet", answer="CAT", row=-1, col=0, orientation="across", clue_id=1)

    def test_rejects_unknown_orientation(self) -> None:
        """Test orientation is across or down."""
        with pytest.raises(ValidationError):
            PlacedWord(clue="Pet", answer="CAT", row=0, col=0, orientation="diagonal", clue_id=1)
