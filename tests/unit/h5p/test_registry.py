# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for converter dispatch."""

import logging

import pytest

from wall2h5p.core.config.settings import Settings
from wall2h5p.services.h5p.converters.anagram import AnagramConverter
from wall2h5p.services.h5p.converters.base import CORRUPTED_ITEMS_WARNING, BaseH5PConverter
from wall2h5p.services.h5p.converters.fill_blanks import FillBlanksConverter
from wall2h5p.services.h5p.converters.registry import (
    ConverterRegistry,
    get_registry,
    normalize_template_kind,
)
from wall2h5p.services.h5p.exceptions import (
    H5PConversionError,
    H5PError,
    UnsupportedTemplateError,
)
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData


class ExplodingConverter(BaseH5PConverter):
    """Converter that fails on every activity."""

    @property
    def content_type(self) -> str:
        return "exploding"

    @property
    def library(self) -> str:
        return "H5P.Exploding 1.0"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("boom",)

    def convert(self, activity: ActivityPayload, language: str | None = None) -> H5PPackageData:
        raise KeyError("missing")


class TestNormalizeTemplateKind:
    """Tests for normalize_template_kind."""

    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("Group sort", "groupsort"),
            ("  MISSING   word ", "missingword"),
            ("True/False", "truefalse"),
            ("Match-Up", "matchup"),
            ("rank_order", "rankorder"),
            ("Random\twheel", "randomwheel"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalization(self, template: str | None, expected: str) -> None:
        """Test case and separator folding."""
        assert normalize_template_kind(template) == expected


class TestConverterRegistry:
    """Tests for ConverterRegistry."""

    @pytest.mark.parametrize(
        ("template", "content_type"),
        [
            ("Missing word", "fill-blanks"),
            ("Group sort", "group-sort"),
            ("Match up", "memory-game"),
            ("Flashcards", "flashcards"),
            ("Quiz", "question-set"),
            ("True or false", "true-false"),
            ("Word search", "word-search"),
            ("Anagram", "anagram"),
            ("Unjumble", "unjumble"),
            ("Rank order", "rank-order"),
            ("Random wheel", "random-wheel"),
            ("Crossword", "crossword"),
        ],
    )
    def test_select_every_template(
        self, registry: ConverterRegistry, template: str, content_type: str
    ) -> None:
        """Test every supported template kind resolves."""
        assert registry.select(template).content_type == content_type

    def test_select_is_case_and_space_insensitive(self, registry: ConverterRegistry) -> None:
        """Test lookups ignore case and whitespace."""
        assert registry.select("GROUPSORT") is registry.select(" group  Sort ")

    def test_unknown_template_raises(self, registry: ConverterRegistry) -> None:
        """Test unsupported kinds raise with context."""
        with pytest.raises(UnsupportedTemplateError) as exc_info:
            registry.select("Whack a Mole")

        error = exc_info.value
        assert error.template == "Whack a Mole"
        assert error.normalized == "whackamole"
        assert "crossword" in error.supported
        assert 'Unsupported template type: "Whack a Mole"' in str(error)

    def test_unsupported_is_not_a_conversion_error(self) -> None:
        """Test the error hierarchy."""
        assert issubclass(UnsupportedTemplateError, H5PError)
        assert not issubclass(UnsupportedTemplateError, H5PConversionError)

    def test_get_and_has(self, registry: ConverterRegistry) -> None:
        """Test non-raising lookups."""
        assert registry.get("Anagram") is not None
        assert registry.get("nope") is None
        assert registry.has("Cloze")
        assert "Cloze" in registry
        assert "nope" not in registry
        assert 42 not in registry

    def test_kinds_mapping_is_read_only(self, registry: ConverterRegistry) -> None:
        """Test the dispatch table cannot be modified."""
        with pytest.raises(TypeError):
            registry.kinds["new"] = AnagramConverter()  # type: ignore[index]

    def test_listings(self, registry: ConverterRegistry) -> None:
        """Test content type and kind listings."""
        content_types = registry.list_content_types()

        assert len(content_types) == 12
        assert len(set(content_types)) == 12
        assert registry.list_template_kinds() == sorted(registry.list_template_kinds())
        assert len(registry) == len(registry.list_template_kinds())
        assert "crossword" in registry.list_by_category("vocabulary")
        assert "fill-blanks" in registry.list_by_category("assessment")
        assert len(registry.get_all_info()) == 12

    def test_get_by_library(self, registry: ConverterRegistry) -> None:
        """Test lookup by emitted H5P library."""
        converter = registry.get_by_library("H5P.Blanks 1.14")

        assert converter is not None
        assert converter.content_type == "fill-blanks"
        assert registry.get_by_library("H5P.Unknown 1.0") is None

    def test_duplicate_kind_later_wins(
        self, settings: Settings, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a kind claimed twice goes to the later converter."""
        first = FillBlanksConverter(settings)
        second = FillBlanksConverter(settings)

        with caplog.at_level(logging.WARNING):
            registry = ConverterRegistry([first, second])

        assert registry.select("cloze") is second
        assert "Replacing converter" in caplog.text

    def test_empty_registry(self) -> None:
        """Test an explicit empty converter list."""
        registry = ConverterRegistry([])

        assert len(registry) == 0
        with pytest.raises(UnsupportedTemplateError):
            registry.select("Quiz")

    def test_get_registry_cached(self) -> None:
        """Test the default registry is shared."""
        assert get_registry() is get_registry()


class TestRegistryConvert:
    """Tests for ConverterRegistry.convert and safe_convert."""

    def test_convert_dispatches(self, registry: ConverterRegistry, make_activity) -> None:
        """Test conversion through the registry."""
        activity = make_activity("Unjumble", sentences=[{"correct": "the cat sat."}])

        package = registry.convert(activity)

        assert package.content_json["textField"] == "*the* *cat* *sat.*"

    def test_unexpected_failure_wrapped(self, settings: Settings, make_activity) -> None:
        """Test converter bugs surface as H5PConversionError."""
        registry = ConverterRegistry([ExplodingConverter(settings)])

        with pytest.raises(H5PConversionError) as exc_info:
            registry.convert(make_activity("Boom"))

        assert exc_info.value.content_type == "exploding"
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_corrupted_items_warning(self, registry: ConverterRegistry, make_activity) -> None:
        """Test structurally corrupt input converts with a warning."""
        package = registry.convert(make_activity("Group sort", items="not a list"))

        assert package.content_json["textField"] == "*Empty Group*: :Empty Item:"
        assert package.warnings == [CORRUPTED_ITEMS_WARNING]

    @pytest.mark.parametrize(
        "template",
        [
            "Missing word",
            "Group sort",
            "Match up",
            "Flashcards",
            "Quiz",
            "True or false",
            "Word search",
            "Anagram",
            "Unjumble",
            "Rank order",
            "Random wheel",
            "Crossword",
        ],
    )
    def test_every_converter_total_on_empty_input(
        self, registry: ConverterRegistry, make_activity, template: str
    ) -> None:
        """Test every converter returns a complete package for empty input."""
        package = registry.convert(make_activity(template, title=""))

        files = package.to_h5p()
        assert isinstance(files["content.json"], dict)
        assert files["content.json"]
        assert files["h5p.json"]["title"]
        assert files["h5p.json"]["preloadedDependencies"][0]["machineName"] == package.main_library

    @pytest.mark.parametrize(
        "template",
        ["Missing word", "Group sort", "Match up", "Quiz", "Crossword", "Rank order"],
    )
    def test_every_converter_total_on_garbage_items(
        self, registry: ConverterRegistry, make_activity, template: str
    ) -> None:
        """Test malformed items never raise."""
        items = [None, 3, "text", [], {"question": None, "options": "x", "answer": {"a": 1}}]

        package = registry.convert(make_activity(template, items=items))

        assert isinstance(package.content_json, dict)
