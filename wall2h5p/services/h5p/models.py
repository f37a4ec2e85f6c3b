# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for activity conversion.

This module defines Pydantic models for:
- The scraped activity payload handed to the converters
- The H5P package data (h5p.json + content.json) handed to the packager
- Placed crossword words produced by the layout engine

Items inside an activity are deliberately left as plain dictionaries.
Their shape varies by template and by scrape, and converters read them
through resolve_field() instead of a fixed schema.
"""

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class ActivityMetadata(BaseModel):
    """Optional metadata attached to a scraped activity.

    Attributes:
        language: Language code of the activity content.
        author: Author name as scraped.
        created_at: Creation date string as scraped.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    language: str | None = None
    author: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")

    @model_validator(mode="before")
    @classmethod
    def stringify_scalars(cls, data: Any) -> Any:
        """Render non-string metadata values as strings instead of rejecting them."""
        if not isinstance(data, Mapping):
            return data

        data = dict(data)
        for key in ("language", "author", "createdAt", "created_at"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                data[key] = str(value)

        return data


class ActivityContent(BaseModel):
    """Content block of a scraped activity.

    Attributes:
        items: Ordered activity items (loosely-typed mappings).
        settings: Template settings as scraped.
        corrupted: True when the scraped items were not a sequence.
    """

    model_config = ConfigDict(extra="allow")

    items: list[Any] = Field(default_factory=list)
    settings: dict[str, Any] = Field(default_factory=dict)
    corrupted: bool = Field(default=False, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def coerce_items(cls, data: Any) -> Any:
        """Replace a non-sequence items value with an empty list."""
        if not isinstance(data, Mapping):
            return data

        data = dict(data)
        items = data.get("items")
        if items is None:
            data["items"] = []
        elif isinstance(items, tuple):
            data["items"] = list(items)
        elif not isinstance(items, list):
            logger.warning(
                "Activity items is not a sequence (got %s), treating as empty",
                type(items).__name__,
            )
            data["items"] = []
            data["corrupted"] = True

        if not isinstance(data.get("settings"), Mapping):
            data["settings"] = {}

        return data


class ActivityPayload(BaseModel):
    """Normalized activity record produced by the scraper.

    Template-specific collections that some scrapes emit at the top level
    (``clues``, ``cards``, ``pairs``, ``questions``, ``statements``,
    ``sentences``, ``words``, ``segments``) are kept as extra fields and
    read through extra().

    Attributes:
        id: Source activity identifier.
        url: Source activity URL.
        title: Activity title.
        template: Free-text template kind (e.g. "Group sort").
        content: Content block holding the items.
        metadata: Optional metadata (language, author...).
    """

    model_config = ConfigDict(extra="allow")

    id: str = ""
    url: str = ""
    title: str = ""
    template: str = ""
    content: ActivityContent = Field(default_factory=ActivityContent)
    metadata: ActivityMetadata = Field(default_factory=ActivityMetadata)

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        """Default missing or null scalar fields and malformed blocks."""
        if not isinstance(data, Mapping):
            return data

        data = dict(data)
        for key in ("id", "url", "title", "template"):
            value = data.get(key)
            if value is None:
                data[key] = ""
            elif not isinstance(value, str):
                data[key] = str(value)

        content = data.get("content")
        if content is None:
            data["content"] = {}
        elif not isinstance(content, (Mapping, ActivityContent)):
            logger.warning(
                "Activity content is not a mapping (got %s), treating as empty",
                type(content).__name__,
            )
            data["content"] = {"items": [], "corrupted": True}

        if not isinstance(data.get("metadata"), (Mapping, ActivityMetadata)):
            data["metadata"] = {}

        return data

    @classmethod
    def from_raw(cls, data: Mapping[str, Any] | None) -> "ActivityPayload":
        """Build a payload from an arbitrary scraped mapping.

        Args:
            data: Raw scraper output. None is treated as an empty activity.

        Returns:
            Validated ActivityPayload.

        Raises:
            ValidationError: If data is not a mapping at all.
        """
        if data is None:
            data = {}
        return cls.model_validate(dict(data) if isinstance(data, Mapping) else data)

    @property
    def items(self) -> list[Any]:
        """Shortcut for content.items."""
        return self.content.items

    @property
    def language(self) -> str | None:
        """Shortcut for metadata.language."""
        return self.metadata.language

    def extra(self, key: str, default: Any = None) -> Any:
        """Get a template-specific top-level field.

        Args:
            key: Field name (e.g. "clues").
            default: Value returned when the field is absent.

        Returns:
            The field value or default.
        """
        return (self.model_extra or {}).get(key, default)


class H5PDependency(BaseModel):
    """One entry of h5p.json preloadedDependencies."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    machine_name: str = Field(alias="machineName")
    major_version: int = Field(alias="majorVersion")
    minor_version: int = Field(alias="minorVersion")

    @classmethod
    def parse(cls, library: str) -> "H5PDependency":
        """Build a dependency from a library string like "H5P.Blanks 1.14"."""
        machine_name, _, version = library.partition(" ")
        major, _, minor = version.partition(".")
        return cls(
            machine_name=machine_name,
            major_version=int(major or 0),
            minor_version=int(minor or 0),
        )

    def __str__(self) -> str:
        return f"{self.machine_name} {self.major_version}.{self.minor_version}"


class H5PJson(BaseModel):
    """The h5p.json metadata block.

    Attributes:
        title: Package title.
        language: Content language code.
        main_library: Machine name of the main library.
        embed_types: Supported embed types ("div", "iframe").
        license: License code.
        preloaded_dependencies: Libraries the player must load.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    language: str = "en"
    main_library: str = Field(alias="mainLibrary")
    embed_types: list[str] = Field(default_factory=lambda: ["div"], alias="embedTypes")
    license: str = "U"
    preloaded_dependencies: list[H5PDependency] = Field(
        default_factory=list,
        alias="preloadedDependencies",
    )


class H5PPackageData(BaseModel):
    """Conversion output: the two JSON documents of an H5P package.

    Attributes:
        h5p_json: Metadata block (h5p.json).
        content_json: Template-specific content block (content/content.json).
        warnings: Non-fatal diagnostics collected during conversion.
    """

    h5p_json: H5PJson
    content_json: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)

    @property
    def main_library(self) -> str:
        return self.h5p_json.main_library

    def to_h5p(self) -> dict[str, dict[str, Any]]:
        """Return the package documents keyed by their archive file names.

        Returns:
            {"h5p.json": {...}, "content.json": {...}} using H5P wire names.
        """
        return {
            "h5p.json": self.h5p_json.model_dump(by_alias=True),
            "content.json": self.content_json,
        }


Orientation = Literal["across", "down"]


class PlacedWord(BaseModel):
    """A crossword answer with final, non-negative grid coordinates.

    Attributes:
        clue: Clue text.
        answer: Answer exactly as supplied (case preserved).
        row: Zero-based row of the first letter.
        col: Zero-based column of the first letter.
        orientation: "across" or "down".
        clue_id: 1-based sequence number in placement order.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    clue: str
    answer: str
    row: int = Field(ge=0)
    col: int = Field(ge=0)
    orientation: Orientation
    clue_id: int = Field(ge=1, alias="clueId")

    def to_h5p(self) -> dict[str, Any]:
        """Serialize to the H5P.Crossword word entry."""
        return self.model_dump(by_alias=True)
