# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Text helpers shared by all converters.

Two concerns live here:

1. Sanitizing text for H5P rich-text fields (escape_html, clean_text,
   wrap_html, emphasize).
2. Resolving values from loosely-typed activity items. Scrapes name the
   same slot differently ("question", "term", "front"...), so every
   converter reads items through resolve_field() with one of the ordered
   key tuples below instead of ad hoc ``if "x" in item`` chains.

Example:
    >>> item = {"term": "  Chat ", "definition": "Cat"}
    >>> resolve_field(item, PROMPT_KEYS)
    '  Chat '
    >>> escape_html('Tom & "Jerry"')
    'Tom &amp; &quot;Jerry&quot;'
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

# Ordered candidate keys per semantic slot
PROMPT_KEYS: tuple[str, ...] = ("question", "term", "front", "text", "prompt")
ANSWER_KEYS: tuple[str, ...] = ("answer", "definition", "back", "correctAnswer")
IMAGE_KEYS: tuple[str, ...] = ("image", "imageUrl", "image_url")
CLUE_KEYS: tuple[str, ...] = ("clue", "question", "term", "prompt")
CROSSWORD_ANSWER_KEYS: tuple[str, ...] = ("answer", "word", "definition", "correctAnswer")
OPTION_KEYS: tuple[str, ...] = ("options", "choices")

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_HTML_ESCAPE_RE = re.compile("[&<>\"']")
_WHITESPACE_RE = re.compile(r"\s+")

EMPHASIS = "*"


def escape_html(text: Any) -> str:
    """Escape markup-significant characters for an H5P rich-text field.

    Substitutions are computed against the original string in a single
    pass, so the ``&`` introduced by an entity is never escaped again.
    Calling this twice on the same text is a caller error.

    Args:
        text: Text to escape. Falsy values yield "".

    Returns:
        Escaped text.
    """
    if not text:
        return ""
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], str(text))


def clean_text(text: Any) -> str:
    """Trim and collapse runs of whitespace into single spaces."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text).strip())


def wrap_html(text: str, tag: str = "p") -> str:
    """Wrap text in a single block-level tag.

    Args:
        text: Text to wrap (empty text yields an empty element).
        tag: HTML tag to use (default: "p").

    Returns:
        HTML-wrapped text.
    """
    return f"<{tag}>{text or ''}</{tag}>"


def emphasize(text: Any) -> str:
    """Mark text as a droppable/answer token: ``*text*``."""
    return f"{EMPHASIS}{display_text(text)}{EMPHASIS}"


def display_text(value: Any) -> str:
    """Return the display string of a scalar value.

    None becomes "", numbers and other scalars use str().
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _is_present(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return isinstance(value, (int, float))


def resolve_field(item: Any, keys: Sequence[str]) -> str:
    """Return the first present, non-empty value among candidate keys.

    A value is present when it is a non-blank string or a number.
    Strings are returned unmodified (no trimming); numbers are returned
    in their display form. Never raises.

    Args:
        item: Activity item. Non-mappings resolve to "".
        keys: Candidate key names in priority order.

    Returns:
        The resolved value or "".
    """
    if not isinstance(item, Mapping):
        return ""

    for key in keys:
        value = item.get(key)
        if _is_present(value):
            return display_text(value)

    return ""


def resolve_list(item: Any, keys: Sequence[str] = OPTION_KEYS) -> list[Any]:
    """Return the first non-empty list value among candidate keys.

    Args:
        item: Activity item. Non-mappings resolve to [].
        keys: Candidate key names in priority order.

    Returns:
        A new list (possibly empty).
    """
    if not isinstance(item, Mapping):
        return []

    for key in keys:
        value = item.get(key)
        if isinstance(value, (list, tuple)) and value:
            return list(value)

    return []


def option_text(option: Any) -> str:
    """Get the display text of an option that may be a string or a mapping."""
    if isinstance(option, Mapping):
        return resolve_field(option, ("text", "term", "label", "value"))
    return display_text(option)
