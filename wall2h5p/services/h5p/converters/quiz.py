# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quiz H5P Converter.

Converts quiz activities (mixed multiple choice and true/false questions)
to H5P.QuestionSet format.
"""

import re
from collections.abc import Mapping
from typing import Any, Literal

from wall2h5p.services.h5p.converters.question_set import QuestionSetBaseConverter
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import (
    PROMPT_KEYS,
    option_text,
    resolve_field,
    resolve_list,
    wrap_html,
)

QuestionKind = Literal["multipleChoice", "trueFalse"]

_TYPE_SEPARATORS_RE = re.compile(r"[\s\-_/]+")

_TYPE_ALIASES: dict[str, QuestionKind] = {
    "multiplechoice": "multipleChoice",
    "mc": "multipleChoice",
    "truefalse": "trueFalse",
    "trueorfalse": "trueFalse",
    "tf": "trueFalse",
}


def _as_index(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def question_kind(item: Any) -> QuestionKind:
    """Decide whether an item is a multiple choice or true/false question.

    An explicit ``type`` wins. Otherwise an options list means multiple
    choice, a boolean ``correct`` means true/false, and anything else is
    a multiple choice question without options.
    """
    if not isinstance(item, Mapping):
        return "multipleChoice"

    declared = item.get("type")
    if isinstance(declared, str):
        kind = _TYPE_ALIASES.get(_TYPE_SEPARATORS_RE.sub("", declared).lower())
        if kind:
            return kind

    if resolve_list(item):
        return "multipleChoice"
    if isinstance(item.get("correct"), bool):
        return "trueFalse"
    return "multipleChoice"


def correct_option_index(item: Any, options: list[str]) -> int | None:
    """Find the index of the correct option.

    Lookup order: ``correctIndex``, an integer ``correctAnswer``, then a
    string ``correctAnswer``/``answer`` matched against the option text.

    Returns:
        The 0-based index, or None if nothing matches. An index outside
        the options range is returned as is and marks no option correct.
    """
    if not isinstance(item, Mapping):
        return None

    index = _as_index(item.get("correctIndex"))
    if index is None:
        index = _as_index(item.get("correctAnswer"))
    if index is not None:
        return index

    expected = resolve_field(item, ("correctAnswer", "answer")).strip()
    if not expected:
        return None
    for i, option in enumerate(options):
        if option.strip() == expected:
            return i
    return None


class QuizConverter(QuestionSetBaseConverter):
    """Converter for quiz activities (H5P.QuestionSet).

    Source item formats:
        {"type": "multipleChoice", "question": "2+2?", "options": ["3", "4"], "correctIndex": 1}
        {"type": "trueFalse", "question": "The sky is blue", "correct": true}

    Items come from the top-level ``questions`` list, else content.items.
    Sub-content IDs are ``<index>-mc`` / ``<index>-tf`` (0-based) so that
    the same input always yields the same package.
    """

    @property
    def content_type(self) -> str:
        return "question-set"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("quiz", "multiplechoice", "questionset")

    @property
    def default_title(self) -> str:
        return "Quiz"

    @property
    def pass_percentage(self) -> int:
        return 70

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a quiz activity to H5P QuestionSet format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        questions = [
            self.convert_question(item, index, l10n)
            for index, item in enumerate(self.collect_items(activity, "questions"))
        ]

        return self.build_package(activity, self.build_question_set(questions, l10n), language)

    def convert_question(self, item: Any, index: int, l10n: dict[str, Any]) -> dict[str, Any]:
        """Build the sub-content for one quiz question."""
        text = resolve_field(item, PROMPT_KEYS)
        title = f"Question {index + 1}"

        if question_kind(item) == "trueFalse":
            correct = isinstance(item, Mapping) and item.get("correct") is True
            return self.build_true_false(text, correct, f"{index}-tf", title)

        options = [option_text(option) for option in resolve_list(item)]
        correct_index = correct_option_index(item, options)
        answers = [
            {"text": wrap_html(option, "div"), "correct": i == correct_index}
            for i, option in enumerate(options)
        ]
        return self.build_multi_choice(text, answers, f"{index}-mc", title, l10n)
