# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""True/False H5P Converter.

Converts true/false statement activities to an H5P.QuestionSet of
two-answer H5P.MultiChoice questions.
"""

from collections.abc import Mapping
from typing import Any

from wall2h5p.services.h5p.converters.question_set import QuestionSetBaseConverter
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import PROMPT_KEYS, resolve_field

_TRUE_STRINGS = frozenset({"true", "t", "yes", "1"})

STATEMENT_KEYS: tuple[str, ...] = ("text", "statement") + PROMPT_KEYS


def statement_truth(item: Any) -> bool:
    """Read the truth value of a statement.

    ``answer`` (or ``correct``/``isTrue``) may be a boolean or a
    "true"/"false" string. Anything else counts as false.
    """
    if not isinstance(item, Mapping):
        return False

    for key in ("answer", "correct", "isTrue"):
        value = item.get(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip():
            return value.strip().lower() in _TRUE_STRINGS
    return False


class TrueFalseConverter(QuestionSetBaseConverter):
    """Converter for true/false statement activities.

    Source formats:
        statements: [{"text": "Water boils at 100C", "answer": true}]
        content.items: [{"question": "Water boils at 100C", "answer": "true"}]

    Each statement becomes a MultiChoice question with the answers
    "True" then "False" (never shuffled), exactly one of them correct.
    """

    @property
    def content_type(self) -> str:
        return "true-false"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("truefalse", "trueorfalse")

    @property
    def default_title(self) -> str:
        return "True or False Quiz"

    @property
    def dependencies(self) -> list[str]:
        return [self.library, "H5P.MultiChoice 1.16"]

    @property
    def pass_percentage(self) -> int:
        return 50

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a true/false activity to H5P QuestionSet format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        questions = [
            self.convert_statement(item, index, l10n)
            for index, item in enumerate(self.collect_items(activity, "statements"))
        ]

        return self.build_package(activity, self.build_question_set(questions, l10n), language)

    def convert_statement(self, item: Any, index: int, l10n: dict[str, Any]) -> dict[str, Any]:
        """Build the MultiChoice sub-content for one statement."""
        is_true = statement_truth(item)
        answers = [
            {"text": l10n["trueLabel"], "correct": is_true},
            {"text": l10n["falseLabel"], "correct": not is_true},
        ]
        question = self.build_multi_choice(
            resolve_field(item, STATEMENT_KEYS),
            answers,
            f"{index}-tf",
            f"{l10n['statementLabel']} {index + 1}",
            l10n,
            random_answers=False,
        )
        question["params"]["behaviour"]["singleAnswer"] = True
        return question
