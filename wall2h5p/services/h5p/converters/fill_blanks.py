# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fill in the Blanks H5P Converter.

Converts missing-word (cloze) activities to H5P.Blanks format.
"""

import re
from collections.abc import Sequence
from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.services.h5p.text import (
    ANSWER_KEYS,
    PROMPT_KEYS,
    emphasize,
    option_text,
    resolve_field,
    resolve_list,
    wrap_html,
)

BLANK_MARKER = "___"
MISSING_ANSWER = "?"

_BLANK_RE = re.compile(re.escape(BLANK_MARKER))


def substitute_blanks(text: str, answers: Sequence[str]) -> str:
    """Replace each blank marker, left to right, with the next answer.

    Only exactly three underscores are consumed per match, so a longer run
    such as "____" leaves its excess underscores next to the answer.
    Markers beyond the end of ``answers`` get MISSING_ANSWER.

    Args:
        text: Prompt text containing zero or more markers.
        answers: Answers in marker order.

    Returns:
        Text with every marker replaced by ``*answer*``.
    """
    remaining = iter(answers)
    return _BLANK_RE.sub(lambda _: emphasize(next(remaining, MISSING_ANSWER)), text)


class FillBlanksConverter(BaseH5PConverter):
    """Converter for H5P.Blanks content type.

    Source item format:
        {"question": "The capital of France is ___.", "answer": "Paris"}
        {"question": "___ is the capital of ___.", "options": ["Paris", "France"]}

    Each ``___`` marker becomes an ``*answer*`` gap. An ``options`` list
    supplies one answer per marker; otherwise the single answer field is
    used. Prompt text is written as authored (not HTML-escaped) because
    the gap syntax lives in it.

    An activity with no items produces one "No questions found" question
    so the player never renders an empty task.
    """

    @property
    def content_type(self) -> str:
        return "fill-blanks"

    @property
    def library(self) -> str:
        return "H5P.Blanks 1.14"

    @property
    def template_kinds(self) -> tuple[str, ...]:
        return ("missingword", "cloze", "fillintheblank", "fillintheblanks")

    @property
    def default_title(self) -> str:
        return "Missing Word"

    @property
    def dependencies(self) -> list[str]:
        return [
            self.library,
            "FontAwesome 4.5",
            "H5P.FontIcon 1.0",
            "H5P.JoubelUI 1.3",
            "H5P.Question 1.5",
            "H5P.Transition 1.0",
        ]

    def convert(
        self,
        activity: ActivityPayload,
        language: str | None = None,
    ) -> H5PPackageData:
        """Convert a missing-word activity to H5P Blanks format."""
        language = self.resolve_language(activity, language)
        l10n = self.get_l10n(language)

        questions = [self.convert_item(item) for item in self.collect_items(activity)]
        if not questions:
            questions.append(wrap_html(l10n["noQuestions"]))

        content_json = {
            "text": l10n["taskDescription"],
            "questions": questions,
            "score": "Range:0-1",
            "behaviour": self.get_default_behavior(),
            "l10n": {
                "checkAnswer": l10n["checkAnswer"],
                "tryAgain": l10n["tryAgain"],
                "showSolution": l10n["showSolution"],
                "notFilledOut": l10n["notFilledOut"],
                "answerIsCorrect": l10n["answerIsCorrect"],
                "answerIsWrong": l10n["answerIsWrong"],
                "answeredCorrectly": l10n["answeredCorrectly"],
                "answeredIncorrectly": l10n["answeredIncorrectly"],
                "solutionLabel": l10n["solutionLabel"],
                "inputLabel": l10n["inputLabel"],
            },
        }

        return self.build_package(activity, content_json, language)

    def convert_item(self, item: Any) -> str:
        """Build one H5P.Blanks question from a source item."""
        text = resolve_field(item, PROMPT_KEYS)

        answers = [option_text(option) for option in resolve_list(item)]
        if not answers:
            answer = resolve_field(item, ANSWER_KEYS)
            answers = [answer] if answer else []

        return wrap_html(substitute_blanks(text, answers))

    def get_default_behavior(self) -> dict[str, Any]:
        """Get default behavior for Blanks."""
        return {
            "enableRetry": True,
            "enableSolutionsButton": True,
            "caseSensitive": False,
            "showSolutionsRequiresInput": True,
            "autoCheck": False,
            "separateLines": False,
        }
