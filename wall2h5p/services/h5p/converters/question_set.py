# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Question Set base converter.

Shared H5P.QuestionSet wrapping for the quiz and true/false statement
converters. Sub-questions are built here as H5P.MultiChoice or
H5P.TrueFalse sub-content with deterministic subContentIds.
"""

from abc import abstractmethod
from typing import Any

from wall2h5p.services.h5p.converters.base import BaseH5PConverter
from wall2h5p.services.h5p.text import wrap_html

MULTI_CHOICE_LIBRARY = "H5P.MultiChoice 1.16"
TRUE_FALSE_LIBRARY = "H5P.TrueFalse 1.8"


def build_metadata(title: str, content_type_label: str, license_code: str = "U") -> dict[str, Any]:
    """Build the metadata block of a sub-content entry."""
    return {
        "contentType": content_type_label,
        "license": license_code,
        "title": title,
    }


class QuestionSetBaseConverter(BaseH5PConverter):
    """Base class for converters emitting H5P.QuestionSet content.

    Subclasses build their questions with build_multi_choice() and
    build_true_false(), then hand them to build_question_set().

    Locale strings are read from "question-set" first, then overridden by
    the subclass content type.
    """

    @property
    def library(self) -> str:
        return "H5P.QuestionSet 1.20"

    @property
    def dependencies(self) -> list[str]:
        return [self.library, MULTI_CHOICE_LIBRARY, TRUE_FALSE_LIBRARY, "FontAwesome 4.5"]

    @property
    def embed_types(self) -> list[str]:
        return ["iframe"]

    @property
    @abstractmethod
    def pass_percentage(self) -> int:
        """Score percentage needed to pass the set."""
        pass

    def get_l10n(self, language: str = "en", content_type: str | None = None) -> dict[str, Any]:
        if content_type is not None:
            return super().get_l10n(language, content_type)
        merged = super().get_l10n(language, "question-set")
        merged.update(super().get_l10n(language))
        return merged

    def build_multi_choice(
        self,
        question: str,
        answers: list[dict[str, Any]],
        sub_content_id: str,
        title: str,
        l10n: dict[str, Any],
        random_answers: bool = True,
    ) -> dict[str, Any]:
        """Build one H5P.MultiChoice sub-content entry.

        Args:
            question: Question text, written as authored.
            answers: [{"text": ..., "correct": bool}] in display order.
            sub_content_id: Deterministic sub-content identifier.
            title: Metadata title.
            l10n: Merged locale strings.
            random_answers: Whether the player shuffles answers.

        Returns:
            Sub-content dict.
        """
        return {
            "library": MULTI_CHOICE_LIBRARY,
            "params": {
                "question": wrap_html(question),
                "answers": answers,
                "behaviour": {
                    "enableRetry": True,
                    "enableSolutionsButton": True,
                    "enableCheckButton": True,
                    "type": "auto",
                    "singlePoint": False,
                    "randomAnswers": random_answers,
                    "showSolutionsRequiresInput": True,
                    "confirmCheckDialog": False,
                    "confirmRetryDialog": False,
                    "autoCheck": False,
                    "passPercentage": 100,
                },
                "UI": dict(l10n.get("ui", {})),
            },
            "subContentId": sub_content_id,
            "metadata": build_metadata(title, "Multiple Choice", self.settings.h5p.license),
        }

    def build_true_false(
        self,
        question: str,
        correct: bool,
        sub_content_id: str,
        title: str,
    ) -> dict[str, Any]:
        """Build one H5P.TrueFalse sub-content entry."""
        return {
            "library": TRUE_FALSE_LIBRARY,
            "params": {
                "question": wrap_html(question),
                "correct": "true" if correct else "false",
                "behaviour": {
                    "enableRetry": True,
                    "enableSolutionsButton": True,
                    "enableCheckButton": True,
                    "confirmCheckDialog": False,
                    "confirmRetryDialog": False,
                    "autoCheck": False,
                },
            },
            "subContentId": sub_content_id,
            "metadata": build_metadata(title, "True/False", self.settings.h5p.license),
        }

    def build_question_set(self, questions: list[dict[str, Any]], l10n: dict[str, Any]) -> dict[str, Any]:
        """Wrap sub-questions in the QuestionSet content block."""
        return {
            "taskDescription": l10n["taskDescription"],
            "progressType": "dots",
            "passPercentage": self.pass_percentage,
            "questions": questions,
            "texts": dict(l10n.get("texts", {})),
            "introPage": {"showIntroPage": False},
            "endGame": self._get_end_game(l10n),
        }

    def _get_end_game(self, l10n: dict[str, Any]) -> dict[str, Any]:
        eg = l10n.get("endGame", {})
        return {
            "showResultPage": True,
            "showSolutionButton": True,
            "showRetryButton": True,
            "noResultMessage": eg.get("noResultMessage", "Finished"),
            "message": eg.get("message", "Your result:"),
            "overallFeedback": [
                {"from": 0, "to": self.pass_percentage, "feedback": eg.get("keepTrying", "Keep trying!")},
                {"from": self.pass_percentage, "to": 100, "feedback": eg.get("greatJob", "Great job!")},
            ],
        }
