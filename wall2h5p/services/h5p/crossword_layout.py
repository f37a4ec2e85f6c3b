# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Crossword layout engine.

Places clue/answer entries on an unbounded grid by greedy intersection:

1. Entries with a blank clue or answer are dropped.
2. Entries are stably sorted by answer length, longest first.
3. The first entry is placed across at (0, 0).
4. Every following entry crosses the first placed word that shares a
   letter with it (case-insensitive). The crossing is the first match
   scanning the anchor's letters, then the entry's letters, and the entry
   runs perpendicular to the anchor.
5. A crossing that puts a different letter on an occupied cell rejects
   the entry. There is no retry against another anchor and no later pass.
6. Coordinates are shifted so that the smallest row and column are 0.

Placement is deterministic: the same entries always give the same grid.
Optimal packing is not a goal; some placeable words are skipped.

Example:
    >>> layout = CrosswordLayout()
    >>> result = layout.place([CrosswordEntry("Pet", "CAT"), CrosswordEntry("Club", "BAT")])
    >>> [(w.answer, w.orientation, w.row, w.col) for w in result.words]
    [('CAT', 'across', 1, 0), ('BAT', 'down', 0, 1)]
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from wall2h5p.services.h5p.models import Orientation, PlacedWord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrosswordEntry:
    """A clue/answer pair to place."""

    clue: str
    answer: str


@dataclass
class _Placement:
    """A word on the grid in raw (possibly negative) coordinates."""

    entry: CrosswordEntry
    x: int
    y: int
    orientation: Orientation

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield (x, y, lowercase letter) for every cell of the word."""
        for offset, char in enumerate(self.entry.answer):
            if self.orientation == "across":
                yield self.x + offset, self.y, char.lower()
            else:
                yield self.x, self.y + offset, char.lower()

    def letter_at(self, x: int, y: int) -> str | None:
        """Return the lowercase letter at (x, y), or None if not covered."""
        if self.orientation == "across":
            offset = x - self.x
            on_line = y == self.y
        else:
            offset = y - self.y
            on_line = x == self.x
        if on_line and 0 <= offset < len(self.entry.answer):
            return self.entry.answer[offset].lower()
        return None


@dataclass
class CrosswordResult:
    """Outcome of a layout run.

    Attributes:
        words: Placed words in placement order, clue_id 1..n.
        skipped: One human-readable message per entry that was not placed.
    """

    words: list[PlacedWord] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def find_crossing(anchor: _Placement, entry: CrosswordEntry) -> _Placement | None:
    """Compute where ``entry`` crosses ``anchor`` at their first shared letter.

    Args:
        anchor: A placed word.
        entry: The word to place.

    Returns:
        The perpendicular placement, or None if no letter is shared.
    """
    for i, anchor_char in enumerate(anchor.entry.answer):
        for j, char in enumerate(entry.answer):
            if anchor_char.lower() != char.lower():
                continue
            if anchor.orientation == "across":
                return _Placement(entry, anchor.x + i, anchor.y - j, "down")
            return _Placement(entry, anchor.x - j, anchor.y + i, "across")
    return None


def has_collision(candidate: _Placement, placed: list[_Placement]) -> bool:
    """Check whether any cell of the candidate holds a different letter."""
    for x, y, char in candidate.cells():
        for word in placed:
            existing = word.letter_at(x, y)
            if existing is not None and existing != char:
                return True
    return False


class CrosswordLayout:
    """Greedy crossword placement engine.

    Stateless between calls: one instance can lay out any number of
    puzzles.

    Args:
        min_answer_length: Answers shorter than this are skipped.
    """

    def __init__(self, min_answer_length: int = 1):
        self.min_answer_length = max(1, min_answer_length)

    def place(self, entries: Iterable[CrosswordEntry]) -> CrosswordResult:
        """Lay out the entries.

        Args:
            entries: Clue/answer pairs in source order.

        Returns:
            CrosswordResult with non-negative placed words and skip messages.
        """
        result = CrosswordResult()
        candidates = self._normalize(entries, result)
        candidates.sort(key=lambda entry: len(entry.answer), reverse=True)

        placed: list[_Placement] = []
        for entry in candidates:
            if not placed:
                placed.append(_Placement(entry, 0, 0, "across"))
                continue

            placement, reason = self._try_place(entry, placed)
            if placement is None:
                self._skip(result, entry, reason)
                continue
            placed.append(placement)

        result.words = self._normalize_coordinates(placed)
        return result

    def _normalize(self, entries: Iterable[CrosswordEntry], result: CrosswordResult) -> list[CrosswordEntry]:
        candidates = []
        for entry in entries:
            clue = entry.clue.strip()
            answer = entry.answer.strip()
            if not clue or not answer:
                continue
            normalized = CrosswordEntry(clue, answer)
            if len(answer) < self.min_answer_length:
                self._skip(result, normalized, f"shorter than {self.min_answer_length} characters")
                continue
            candidates.append(normalized)
        return candidates

    def _try_place(
        self,
        entry: CrosswordEntry,
        placed: list[_Placement],
    ) -> tuple[_Placement | None, str]:
        for anchor in placed:
            candidate = find_crossing(anchor, entry)
            if candidate is None:
                continue
            if has_collision(candidate, placed):
                return None, f'collides with the grid when crossing "{anchor.entry.answer}"'
            return candidate, ""
        return None, "no letter in common with placed words"

    def _skip(self, result: CrosswordResult, entry: CrosswordEntry, reason: str) -> None:
        message = f'Could not place clue "{entry.clue}" ({entry.answer}): {reason}'
        logger.warning(message)
        result.skipped.append(message)

    def _normalize_coordinates(self, placed: list[_Placement]) -> list[PlacedWord]:
        if not placed:
            return []

        shift_x = -min(0, min(p.x for p in placed))
        shift_y = -min(0, min(p.y for p in placed))

        return [
            PlacedWord(
                clue=p.entry.clue,
                answer=p.entry.answer,
                row=p.y + shift_y,
                col=p.x + shift_x,
                orientation=p.orientation,
                clue_id=index,
            )
            for index, p in enumerate(placed, start=1)
        ]
