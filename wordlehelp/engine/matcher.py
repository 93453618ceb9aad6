"""
Match engine: filter the dictionary against the board's constraints.

calculate() rebuilds the constraints from scratch, scans every dictionary word
once and stores the survivors in dictionary order. Nothing is cached between
calls, so the result only ever depends on the current board.

The scan works on the dictionary's (N, 5) letter-code matrix: each rule
becomes one boolean column mask and the masks are ANDed together.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

import numpy as np

from wordlehelp.board import Board
from wordlehelp.dictionary import Dictionary
from .constraints import ConstraintSet, extract_constraints

log = logging.getLogger(__name__)


def _code(letter: str) -> int:
    return ord(letter) - ord("A")


def match_mask(codes: np.ndarray, constraints: ConstraintSet) -> np.ndarray:
    """Boolean mask over the rows of `codes` that satisfy every constraint."""
    mask = np.ones(codes.shape[0], dtype=bool)
    letter_counts: Dict[str, np.ndarray] = {}

    for row in constraints.rows:
        for p, letter in row.fixed.items():
            mask &= codes[:, p] == _code(letter)
        for p, letter in row.excluded:
            mask &= codes[:, p] != _code(letter)

        # PRESENT letters also count toward min_counts, so "occurs somewhere"
        # is enforced by the count rule below.
        for letter, n in row.min_counts.items():
            counts = letter_counts.get(letter)
            if counts is None:
                counts = (codes == _code(letter)).sum(axis=1)
                letter_counts[letter] = counts
            if letter in row.exact:
                mask &= counts == n
            else:
                mask &= counts >= n

        if log.isEnabledFor(logging.DEBUG):
            log.debug("rule fixed=%s excluded=%s counts=%s exact=%s -> %d candidates",
                      dict(sorted(row.fixed.items())), sorted(row.excluded),
                      dict(sorted(row.min_counts.items())), sorted(row.exact),
                      int(np.count_nonzero(mask)))

    return mask


class MatchEngine:
    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary
        self._indices: np.ndarray = np.arange(len(dictionary))
        self._matches: Tuple[str, ...] = tuple(dictionary)

    @property
    def count(self) -> int:
        return len(self._matches)

    @property
    def matches(self) -> Tuple[str, ...]:
        return self._matches

    @property
    def indices(self) -> np.ndarray:
        """Dictionary positions of the current matches."""
        return self._indices

    def calculate(self, board: Board) -> int:
        """Re-filter the dictionary for `board` and return the match count."""
        return self.apply(extract_constraints(board))

    def apply(self, constraints: ConstraintSet) -> int:
        """Re-filter the dictionary for an explicit constraint set."""
        mask = match_mask(self.dictionary.codes, constraints)

        self._indices = np.flatnonzero(mask)
        words = self.dictionary.words
        self._matches = tuple(words[i] for i in self._indices)

        log.debug("%d rule row(s) -> %d of %d words match",
                  len(constraints), self.count, len(self.dictionary))
        return self.count

    def get_word(self, index: int) -> str:
        if not 0 <= index < self.count:
            raise IndexError(f"match index {index} out of range (0..{self.count - 1})")
        return self._matches[index]
