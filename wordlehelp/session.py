"""
Session: one player's board plus the match results for it.

This is the whole surface a front end needs. Typical loop:

    session = create(dictionary)
    if session.add("c"):           # any mutation that returns True...
        n = session.calculate()    # ...is followed by a recalculation
    words = [session.get_word(i) for i in range(n)]

Every session owns its own Board; the Dictionary may be shared read-only
between sessions.
"""

from __future__ import annotations

from typing import Optional, Tuple

from wordlehelp.board import Board, BOARD_COLS, CellView
from wordlehelp.dictionary import Dictionary
from wordlehelp.engine import MatchEngine, pattern_statuses


class Session:
    def __init__(self, dictionary: Dictionary, *, propagate: bool = False):
        self.board = Board(propagate=propagate)
        self.engine = MatchEngine(dictionary)

    @property
    def dictionary(self) -> Dictionary:
        return self.engine.dictionary

    # Board operations

    def add(self, letter: str) -> bool:
        return self.board.add(letter)

    def remove(self) -> bool:
        return self.board.remove()

    def toggle(self, row: int, col: int) -> bool:
        return self.board.toggle(row, col)

    def toggle_column(self, col: int) -> bool:
        return self.board.toggle_column(col)

    def snapshot(self) -> Tuple[CellView, ...]:
        return self.board.snapshot()

    # Matching

    def calculate(self) -> int:
        return self.engine.calculate(self.board)

    @property
    def match_count(self) -> int:
        """Count from the most recent calculate()."""
        return self.engine.count

    def get_word(self, index: int) -> str:
        return self.engine.get_word(index)

    @property
    def matches(self) -> Tuple[str, ...]:
        """Words from the most recent calculate(), in dictionary order."""
        return self.engine.matches

    def enter(self, guess: str, pattern: Optional[str] = None) -> int:
        """
        Type a whole guess on the next row and color it from `pattern`
        ('G'/'Y'/'-' per letter, all gray if omitted). Returns the row used.

        Colors are written straight onto the new row, so with propagation on
        the earlier rows keep exactly the feedback they were given.

        Raises ValueError if the board is not at the start of a free row or
        the guess/pattern is malformed; the board is left untouched then.
        """
        row, col = self.board.cursor
        if col != 0 or self.board.is_full():
            raise ValueError(f"no free row to enter {guess!r} (cursor at {row}, {col})")
        if len(guess) != BOARD_COLS or not guess.isascii() or not guess.isalpha():
            raise ValueError(f"guess must be {BOARD_COLS} letters A-Z: {guess!r}")
        statuses = pattern_statuses(pattern if pattern is not None else "-" * BOARD_COLS)
        if len(statuses) != BOARD_COLS:
            raise ValueError(f"pattern must have {BOARD_COLS} characters: {pattern!r}")

        typed = 0
        try:
            for letter in guess:
                if not self.board.add(letter):
                    raise ValueError(f"cannot type {letter!r} on row {row}")
                typed += 1
            for c, wanted in enumerate(statuses):
                if not self.board.set_status(row, c, wanted):
                    raise ValueError(f"cannot mark row {row} column {c} as {wanted.value}")
        except ValueError:
            for _ in range(typed):
                self.board.remove()
            raise
        return row


def create(dictionary: Dictionary, *, propagate: bool = False) -> Session:
    """New session with an empty board."""
    return Session(dictionary, propagate=propagate)
