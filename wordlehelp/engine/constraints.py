"""
Constraint extraction from the board's locked rows.

Each locked row contributes one RowConstraints:
  - fixed      : {position: letter} for every CORRECT cell
  - excluded   : {(position, letter)} for every PRESENT cell
  - min_counts : {letter: number of CORRECT/PRESENT cells with that letter}
                 for every distinct letter in the row (0 if all gray)
  - exact      : letters with at least one INCORRECT cell in the row

The duplicate-letter rule lives in `exact`: a gray letter means "no more
copies than the colored ones", not "absent". A row like A(green) A(gray)
says the word has exactly one A, and it is in position 0.

pattern_constraints() builds the same kind of set from a known-letters board
string plus unused and unplaced letters.

The full ConstraintSet is the conjunction of every row; rows never relax
each other.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set, Tuple

from wordlehelp.board import Board, BOARD_COLS, Cell, Status


@dataclass(frozen=True)
class RowConstraints:
    fixed: Dict[int, str] = field(default_factory=dict)
    excluded: Set[Tuple[int, str]] = field(default_factory=set)
    min_counts: Dict[str, int] = field(default_factory=dict)
    exact: Set[str] = field(default_factory=set)

    def admits(self, word: str) -> bool:
        """Plain check of a single uppercase word against this row."""
        for p, letter in self.fixed.items():
            if word[p] != letter:
                return False
        for p, letter in self.excluded:
            if word[p] == letter or letter not in word:
                return False
        counts = Counter(word)
        for letter, n in self.min_counts.items():
            if counts[letter] < n:
                return False
            if letter in self.exact and counts[letter] != n:
                return False
        return True


@dataclass(frozen=True)
class ConstraintSet:
    rows: Tuple[RowConstraints, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def admits(self, word: str) -> bool:
        return all(r.admits(word) for r in self.rows)


def row_constraints(cells: Iterable[Cell]) -> RowConstraints:
    """Derive the rules revealed by one fully typed row."""
    fixed: Dict[int, str] = {}
    excluded: Set[Tuple[int, str]] = set()
    min_counts: Dict[str, int] = {}
    exact: Set[str] = set()

    for p, cell in enumerate(cells):
        letter = cell.letter
        if letter is None:
            raise ValueError(f"row is not locked: position {p} is empty")
        min_counts.setdefault(letter, 0)

        if cell.status is Status.CORRECT:
            fixed[p] = letter
            min_counts[letter] += 1
        elif cell.status is Status.PRESENT:
            excluded.add((p, letter))
            min_counts[letter] += 1
        else:
            exact.add(letter)

    return RowConstraints(fixed=fixed, excluded=excluded, min_counts=min_counts, exact=exact)


def extract_constraints(board: Board) -> ConstraintSet:
    """Constraints of every locked row on `board`, top to bottom."""
    rows: List[RowConstraints] = [row_constraints(r) for r in board.locked_rows()]
    return ConstraintSet(tuple(rows))


def pattern_constraints(board: str, unused: str = "", unplaced: str = "") -> ConstraintSet:
    """
    Rules for the summary form of a game instead of typed rows.

    Args:
      board    : 5 characters, a letter where the position is known and '.'
                 where it is not (e.g. "C.A..")
      unused   : letters not in the word at any unknown position
      unplaced : letters the word must contain somewhere

    An unused letter that is also on the board may only appear where the
    board shows it, so its count is pinned to the number of board copies.
    Unplaced letters go in a second row so they combine with that pin.
    """
    board = board.upper()
    unused = unused.upper()
    unplaced = unplaced.upper()
    if len(board) != BOARD_COLS:
        raise ValueError(f"board must have {BOARD_COLS} characters: {board!r}")
    for text in (board.replace(".", ""), unused, unplaced):
        if text and not (text.isascii() and text.isalpha()):
            raise ValueError(f"letters must be A-Z: {text!r}")

    fixed = {p: letter for p, letter in enumerate(board) if letter != "."}
    placed = Counter(fixed.values())
    known = RowConstraints(
        fixed=fixed,
        min_counts={letter: placed[letter] for letter in set(unused)},
        exact=set(unused),
    )
    required = RowConstraints(min_counts={letter: 1 for letter in set(unplaced)})
    return ConstraintSet((known, required))
