"""
The puzzle board: a fixed 6x5 grid plus a write cursor.

Invariants kept by every mutation:
  - letters fill each row as a contiguous prefix (no gaps)
  - rows above the cursor row are full (locked), rows below it are empty
  - a cell has a letter iff its status is not EMPTY

The cursor always points at the next writable cell. When the last column of a
row is filled the cursor moves to column 0 of the next row; once all 30 cells
hold a letter the cursor sits at (BOARD_ROWS, 0) and `add` becomes a no-op.

Mutations never raise on bad input; they return False when nothing changed so
event handlers can decide whether to recalculate.
"""

from __future__ import annotations

import string
from typing import List, Optional, Tuple

from .cell import Cell, CellView, RENDER_CODES, Status, next_status

BOARD_ROWS = 6
BOARD_COLS = 5

_LETTERS = frozenset(string.ascii_uppercase)


class Board:
    def __init__(self, *, propagate: bool = False):
        """
        Args:
          propagate : opt into hint propagation. New letters copy a
                      PRESENT/CORRECT mark from the same column of an earlier
                      row, and toggles are mirrored onto other rows holding
                      the same letter in the same column.
        """
        self.propagate = propagate
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(BOARD_COLS)] for _ in range(BOARD_ROWS)
        ]
        self._row = 0
        self._col = 0

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> Tuple[int, int]:
        """(row, col) of the next writable cell."""
        return self._row, self._col

    @property
    def letter_count(self) -> int:
        return self._row * BOARD_COLS + self._col

    def is_empty(self) -> bool:
        return self.letter_count == 0

    def is_full(self) -> bool:
        return self._row >= BOARD_ROWS

    def cell(self, row: int, col: int) -> Cell:
        return self._cells[row][col]

    def row_word(self, row: int) -> str:
        """Letters typed so far on `row` (may be shorter than 5)."""
        return "".join(c.letter for c in self._cells[row] if c.letter is not None)

    def locked_rows(self) -> List[List[Cell]]:
        """Rows whose five cells all hold a letter, top to bottom."""
        return [row for row in self._cells if all(c.filled for c in row)]

    def snapshot(self) -> Tuple[CellView, ...]:
        """All 30 cells in row-major order as (status code, letter)."""
        return tuple(cell.view() for row in self._cells for cell in row)

    def to_bytes(self) -> bytes:
        """
        Flat encoding for embedded front ends: two bytes per cell,
        (status code, ASCII letter or 0), row-major.
        """
        out = bytearray()
        for row in self._cells:
            for cell in row:
                out.append(RENDER_CODES[cell.status])
                out.append(ord(cell.letter) if cell.letter else 0)
        return bytes(out)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, letter: str) -> bool:
        if not isinstance(letter, str) or len(letter) != 1:
            return False
        letter = letter.upper()
        if letter not in _LETTERS:
            return False
        if self.is_full():
            return False

        status = Status.INCORRECT
        if self.propagate:
            status = self._carried_status(letter, self._col)

        self._cells[self._row][self._col].write(letter, status)

        self._col += 1
        if self._col == BOARD_COLS:
            self._col = 0
            self._row += 1
        return True

    def remove(self) -> bool:
        if self._col > 0:
            self._col -= 1
        elif self._row > 0:
            self._row -= 1
            self._col = BOARD_COLS - 1
        else:
            return False

        self._cells[self._row][self._col].clear()
        return True

    def toggle(self, row: int, col: int) -> bool:
        if not (0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS):
            return False
        cell = self._cells[row][col]
        if not cell.filled:
            return False

        if not self.propagate:
            cell.status = next_status(cell.status)
            return True

        new = next_status(cell.status)
        if new is Status.CORRECT and self._column_has_correct(col):
            # only one letter can be green in a column
            new = Status.INCORRECT

        for rn, other in enumerate(self._cells):
            target = other[col]
            if target.letter != cell.letter:
                continue
            if rn == row or not self._marked_elsewhere(other, col, cell.letter):
                target.status = new
        return True

    def set_status(self, row: int, col: int, status: Status) -> bool:
        """
        Write `status` onto one typed cell. Unlike toggle this never mirrors
        onto other rows, so scripted feedback keeps earlier rows intact.
        """
        if not (0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS):
            return False
        if status is Status.EMPTY:
            return False
        cell = self._cells[row][col]
        if not cell.filled:
            return False
        cell.status = status
        return True

    def toggle_column(self, col: int) -> bool:
        """Toggle column `col` of the row holding the most recent letter."""
        row = self._edit_row()
        if row is None or not 0 <= col < BOARD_COLS:
            return False
        return self.toggle(row, col)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _edit_row(self) -> Optional[int]:
        if self._col > 0:
            return self._row
        if self._row > 0:
            return self._row - 1
        return None

    def _carried_status(self, letter: str, col: int) -> Status:
        for row in self._cells:
            cell = row[col]
            if cell.letter == letter and cell.status in (Status.PRESENT, Status.CORRECT):
                return cell.status
        return Status.INCORRECT

    def _column_has_correct(self, col: int) -> bool:
        return any(row[col].status is Status.CORRECT for row in self._cells)

    @staticmethod
    def _marked_elsewhere(row: List[Cell], col: int, letter: Optional[str]) -> bool:
        return any(
            cn != col and c.letter == letter and c.status in (Status.PRESENT, Status.CORRECT)
            for cn, c in enumerate(row)
        )

    def __repr__(self) -> str:
        rows = [self.row_word(r) or "." for r in range(BOARD_ROWS)]
        return f"Board(rows={rows!r}, cursor={self.cursor})"
