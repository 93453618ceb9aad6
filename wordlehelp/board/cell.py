"""
Board cell model.

A cell holds an optional letter and a feedback status. The status is a closed
enum so transitions stay exhaustive; front ends never see the enum directly,
they get the integer render codes from RENDER_CODES.

Status cycle (toggle):  INCORRECT -> PRESENT -> CORRECT -> INCORRECT
EMPTY is only entered by removing a letter, never by toggling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Optional


class Status(Enum):
    EMPTY = "empty"
    INCORRECT = "incorrect"  # gray
    PRESENT = "present"      # yellow
    CORRECT = "correct"      # green


# Rendering categories exposed to front ends (0 = nothing rendered)
RENDER_CODES: Dict[Status, int] = {
    Status.EMPTY: 0,
    Status.INCORRECT: 1,
    Status.PRESENT: 2,
    Status.CORRECT: 3,
}

_NEXT: Dict[Status, Status] = {
    Status.INCORRECT: Status.PRESENT,
    Status.PRESENT: Status.CORRECT,
    Status.CORRECT: Status.INCORRECT,
}


def next_status(status: Status) -> Status:
    """Next status in the toggle cycle. EMPTY has no successor."""
    if status is Status.EMPTY:
        raise ValueError("an empty cell cannot be toggled")
    return _NEXT[status]


class CellView(NamedTuple):
    """Read-only projection of a cell for renderers."""
    status: int
    letter: Optional[str]


@dataclass
class Cell:
    letter: Optional[str] = None
    status: Status = Status.EMPTY

    @property
    def filled(self) -> bool:
        return self.letter is not None

    def write(self, letter: str, status: Status = Status.INCORRECT) -> None:
        self.letter = letter
        self.status = status

    def clear(self) -> None:
        self.letter = None
        self.status = Status.EMPTY

    def view(self) -> CellView:
        return CellView(RENDER_CODES[self.status], self.letter)
