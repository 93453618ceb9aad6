"""
Feedback patterns: what the puzzle would show for a (guess, answer) pair.

Pattern characters:
  - 'G' : correct letter, correct position   -> Status.CORRECT
  - 'Y' : letter elsewhere in the answer     -> Status.PRESENT
  - '-' : no further copies in the answer    -> Status.INCORRECT

The solver itself never needs this; it is how the replay harness and the
one-shot CLI turn a known guess/answer or a typed pattern into board colors.
Duplicates follow the usual two-pass rule: greens first, then yellows only
while unmatched copies of the letter remain in the answer.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Literal

from wordlehelp.board import Status

PatternChar = Literal["G", "Y", "-"]

PATTERN_STATUS: Dict[str, Status] = {
    "G": Status.CORRECT,
    "Y": Status.PRESENT,
    "-": Status.INCORRECT,
}


def score(guess: str, answer: str) -> str:
    """
    Feedback pattern for `guess` against `answer` (case-insensitive).

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer differ in length: {guess!r} / {answer!r}")

    pattern = ["-"] * len(guess)

    # Pass 1: greens, and the answer letters left over for yellows
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the leftover multiplicity
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def pattern_statuses(pattern: str) -> List[Status]:
    """Map a 'G'/'Y'/'-' pattern to board statuses. '.' is accepted for '-'."""
    out: List[Status] = []
    for ch in pattern.upper().replace(".", "-"):
        try:
            out.append(PATTERN_STATUS[ch])
        except KeyError:
            raise ValueError(f"bad pattern character {ch!r} in {pattern!r} (use G, Y or -)") from None
    return out
