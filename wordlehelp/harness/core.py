"""
Replay harness: drive a Session the way a player would, with known answers.

- replay_case:  type fixed guesses for one hidden answer, coloring each row
                with its true feedback, and recalculate after every row.
- replay_batch: the same over many answers.

For a correct engine the hidden answer is never filtered out while it is in
the dictionary; `answer_kept` records that so a batch doubles as a
regression check over a whole word list. No guess selection happens here:
the guesses are whatever the caller passes in.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Sequence, Tuple

from wordlehelp.board import BOARD_COLS, BOARD_ROWS
from wordlehelp.dictionary import Dictionary
from wordlehelp.engine import score
from wordlehelp.session import Session


def replay_case(
        dictionary: Dictionary,
        answer: str,
        guesses: Sequence[str],
        *,
        propagate: bool = False,
) -> Dict:
    """
    Replay `guesses` (at most BOARD_ROWS are used) against `answer`.

    Returns:
        dict with keys:
            answer (str), solved (bool), rows (int), answer_kept (bool | None),
            final_count (int), time_ms (float),
            history (list[(guess, pattern, matches_left)])
    """
    answer = answer.strip().upper()
    in_dictionary = answer in dictionary
    session = Session(dictionary, propagate=propagate)

    history: List[Tuple[str, str, int]] = []
    kept = True if in_dictionary else None
    solved = False

    t0 = time.perf_counter()
    for guess in list(guesses)[:BOARD_ROWS]:
        guess = guess.strip().upper()
        patt = score(guess, answer)
        session.enter(guess, patt)
        left = session.calculate()
        history.append((guess, patt, left))

        if in_dictionary and answer not in session.matches:
            kept = False

        if patt == "G" * BOARD_COLS:
            solved = True
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "solved": solved,
        "rows": len(history),
        "answer_kept": kept,
        "final_count": session.match_count,
        "time_ms": dt,
        "history": history,
    }


def replay_batch(
        dictionary: Dictionary,
        answers: Iterable[str],
        guesses: Sequence[str],
        *,
        sample: int | None = None,
        propagate: bool = False,
) -> List[Dict]:
    """Replay the same guesses against each answer (first `sample` only if given)."""
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]
    return [replay_case(dictionary, ans, guesses, propagate=propagate) for ans in pool]
