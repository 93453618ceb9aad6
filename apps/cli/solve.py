# apps/cli/solve.py
"""
One-shot solver: list the dictionary words consistent with some guesses.

Each positional argument is a guess and its feedback, GUESS=PATTERN, where the
pattern uses G (correct), Y (present) and - or . (incorrect):

    python -m apps.cli.solve crane=-YG-- spilt=----Y

The rows are typed into a fresh board exactly as a front end would, then the
matches are printed alphabetically in as many columns as fit the terminal.

A game can also be summarised without its rows: --board gives the known
positions with . for unknown ones, --unused the letters ruled out and
--unplaced the letters known to be somewhere in the word:

    python -m apps.cli.solve --board C.A.. --unused RNESLT --unplaced O

Both forms may be combined; every rule must hold. --debug logs each rule
row and how many words survive it.

Dictionary lookup order: --dictionary, $WORDLEHELP_DICTIONARY, then the first
existing file of words.txt, words.txt.gz, /etc/dictionaries-common/words.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from wordlehelp.board import BOARD_COLS, BOARD_ROWS
from wordlehelp.dictionary import DictionaryError, load_dictionary
from wordlehelp.engine import ConstraintSet, extract_constraints, pattern_constraints, pattern_statuses
from wordlehelp.session import Session

DICTS = (
    "words.txt",
    "words.txt.gz",
    "/etc/dictionaries-common/words",
)
DICT_ENV = "WORDLEHELP_DICTIONARY"


def default_dictionary() -> Optional[str]:
    """Environment override first, then the first default list that exists."""
    env = os.environ.get(DICT_ENV)
    if env:
        return env
    for d in DICTS:
        if Path(d).is_file():
            return d
    return None


def parse_row(text: str) -> Tuple[str, str]:
    """argparse type for GUESS=PATTERN (':' also accepted as separator)."""
    sep = "=" if "=" in text else ":"
    guess, _, patt = text.partition(sep)
    guess = guess.strip().upper()
    patt = patt.strip().upper()
    if len(guess) != BOARD_COLS or not guess.isascii() or not guess.isalpha():
        raise argparse.ArgumentTypeError(f"guess should contain {BOARD_COLS} letters A-Z: {text!r}")
    if len(patt) != BOARD_COLS:
        raise argparse.ArgumentTypeError(f"pattern should contain {BOARD_COLS} characters: {text!r}")
    try:
        pattern_statuses(patt)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return guess, patt


def parse_board(text: str) -> str:
    """argparse type for the known-letters board, e.g. C.A.."""
    board = text.strip().upper()
    if len(board) != BOARD_COLS or not all(ch == "." or "A" <= ch <= "Z" for ch in board):
        raise argparse.ArgumentTypeError(
            f"board should contain {BOARD_COLS} characters, A-Z or . for unknown: {text!r}")
    return board


def parse_letters(text: str) -> str:
    letters = text.strip().upper()
    if letters and not (letters.isascii() and letters.isalpha()):
        raise argparse.ArgumentTypeError(f"letters should be A-Z: {text!r}")
    return letters


def print_results(words: Sequence[str], width: Optional[int] = None) -> None:
    """Sorted matches, as many 7-character columns as the terminal allows."""
    words = sorted(words)
    n = len(words)
    print(f"{n:,} {'word' if n == 1 else 'words'} found")

    if width is None:
        width = shutil.get_terminal_size(fallback=(0, 0)).columns
    cols = max(1, width // (BOARD_COLS + 2)) if width > 0 else 1

    for i in range(0, n, cols):
        print("  ".join(words[i:i + cols]))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordlehelp: list words matching guesses so far")
    ap.add_argument("rows", nargs="*", type=parse_row, metavar="GUESS=PATTERN",
                    help=f"up to {BOARD_ROWS} guesses with feedback, e.g. crane=-YG--")
    ap.add_argument("-b", "--board", type=parse_board, default=None,
                    help="known letters by position, . for unknown, e.g. C.A..")
    ap.add_argument("-u", "--unused", type=parse_letters, default="",
                    help="letters not in the word (outside the known positions)")
    ap.add_argument("-p", "--unplaced", type=parse_letters, default="",
                    help="letters in the word at an unknown position")
    ap.add_argument("-d", "--dictionary", default=None,
                    help=f"word list file (default: ${DICT_ENV} or one of {', '.join(DICTS)})")
    ap.add_argument("--lowercase-only", action="store_true",
                    help="only accept all-lowercase dictionary entries (skips proper nouns)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log loading and timing details")
    ap.add_argument("--debug", action="store_true", help="log every rule row and the words it leaves")
    args = ap.parse_args(argv)

    if len(args.rows) > BOARD_ROWS:
        ap.error(f"at most {BOARD_ROWS} rows fit on the board")

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    elif args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    path = args.dictionary or default_dictionary()
    if not path:
        print("No dictionary file given and none of the default dictionaries could be found.",
              file=sys.stderr)
        print("Default dictionaries are:", file=sys.stderr)
        for d in DICTS:
            print(f"  {d}", file=sys.stderr)
        return 1

    try:
        dictionary = load_dictionary(path, lowercase_only=args.lowercase_only)
    except DictionaryError as e:
        print(f"Cannot load dictionary: {e}", file=sys.stderr)
        return 1

    session = Session(dictionary)
    for guess, patt in args.rows:
        session.enter(guess, patt)

    t0 = time.perf_counter()
    if args.board or args.unused or args.unplaced:
        summary = pattern_constraints(args.board or "." * BOARD_COLS, args.unused, args.unplaced)
        session.engine.apply(ConstraintSet(extract_constraints(session.board).rows + summary.rows))
    else:
        session.calculate()
    if args.verbose:
        print(f"Search took {time.perf_counter() - t0:.2g} seconds")

    print_results(session.matches)
    return 0


if __name__ == "__main__":
    sys.exit(main())
