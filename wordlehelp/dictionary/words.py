"""
Immutable dictionary of candidate words.

Words are stored uppercase in the order given. Alongside the tuple of strings
the dictionary keeps a read-only (N, 5) uint8 matrix of letter codes
(A=0 .. Z=25) which the match engine scans with vectorised comparisons.
"""

from __future__ import annotations

import string
from pathlib import Path
from typing import Iterable, Iterator, Tuple

import numpy as np

from .validator import WORD_LENGTH, pretty_summary, scan_wordlist

_LETTERS = frozenset(string.ascii_uppercase)


class DictionaryError(ValueError):
    """The word source is missing or malformed; the puzzle cannot run without it."""


class Dictionary:
    def __init__(self, words: Iterable[str]):
        out = []
        seen = set()
        for i, w in enumerate(words):
            if not isinstance(w, str):
                raise DictionaryError(f"entry {i} is not a string: {w!r}")
            u = w.upper()
            if len(u) != WORD_LENGTH or not set(u) <= _LETTERS:
                raise DictionaryError(f"entry {i} is not a {WORD_LENGTH}-letter word: {w!r}")
            if u in seen:
                raise DictionaryError(f"entry {i} is a duplicate: {w!r}")
            seen.add(u)
            out.append(u)

        self._words: Tuple[str, ...] = tuple(out)
        self._lookup = frozenset(self._words)

        buf = "".join(self._words).encode("ascii")
        codes = np.fromiter(buf, dtype=np.uint8, count=len(buf)).reshape(-1, WORD_LENGTH) - ord("A")
        codes.flags.writeable = False
        self._codes = codes

    @classmethod
    def from_file(cls, path: str | Path, *, lowercase_only: bool = False) -> "Dictionary":
        return load_dictionary(path, lowercase_only=lowercase_only)

    @property
    def codes(self) -> np.ndarray:
        """(N, 5) read-only letter codes, row i encodes word i."""
        return self._codes

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._lookup

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} words)"


def load_dictionary(path: str | Path, *, lowercase_only: bool = False) -> Dictionary:
    """
    Build a Dictionary from a word list file (plain text or gzip).

    Lines that are not 5-letter alphabetic words are skipped and counted (see
    validator.scan_wordlist). A missing file or a file with no usable words
    raises DictionaryError.
    """
    try:
        words, rep = scan_wordlist(path, lowercase_only=lowercase_only)
    except UnicodeDecodeError as e:
        raise DictionaryError(f"word list is not UTF-8 text: {path}") from e
    except (OSError, EOFError) as e:
        raise DictionaryError(f"cannot read word list {path}: {e}") from e

    if not rep.exists:
        raise DictionaryError(f"word list not found: {path}") from FileNotFoundError(path)
    if not rep.passed:
        raise DictionaryError("; ".join(rep.issues) + f" ({pretty_summary(vars(rep))})")
    return Dictionary(words)
