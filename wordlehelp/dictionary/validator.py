"""
Word-list validator.

What this module does:
- Scan a word list file (plain or gzip) and keep the usable 5-letter words.
- Count what was rejected: wrong length, non-alphabetic / wrong case, duplicates.
- Compute SHA-256 of the raw file so runs can record exactly which list they used.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordlehelp.dictionary import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt")
    print(pretty_summary(rep))

Words are accepted case-insensitively and stored uppercase. System dictionaries
(e.g. /etc/dictionaries-common/words) mix in proper nouns and acronyms; pass
lowercase_only=True to keep only entries that are entirely lowercase.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple

from .io import read_lines

log = logging.getLogger(__name__)

WORD_LENGTH = 5


@dataclass
class WordListReport:
    """Per-file diagnostics and metadata."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    lines: int = 0         # total lines read
    count: int = 0         # words accepted (unique, uppercased)
    wrong_length: int = 0  # lines not exactly WORD_LENGTH characters
    wrong_case: int = 0    # lines with non a-z characters (or not lowercase when required)
    duplicates: int = 0    # repeated words dropped after the first occurrence
    sha256: str = ""       # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _acceptable(w: str, lowercase_only: bool) -> bool:
    if not (w.isascii() and w.isalpha()):
        return False
    return w.islower() if lowercase_only else True


def scan_wordlist(path: str | Path, *, lowercase_only: bool = False) -> Tuple[List[str], WordListReport]:
    """
    Load a word list and collect diagnostics.

    Returns:
      (words, report) where `words` are the accepted entries, uppercased,
      de-duplicated in first-seen order.
    """
    p = Path(path)
    rep = WordListReport(path=str(path), exists=p.exists())
    if not rep.exists:
        rep.issues.append(f"word list not found: {path}")
        return [], rep

    words: List[str] = []
    seen = set()
    for raw in read_lines(p):
        rep.lines += 1
        w = raw.strip()
        if len(w) != WORD_LENGTH:
            rep.wrong_length += 1
            continue
        if not _acceptable(w, lowercase_only):
            rep.wrong_case += 1
            continue
        w = w.upper()
        if w in seen:
            rep.duplicates += 1
            continue
        seen.add(w)
        words.append(w)

    rep.count = len(words)
    rep.sha256 = _sha256_file(p)

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if rep.duplicates:
        rep.issues.append(f"word list has {rep.duplicates} duplicate word(s)")
    rep.passed = rep.count > 0

    log.info(
        "%s: %d lines, %d words (%d wrong length, %d wrong case, %d duplicates)",
        rep.path, rep.lines, rep.count, rep.wrong_length, rep.wrong_case, rep.duplicates,
    )
    return words, rep


def validate_wordlist(path: str | Path, *, lowercase_only: bool = False) -> Dict:
    """
    Validate a word list file.

    Returns
    -------
    Dict
        JSON-serializable WordListReport: counts, SHA-256, `passed` (file
        exists and yields at least one word) and `issues`.
    """
    _, rep = scan_wordlist(path, lowercase_only=lowercase_only)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        words.txt | lines=104334 | words=6210 (wrong length=97011, wrong case=1113, dup=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | lines={report['lines']} | words={report['count']} "
        f"(wrong length={report['wrong_length']}, wrong case={report['wrong_case']}, "
        f"dup={report['duplicates']}, sha={sha}) | {status}"
    )
