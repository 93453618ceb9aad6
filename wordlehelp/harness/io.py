"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:      flatten per-answer replay results into a tidy CSV (one row per answer).
- write_manifest: dump a JSON manifest with config, word-list report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Patterns are prefixed with an apostrophe so spreadsheets don't read strings
like "-GYY-" as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

from wordlehelp.board import BOARD_ROWS


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_rows: int = BOARD_ROWS) -> str:
    """
    Serialize replay results to CSV.

    Columns:
      answer, solved, rows, answer_kept, final_count, time_ms,
      guess_1, patt_1, left_1, ..., guess_<max_rows>, patt_<max_rows>, left_<max_rows>

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "solved", "rows", "answer_kept", "final_count", "time_ms"]
    for i in range(1, max_rows + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "answer": r["answer"],
                "solved": r["solved"],
                "rows": r["rows"],
                "answer_kept": "" if r["answer_kept"] is None else r["answer_kept"],
                "final_count": r["final_count"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_rows + 1):
                if i <= len(hist):
                    g, patt, left = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                    row[f"left_{i}"] = left
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
                    row[f"left_{i}"] = ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a replay run.

    Typical keys: run_id, git_commit, config (CLI args), wordlist (validator
    report), num_cases, summary.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the working tree, or 'unknown' outside a repo / without git."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
