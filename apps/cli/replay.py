# apps/cli/replay.py
"""
CLI entry point for replay runs.

This script:
  1) Loads the dictionary and validates the word list (prints counts + SHA).
  2) Reads the answers to replay.
  3) For each answer, types the fixed opening guesses into a fresh board,
     colors them with the true feedback and recalculates, showing progress.
  4) Writes:
       - CSV:  per-answer results with guess / pattern / words-left columns
       - JSON: manifest with config, word-list report, git commit and a summary

Any answer that drops out of the matches while it is in the dictionary is an
engine bug; those are listed on stderr and make the exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordlehelp.dictionary import DictionaryError, load_dictionary, pretty_summary, validate_wordlist
from wordlehelp.dictionary.io import read_lines
from wordlehelp.harness import replay_case
from wordlehelp.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

from apps.cli.solve import default_dictionary


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordlehelp: replay fixed guesses against known answers")
    ap.add_argument("--dictionary", default=None, help="word list used for matching")
    ap.add_argument("--answers", default=None,
                    help="answers to replay, one per line (default: the whole dictionary)")
    ap.add_argument("--guesses", default="crane,sloth,pudgy",
                    help="comma-separated opening guesses typed for every answer")
    ap.add_argument("--sample", type=int, help="replay only the first K answers")
    ap.add_argument("--lowercase-only", action="store_true",
                    help="only accept all-lowercase dictionary entries")
    ap.add_argument("--propagate", action="store_true", help="enable hint propagation on the board")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    path = args.dictionary or default_dictionary()
    if not path:
        print("No dictionary given (use --dictionary).", file=sys.stderr)
        return 1

    # 1) Load and validate
    try:
        dictionary = load_dictionary(path, lowercase_only=args.lowercase_only)
    except DictionaryError as e:
        print(f"Cannot load dictionary: {e}", file=sys.stderr)
        return 1
    rep = validate_wordlist(path, lowercase_only=args.lowercase_only)
    print(pretty_summary(rep))

    if args.answers:
        answers = [w.strip().upper() for w in read_lines(args.answers) if w.strip()]
    else:
        answers = list(dictionary)
    if args.sample is not None:
        answers = answers[: args.sample]

    guesses = [g.strip().upper() for g in args.guesses.split(",") if g.strip()]
    total = len(answers)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(answers, ncols=80, desc="Replaying", unit="answer") if mode == "bar" else answers

    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        results.append(replay_case(dictionary, ans, guesses, propagate=args.propagate))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    lost = [r["answer"] for r in results if r["answer_kept"] is False]
    left = [r["final_count"] for r in results]
    summary = {
        "solved": sum(1 for r in results if r["solved"]),
        "answers_lost": len(lost),
        "mean_final_count": (sum(left) / len(left)) if left else 0.0,
    }

    # 3) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "guesses": guesses,
        "num_cases": len(results),
        "summary": summary,
    }, str(manifest_path))

    print(f"Solved {summary['solved']}/{total}, mean words left {summary['mean_final_count']:.1f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")

    if lost:
        print(f"Answers filtered out by their own feedback: {', '.join(lost[:20])}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
