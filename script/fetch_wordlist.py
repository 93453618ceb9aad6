"""
Download a word list and write it as a clean 5-letter dictionary.

What it does:
- Downloads the URL (plain text or an HTML page).
- HTML is reduced to its visible text with BeautifulSoup first.
- Extracts every standalone 5-letter alphabetic token, lowercases it and
  de-duplicates while preserving first-seen order.
- Writes one word per line.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt --out words.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url ... --sort --out words.txt
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup

from wordlehelp.dictionary import WORD_LENGTH, write_lines

TOKEN_RE = re.compile(r"\b[A-Za-z]{%d}\b" % WORD_LENGTH)


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, html: bool = False) -> list[str]:
    if html:
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(m.group(0).lower() for m in TOKEN_RE.finditer(text))


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    html = "html" in r.headers.get("Content-Type", "")
    return extract_words(r.text, html=html)


def main():
    ap = argparse.ArgumentParser(description="Fetch a 5-letter word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
