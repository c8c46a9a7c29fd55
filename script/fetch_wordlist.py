"""
Download a word list page and write a clean game dictionary.

What it does:
- Downloads the page (plain text or HTML).
- For HTML, takes the visible text only.
- Keeps alphabetic tokens of exactly N letters, uppercases them and
  de-duplicates while preserving page order.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out evilwordle/datasets/data/words_5.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url ... --sort
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from evilwordle.datasets import normalize_words, write_lines, pretty_summary, validate_wordlist

TOKEN_RE = re.compile(r"[A-Za-z]+")


def fetch_words(url: str, N: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    text = r.text
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    return normalize_words(TOKEN_RE.findall(text), N)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list and write a game dictionary")
    ap.add_argument("--url", required=True)
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--out", default="evilwordle/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(pretty_summary(validate_wordlist(args.N, args.out)))
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
