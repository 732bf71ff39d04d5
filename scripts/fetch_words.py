#!/usr/bin/env python3
"""Download a word list and keep the five-letter words.

The source is any plain-text list with one word per line. Words are
lowercased and deduplicated, original order preserved.

Usage:
    python3 scripts/fetch_words.py --url <list-url> --output words.txt

"""

from __future__ import annotations

import argparse
import os
from typing import List

import requests
from tqdm import tqdm

from wordle_words import Word


def fetch_lines(url: str, timeout: float) -> List[str]:
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise SystemExit(f"Could not download {url}: {e}")
    return r.text.splitlines()


def five_letter_words(lines: List[str]) -> List[str]:
    seen = set()
    out = []
    for line in tqdm(lines, desc="Lines"):
        w = line.strip().lower()
        if w in seen or Word.try_from_str(w) is None:
            continue
        seen.add(w)
        out.append(w)
    return out


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--url", required=True, help="URL of a plain-text word list")
    p.add_argument("--output", default="words.txt", help="output words file")
    p.add_argument("--timeout", type=float, default=10.0, help="request timeout in seconds")
    args = p.parse_args()

    words = five_letter_words(fetch_lines(args.url, args.timeout))
    if not words:
        raise SystemExit(f"No five-letter words found at {args.url}")

    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as fh:
        for w in words:
            fh.write(w + "\n")

    print(f"Wrote {len(words)} words to {args.output}")


if __name__ == "__main__":
    main()
