#!/usr/bin/env python3
"""Check a words file for lines the solver would skip and for duplicates.

Usage: python3 scripts/check_words.py [--words-file words.txt]
Exits 1 when anything is reported.
"""
from __future__ import annotations
import argparse
from collections import Counter
from pathlib import Path

from wordle_words import Word


def check(lines):
    """Return (invalid, duplicates): invalid as (line number, text) pairs."""
    invalid = []
    counts = Counter()
    for n, line in enumerate(lines, 1):
        w = line.strip()
        if not w:
            continue
        if Word.try_from_str(w) is None:
            invalid.append((n, w))
        else:
            counts[w.lower()] += 1
    duplicates = sorted(w for w, c in counts.items() if c > 1)
    return invalid, duplicates


def main() -> int:
    p = argparse.ArgumentParser()
    p.add_argument('--words-file', default='words.txt', help='path to words file')
    args = p.parse_args()

    f = Path(args.words_file)
    if not f.exists():
        print(f"File not found: {f}")
        return 2

    invalid, duplicates = check(f.read_text(encoding='utf-8').splitlines())
    print(f"File: {f} - invalid: {len(invalid)}, duplicates: {len(duplicates)}")
    for n, w in invalid:
        print(f"  line {n}: {w!r}")
    for w in duplicates:
        print(f"  duplicate: {w}")
    return 1 if invalid or duplicates else 0


if __name__ == '__main__':
    raise SystemExit(main())
