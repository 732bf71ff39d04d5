# ============================================================
# Letters, words and per-letter feedback
# ============================================================

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple

WORD_LENGTH = 5


# ------------------------------------------------------------
# Alphabet
# ------------------------------------------------------------

class Letter:
    """One symbol of the 26-letter alphabet, stored as its index (a=0)."""

    __slots__ = ("index",)

    LETTERS: Tuple["Letter", ...] = ()
    VOWELS: Tuple["Letter", ...] = ()

    def __init__(self, ch: str):
        if len(ch) != 1 or not (ch.isascii() and ch.isalpha()):
            raise ValueError(f"Not a letter: {ch!r}")
        self.index = ord(ch.lower()) - ord("a")

    def __eq__(self, other):
        if not isinstance(other, Letter):
            return NotImplemented
        return self.index == other.index

    def __lt__(self, other):
        if not isinstance(other, Letter):
            return NotImplemented
        return self.index < other.index

    def __hash__(self):
        return hash(self.index)

    def __str__(self):
        return chr(ord("a") + self.index)

    def __repr__(self):
        return f"Letter({str(self)!r})"


Letter.LETTERS = tuple(Letter(chr(c)) for c in range(ord("a"), ord("z") + 1))
Letter.VOWELS = tuple(Letter(c) for c in "aeiou")


# ------------------------------------------------------------
# Words
# ------------------------------------------------------------

class Word:
    __slots__ = ("_letters",)

    def __init__(self, letters: Iterable[Letter]):
        letters = tuple(letters)
        if len(letters) != WORD_LENGTH:
            raise ValueError(f"A word has {WORD_LENGTH} letters, got {len(letters)}")
        self._letters = letters

    @classmethod
    def from_str(cls, text: str) -> "Word":
        if len(text) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH} letters: {text!r}")
        return cls(Letter(c) for c in text)

    @classmethod
    def try_from_str(cls, text: str) -> Optional["Word"]:
        try:
            return cls.from_str(text)
        except ValueError:
            return None

    def __iter__(self):
        return iter(self._letters)

    def __len__(self):
        return WORD_LENGTH

    def __getitem__(self, i):
        return self._letters[i]

    def __contains__(self, letter):
        return letter in self._letters

    def count(self, letter: Letter) -> int:
        return self._letters.count(letter)

    def distinct_vowels(self) -> int:
        return sum(1 for v in Letter.VOWELS if v in self._letters)

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._letters == other._letters

    def __lt__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._letters < other._letters

    def __hash__(self):
        return hash(self._letters)

    def __str__(self):
        return "".join(str(l) for l in self._letters)

    def __repr__(self):
        return f"Word({str(self)!r})"


# ------------------------------------------------------------
# Feedback
# * = correct, + = present elsewhere, - = absent
# ------------------------------------------------------------

class Outcome(Enum):
    CORRECT = "*"
    PRESENT = "+"
    ABSENT = "-"


GuessOutcome = Tuple[Outcome, ...]

SOLVED: GuessOutcome = (Outcome.CORRECT,) * WORD_LENGTH


def evaluate(answer: Word, guess: Word) -> GuessOutcome:
    res = [Outcome.ABSENT] * WORD_LENGTH
    used = [0] * 26

    # Correct letters claim their share of the answer first
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            res[i] = Outcome.CORRECT
            used[guess[i].index] += 1

    # Remaining occurrences go to misplaced letters, leftmost first
    for i in range(WORD_LENGTH):
        if res[i] is Outcome.CORRECT:
            continue
        letter = guess[i]
        if answer.count(letter) > used[letter.index]:
            res[i] = Outcome.PRESENT
            used[letter.index] += 1

    return tuple(res)


def is_solved(outcome: GuessOutcome) -> bool:
    return tuple(outcome) == SOLVED


def format_outcome(outcome: GuessOutcome) -> str:
    return "".join(o.value for o in outcome)


def parse_outcome(text: str) -> GuessOutcome:
    if len(text) != WORD_LENGTH:
        raise ValueError(f"Feedback must be {WORD_LENGTH} symbols, got {len(text)}")
    try:
        return tuple(Outcome(c) for c in text)
    except ValueError:
        bad = next(c for c in text if c not in "*+-")
        raise ValueError(f"Unknown feedback symbol {bad!r} (use * + -)") from None


# ------------------------------------------------------------
# Dictionary
# ------------------------------------------------------------

def words_from_strings(words: Iterable[str]) -> set:
    return {Word.from_str(w.strip()) for w in words}


def load_words(filename="words.txt") -> set:
    """Read one word per line; lines that are not five-letter words are skipped."""
    with open(filename, encoding="utf-8") as f:
        words = (Word.try_from_str(line.strip()) for line in f if line.strip())
        return {w for w in words if w is not None}
