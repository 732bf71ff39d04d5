import itertools
import string

import pytest

from wordle_words import (
    Letter,
    Outcome,
    Word,
    evaluate,
    format_outcome,
    is_solved,
    load_words,
    parse_outcome,
    words_from_strings,
)

# --- letters ---

def test_letters_are_case_insensitive():
    for c in string.ascii_lowercase:
        assert repr(Letter(c)) == f"Letter({c!r})"
        assert Letter(c.upper()) == Letter(c)
        assert Letter(c).index == ord(c) - ord("a")


def test_non_letters_are_rejected():
    for x in range(256):
        c = chr(x)
        if c in string.ascii_letters:
            continue
        with pytest.raises(ValueError):
            Letter(c)


def test_alphabet_constants():
    assert len(Letter.LETTERS) == 26
    assert [str(l) for l in Letter.VOWELS] == list("aeiou")


# --- words ---

def test_word_from_str():
    w = Word.from_str("River")
    assert [str(l) for l in w] == list("river")
    assert str(w) == "river"
    assert w == Word.from_str("RIVER")
    assert hash(w) == hash(Word.from_str("rIvEr"))


@pytest.mark.parametrize("text", ["TooLong", "AB CD", "ABCD1", "abc", ""])
def test_word_from_str_rejects(text):
    with pytest.raises(ValueError):
        Word.from_str(text)
    assert Word.try_from_str(text) is None


def test_word_queries():
    w = Word.from_str("cacao")
    assert Letter("c") in w
    assert Letter("z") not in w
    assert w.count(Letter("c")) == 2
    assert w.count(Letter("o")) == 1
    assert w.distinct_vowels() == 2
    assert Word.from_str("audio").distinct_vowels() == 4
    assert Word.from_str("crwth").distinct_vowels() == 0


# --- evaluation ---

@pytest.mark.parametrize("answer,guess,expected", [
    ("trees", "river", "+--*-"),
    ("trees", "abbey", "---*-"),
    ("trees", "crave", "-*--+"),
    ("trees", "kings", "----*"),
    ("trees", "great", "-**-+"),
    ("whack", "audio", "+----"),
    ("whack", "snake", "--*+-"),
    ("whack", "track", "--***"),
    ("whack", "clack", "--***"),
    ("whack", "whack", "*****"),
    ("track", "cacao", "++---"),
    ("level", "belle", "-*+++"),
    ("scoop", "cools", "++*-+"),
    ("crane", "raise", "++--*"),
    ("crane", "stare", "--*+*"),
])
def test_evaluate_golden(answer, guess, expected):
    outcome = evaluate(Word.from_str(answer), Word.from_str(guess))
    assert format_outcome(outcome) == expected


SAMPLE = ["trees", "river", "abbey", "cacao", "llama", "eerie", "whack", "clack", "sassy", "geese"]


@pytest.mark.parametrize("w", SAMPLE)
def test_evaluate_self_is_solved(w):
    word = Word.from_str(w)
    assert is_solved(evaluate(word, word))


def test_matches_never_exceed_answer_count():
    for a, g in itertools.product(SAMPLE, repeat=2):
        answer, guess = Word.from_str(a), Word.from_str(g)
        outcome = evaluate(answer, guess)
        for letter in set(guess):
            hits = sum(
                1 for l, o in zip(guess, outcome)
                if l == letter and o is not Outcome.ABSENT
            )
            assert hits <= answer.count(letter), (a, g, letter)


def test_parse_outcome():
    assert parse_outcome("*+--*") == (
        Outcome.CORRECT, Outcome.PRESENT, Outcome.ABSENT, Outcome.ABSENT, Outcome.CORRECT,
    )
    assert format_outcome(parse_outcome("+-*-+")) == "+-*-+"


@pytest.mark.parametrize("text", ["*+-", "*+-*+-", "*+x-*", "GGGGG"])
def test_parse_outcome_rejects(text):
    with pytest.raises(ValueError):
        parse_outcome(text)


# --- dictionary ---

def test_load_words(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\n\n  slate \nCRANE\ntoolong\nab1de\n", encoding="utf-8")
    assert load_words(str(p)) == {Word.from_str("crane"), Word.from_str("slate")}


def test_words_from_strings():
    assert words_from_strings(["crane", "CRANE", "slate"]) == {
        Word.from_str("crane"), Word.from_str("slate"),
    }
    with pytest.raises(ValueError):
        words_from_strings(["crane", "cranes"])
