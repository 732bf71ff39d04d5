import pytest
import requests

from scripts import fetch_words
from scripts.check_words import check


def test_check_words():
    invalid, duplicates = check(["crane", "Crane", "", "cranes", "ab1de", "slate", "slate"])
    assert invalid == [(4, "cranes"), (5, "ab1de")]
    assert duplicates == ["crane", "slate"]


def test_check_words_clean():
    assert check(["crane", "slate"]) == ([], [])


def test_five_letter_words_keeps_order():
    lines = ["Slate", "crane", "apple pie", "slate", "zebras", "BRINE", ""]
    assert fetch_words.five_letter_words(lines) == ["slate", "crane", "brine"]


def test_fetch_lines_network_error(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(fetch_words.requests, "get", boom)
    with pytest.raises(SystemExit):
        fetch_words.fetch_lines("http://example.invalid/words.txt", timeout=1)
