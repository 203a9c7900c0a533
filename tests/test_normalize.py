import pytest

from advising.normalize import normalize


@pytest.mark.parametrize("raw, expected", [
    ("csci101", "CSCI101"),
    ("  math201 ", "MATH201"),
    ("\tCsCi300\r\n", "CSCI300"),
    ("", ""),
    (" \t\r\n", ""),
    ("cs 300", "CS 300"),
])
def test_trims_and_uppercases(raw, expected):
    assert normalize(raw) == expected


def test_only_ascii_letters_are_folded():
    assert normalize("straße") == "STRAßE"
    assert normalize("é1a") == "é1A"


@pytest.mark.parametrize("raw", ["abc", " x y ", "\nq\t", "ÄbÇ", "123-z"])
def test_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once
