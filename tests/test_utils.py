import pytest

from utils import format_money, to_non_negative, to_number


@pytest.mark.parametrize("text, expected", [
    ("50", 50),
    ("abc", 0),
    ("", 0),
    ("  12 ", 12),
    ("2.5", 2.5),
    ("-3", -3),
    ("nan", 0),
    ("inf", 0),
    ("-inf", 0),
    ("Infinity", 0),
    ("1e999", 0),
    ("1_000", 0),
])
def test_to_number(text, expected):
    assert to_number(text) == expected


def test_to_number_keeps_integers_as_int():
    assert isinstance(to_number("50"), int)
    assert isinstance(to_number("50.0"), int)


def test_to_non_negative_clamps():
    assert to_non_negative("-10") == 0
    assert to_non_negative("x") == 0
    assert to_non_negative("7") == 7


def test_format_money():
    text = format_money(5000)
    assert text.startswith("$")
    assert "5,000" in text
