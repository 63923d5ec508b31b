"""Tests the number and caret notation parsers"""

import pytest

from core.services.query_parser import (
    has_radix_prefix,
    parse_caret,
    parse_integer,
    parse_number,
)

# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text, expected",
    [
        ("65", 65),
        ("0", 0),
        ("0x41", 65),
        ("0xff", 255),
        ("0xFF", 255),
        ("0o101", 65),
        ("0b1000001", 65),
        ("007", 7),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "0x", "0o", "0b", "0X41", "+5", "-5", " 5", "1_0", "0b102", "0o8", "0xG", "A"],
)
def test_parse_number_rejects(text):
    assert parse_number(text) is None


def test_has_radix_prefix():
    assert has_radix_prefix("0x1")
    assert has_radix_prefix("0b")
    assert not has_radix_prefix("0")
    assert not has_radix_prefix("10")
    assert not has_radix_prefix("")


def test_parse_integer():
    assert parse_integer("2") == 2
    assert parse_integer("-3") == -3
    assert parse_integer("+4") == 4

    for text in ("", "2.0", "ENOENT", "0x2", " 2", "-"):
        assert parse_integer(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [("^@", 0), ("^A", 1), ("^C", 3), ("^[", 27), ("^_", 31), ("^?", 127)],
)
def test_parse_caret(text, expected):
    assert parse_caret(text) == expected


@pytest.mark.parametrize("text", ["^", "^a", "^CC", "C^", "^ ", "^`"])
def test_parse_caret_rejects(text):
    assert parse_caret(text) is None
