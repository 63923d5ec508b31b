"""Tests resolution of ASCII queries"""

import pytest

from core.domain.ascii_table import ASCII_TABLE
from core.services.lookup import char_by_code, list_chars, resolve_char

# -----------------------------------------------------------------------------


def test_table():
    assert len(ASCII_TABLE) == 128
    assert [c.code for c in ASCII_TABLE] == list(range(128))

    assert ASCII_TABLE[0].display == r"NUL '\0' (null character)"
    assert ASCII_TABLE[0x0A].display == r"LF  '\n' (new line)"
    assert ASCII_TABLE[0x20].display == "SPACE"
    assert ASCII_TABLE[0x2C].display == ","
    assert ASCII_TABLE[0x5C].display == r"\  '\\'"
    assert ASCII_TABLE[0x7F].display == "DEL"


@pytest.mark.parametrize("code", range(128))
def test_all_notations_agree(code):
    """Every textual form of a code resolves to the same entry"""
    expected = ASCII_TABLE[code]
    forms = (
        str(code),
        f"0x{code:x}",
        f"0x{code:02X}",
        f"0o{code:o}",
        f"0b{code:b}",
        expected.hex,
        expected.oct,
        expected.bin,
    )
    for form in forms:
        assert resolve_char(form).char == expected, form


def test_example():
    res = resolve_char("65")
    assert res.char.display == "A"
    assert res.cells() == ("A", "0x41", "65", "0o101", "0b1000001")


def test_literal_characters():
    assert resolve_char("A").char.code == 65
    assert resolve_char("~").char.code == 126
    assert resolve_char("^").char.code == 94
    assert resolve_char(" ").char.code == 32
    assert resolve_char("\t").char.code == 9


def test_single_digits():
    # A lone digit is a code ...
    assert resolve_char("7").char.code == 7
    # ... unless digit mode is on
    assert resolve_char("7", digit=True).char.code == 0x37
    assert resolve_char("0", digit=True).char.display == "0"

    # Longer numbers are always codes
    assert resolve_char("42", digit=True).char.code == 42


def test_caret_notation():
    assert resolve_char("^@").char.code == 0
    assert resolve_char("^C").char.display == "ETX (end of text)"
    assert resolve_char("^?").char.display == "DEL"
    assert resolve_char("^a").char is None


@pytest.mark.parametrize(
    "query", ["AB", "128", "255", "256", "0x80", "0b", "", "é", "^a", "-1", "0X41"]
)
def test_unknown(query):
    res = resolve_char(query)
    assert not res.known
    assert res.cells() == (query, "-", "-", "-", "-")


def test_char_by_code():
    assert char_by_code(None) is None
    assert char_by_code(-1) is None
    assert char_by_code(128) is None
    assert char_by_code(65).display == "A"


def test_list_chars():
    listing = list_chars()
    assert len(listing) == len(ASCII_TABLE)
    assert [r.char for r in listing] == list(ASCII_TABLE)
    assert all(r.known for r in listing)
