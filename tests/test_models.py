"""Tests the domain models"""

import pytest
from pydantic import ValidationError

from core.domain.models import PLACEHOLDER, CharEntry, CharLookup, Entry, Lookup

# -----------------------------------------------------------------------------


def test_char_entry_renderings():
    c = CharEntry(code=65, display="A")
    assert (c.hex, c.dec, c.oct, c.bin) == ("0x41", "65", "0o101", "0b1000001")

    nul = CharEntry(code=0, display="NUL")
    assert (nul.hex, nul.oct, nul.bin) == ("0x00", "0o000", "0b0000000")

    dump = c.model_dump(mode="json")
    assert dump["hex"] == "0x41"
    assert dump["bin"] == "0b1000001"


def test_char_entry_range():
    with pytest.raises(ValidationError):
        CharEntry(code=128, display="?")
    with pytest.raises(ValidationError):
        CharEntry(code=-1, display="?")


def test_entries_are_frozen():
    entry = Entry(name="EPERM", number=1, description="Operation not permitted")
    with pytest.raises(ValidationError):
        entry.number = 2


def test_lookup_cells():
    entry = Entry(name="EPERM", number=1, description="Operation not permitted")
    found = Lookup(
        query="1",
        entry=entry,
        name=entry.name,
        number=entry.number,
        description=entry.description,
    )
    assert found.known
    assert found.cells() == ("EPERM", "1", "Operation not permitted")

    unknown = Lookup(query="9999", number=9999, description="Unknown error")
    assert not unknown.known
    assert unknown.cells() == (PLACEHOLDER, "9999", "Unknown error")


def test_char_lookup_cells():
    unknown = CharLookup(query="AB")
    assert not unknown.known
    assert unknown.cells() == ("AB", "-", "-", "-", "-")

    known = CharLookup(query="A", char=CharEntry(code=65, display="A"))
    assert known.cells() == ("A", "0x41", "65", "0o101", "0b1000001")
