"""Parsing of query tokens into numbers.

Accepted notations:
- decimal: `65`
- prefixed: `0x41`, `0o101`, `0b1000001` (lower-case prefix, digits in any case)
- caret notation: `^A`, `^[`, `^?`

Parsers return `None` for anything they do not recognize; callers decide how
an unrecognized token is shown.
"""

from __future__ import annotations

import re

_PREFIX_BASES: dict[str, int] = {"0x": 16, "0o": 8, "0b": 2}

_DIGITS: dict[int, re.Pattern[str]] = {
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9a-fA-F]+"),
    8: re.compile(r"[0-7]+"),
    2: re.compile(r"[01]+"),
}

_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")


def has_radix_prefix(text: str) -> bool:
    return text[:2] in _PREFIX_BASES


def _parse_digits(digits: str, base: int) -> int:
    # int() alone would also accept whitespace, signs and underscores.
    if not _DIGITS[base].fullmatch(digits):
        raise ValueError(f"invalid base-{base} literal: {digits!r}")
    return int(digits, base)


def parse_number(text: str) -> int | None:
    """Parse an unsigned decimal or `0x`/`0o`/`0b` prefixed number."""

    base = _PREFIX_BASES.get(text[:2])
    digits = text[2:] if base else text
    try:
        return _parse_digits(digits, base or 10)
    except ValueError:
        return None


def parse_integer(text: str) -> int | None:
    """Parse a (possibly signed) decimal integer, as errno/signal queries are."""

    if not _SIGNED_DECIMAL.fullmatch(text):
        return None
    return int(text)


def parse_caret(text: str) -> int | None:
    """Decode caret notation (`^@` -> 0, `^C` -> 3, `^?` -> 127)."""

    if len(text) != 2 or not text.startswith("^"):
        return None
    ch = text[1]
    if "@" <= ch <= "_" or ch == "?":
        return ord(ch) ^ 0x40
    return None
