"""Query resolution for the three lookup tools.

The errno and signal tables share one shape (`CodeTable`): a static,
ordered table indexed twice, by name and by number. ASCII has its own,
simpler resolver because its queries come in more notations.

Nothing here raises for bad input: an unrecognized query becomes a result
whose `known` is False, and the renderer shows placeholders for it.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from core.domain.ascii_table import ASCII_TABLE
from core.domain.errno_table import ERRNO_TABLE, UNKNOWN_ERROR
from core.domain.models import CharEntry, CharLookup, Entry, Lookup
from core.domain.signal_table import SIGNAL_TABLE, UNKNOWN_SIGNAL
from core.interfaces.describer import DescriptionProvider
from core.services.query_parser import (
    has_radix_prefix,
    parse_caret,
    parse_integer,
    parse_number,
)

logger = logging.getLogger(__name__)

# Shells report "killed by signal N" as exit status 128 + N.
STATUS_SIGNAL_OFFSET = 128


def _normalize_name(name: str) -> str:
    return name.strip().upper()


def _normalize_signal_name(name: str) -> str:
    name = _normalize_name(name)
    if not name.startswith("SIG"):
        name = "SIG" + name
    return name


class CodeTable:
    """Bidirectional view over a static errno/signal table.

    - `name -> Entry` covers every entry, aliases included.
    - `number -> Entry` covers primary entries only, so a number always maps
      back to its canonical name.
    """

    def __init__(
        self,
        entries: Iterable[Entry],
        *,
        unknown: str,
        normalize: Callable[[str], str] = _normalize_name,
    ) -> None:
        self.entries: tuple[Entry, ...] = tuple(entries)
        self.unknown = unknown
        self._normalize = normalize
        self._by_name: dict[str, Entry] = {e.name: e for e in self.entries}
        self._by_number: dict[int, Entry] = {}
        for entry in self.entries:
            if entry.primary and entry.number is not None:
                self._by_number.setdefault(entry.number, entry)

    def __len__(self) -> int:
        return len(self.entries)

    def by_name(self, name: str) -> Entry | None:
        return self._by_name.get(self._normalize(name))

    def by_number(self, number: int) -> Entry | None:
        return self._by_number.get(number)

    def describe(self, entry: Entry, describer: DescriptionProvider | None) -> str:
        if describer is None:
            return entry.description
        return describer.describe(entry) or self.unknown

    def found(
        self, query: str, entry: Entry, describer: DescriptionProvider | None = None
    ) -> Lookup:
        return Lookup(
            query=query,
            entry=entry,
            name=entry.name,
            number=entry.number,
            description=self.describe(entry, describer),
        )

    def resolve(
        self,
        query: str,
        describer: DescriptionProvider | None = None,
        *,
        offset: int = 0,
    ) -> Lookup:
        """Resolve a number (minus `offset`) or a symbolic name."""

        number = parse_integer(query)
        if number is not None:
            number -= offset
            entry = self.by_number(number)
            if entry is None:
                logger.debug("No entry for number %d (query %r)", number, query)
                return Lookup(query=query, number=number, description=self.unknown)
            return self.found(query, entry, describer)

        entry = self.by_name(query)
        if entry is None:
            logger.debug("No entry named %r", query)
            return Lookup(query=query, name=query, description=self.unknown)
        return self.found(query, entry, describer)

    def listing(self, describer: DescriptionProvider | None = None) -> list[Lookup]:
        return [self.found(e.name, e, describer) for e in self.entries]


ERRNOS = CodeTable(ERRNO_TABLE, unknown=UNKNOWN_ERROR)
SIGNALS = CodeTable(
    SIGNAL_TABLE, unknown=UNKNOWN_SIGNAL, normalize=_normalize_signal_name
)


def resolve_errno(query: str, describer: DescriptionProvider | None = None) -> Lookup:
    return ERRNOS.resolve(query, describer)


def resolve_signal(
    query: str,
    describer: DescriptionProvider | None = None,
    *,
    status: bool = False,
) -> Lookup:
    """Resolve a signal number or name.

    With `status=True` numbers are shell exit statuses (`130` -> `SIGINT`).
    """

    offset = STATUS_SIGNAL_OFFSET if status else 0
    return SIGNALS.resolve(query, describer, offset=offset)


def list_errnos(describer: DescriptionProvider | None = None) -> list[Lookup]:
    return ERRNOS.listing(describer)


def list_signals(describer: DescriptionProvider | None = None) -> list[Lookup]:
    return SIGNALS.listing(describer)


def char_by_code(code: int | None) -> CharEntry | None:
    if code is None or not 0 <= code <= 0x7F:
        return None
    return ASCII_TABLE[code]


def _char_code(query: str, digit: bool) -> int | None:
    if has_radix_prefix(query):
        logger.debug("%r: prefixed number", query)
        return parse_number(query)
    if len(query) == 2 and query.startswith("^"):
        logger.debug("%r: caret notation", query)
        return parse_caret(query)
    if query and query.isascii():
        first = query[0]
        if len(query) >= 2 or (not digit and first.isdigit()):
            logger.debug("%r: decimal number", query)
            return parse_number(query)
        logger.debug("%r: literal character", query)
        return ord(first)
    return None


def resolve_char(query: str, *, digit: bool = False) -> CharLookup:
    """Resolve one ASCII query.

    A single digit is a character code (`7` -> BEL) unless `digit` is set,
    in which case it is the digit character itself (`7` -> `7`).
    """

    char = char_by_code(_char_code(query, digit))
    if char is None:
        logger.debug("%r is not an ASCII character", query)
    return CharLookup(query=query, char=char)


def list_chars() -> list[CharLookup]:
    return [CharLookup(query=chr(c.code), char=c) for c in ASCII_TABLE]
