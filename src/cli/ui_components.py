"""UI components for the CLI (Rich).

Why separate components:
- Keeps command functions free of presentation details.
- The three tools share one table style and one line format.
"""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import Row

CHAR_HEADERS: tuple[str, ...] = ("char", "hex", "dec", "oct", "bin")
CODE_HEADERS: tuple[str, ...] = ("name", "number", "description")


def print_lines(console: Console, rows: Sequence[Row]) -> None:
    """Simple mode: one space-separated line per row, printed verbatim."""

    for row in rows:
        console.print(
            " ".join(row),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


def _new_table() -> Table:
    # Double outer border, single inner rules.
    return Table(box=box.DOUBLE_EDGE, header_style="none", show_lines=False)


def _add_rows(table: Table, rows: Sequence[Row]) -> Table:
    for row in rows:
        # Text() keeps '[' and friends from being parsed as markup.
        table.add_row(*(Text(cell) for cell in row))
    return table


def build_char_table(rows: Sequence[Row]) -> Table:
    """Table for ASCII results: character name, then right-aligned codes."""

    table = _new_table()
    first, *numeric = CHAR_HEADERS
    table.add_column(first, style="bold", no_wrap=True)
    for header in numeric:
        table.add_column(header, justify="right", no_wrap=True)
    return _add_rows(table, rows)


def build_code_table(rows: Sequence[Row], *, description_width: int = 80) -> Table:
    """Table for errno/signal results.

    The description column is as wide as its longest cell, but never wider
    than `description_width`; longer text wraps.
    """

    table = _new_table()
    name, number, description = CODE_HEADERS
    table.add_column(name, style="bold", no_wrap=True)
    table.add_column(number, no_wrap=True)
    table.add_column(description, max_width=description_width, overflow="fold")
    return _add_rows(table, rows)


def print_table(console: Console, table: Table) -> None:
    if table.row_count:
        console.print(table)
