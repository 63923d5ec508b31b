"""`ascii` command: look up ASCII characters and their codes."""

from __future__ import annotations

import typer

from cli.common import check_queries, emit, prepare
from cli.ui_components import build_char_table
from core.services.lookup import list_chars, resolve_char

app = typer.Typer(add_completion=False)


def lookup(
    query: list[str] | None = typer.Argument(
        None,
        help='Single character (e.g. "A"), ASCII number (e.g. "65", "0o101", "0x41") '
        'or caret notation (e.g. "^@").',
        show_default=False,
    ),
    simple: bool = typer.Option(False, "--simple", help="Disable pretty-printing."),
    list_all: bool = typer.Option(False, "--list", "-l", help="List all characters."),
    digit: bool = typer.Option(
        False, "--digit", "-d", help="Treat single digits as characters, not codes."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
) -> None:
    """A simple utility to look up ASCII codes."""

    queries = query or []
    check_queries(queries, list_all)
    settings = prepare(verbose=verbose)

    results = list_chars() if list_all else [resolve_char(q, digit=digit) for q in queries]
    emit(
        results,
        [r.cells() for r in results],
        simple=simple or settings.simple,
        as_json=as_json,
        build_table=build_char_table,
    )


app.command()(lookup)


def run() -> None:
    app()
