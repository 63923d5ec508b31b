"""`signal` command: look up signals by number, name or shell status."""

from __future__ import annotations

from functools import partial

import typer

from adapters.descriptions import signal_describer
from cli.common import check_queries, emit, prepare
from cli.ui_components import build_code_table
from core.services.lookup import list_signals, resolve_signal

app = typer.Typer(add_completion=False)


def lookup(
    query: list[str] | None = typer.Argument(
        None,
        help='Signal number (e.g. "2"), signal name (e.g. "SIGINT"), '
        'or shell status code (e.g. "130") if "-s" is given.',
        show_default=False,
    ),
    simple: bool = typer.Option(False, "--simple", help="Disable pretty-printing."),
    list_all: bool = typer.Option(False, "--list", "-l", help="List all signals."),
    status: bool = typer.Option(
        False, "--status", "-s", help="Interpret numbers as status code instead of signal number."
    ),
    libc: bool = typer.Option(False, "--libc", help="Display the description using strsignal(3)."),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
) -> None:
    """A simple utility to look up Linux signals."""

    queries = query or []
    check_queries(queries, list_all)
    settings = prepare(verbose=verbose)

    describer = signal_describer(libc or settings.prefer_libc)
    if list_all:
        results = list_signals(describer)
    else:
        results = [resolve_signal(q, describer, status=status) for q in queries]

    emit(
        results,
        [r.cells() for r in results],
        simple=simple or settings.simple,
        as_json=as_json,
        build_table=partial(build_code_table, description_width=settings.description_width),
    )


app.command()(lookup)


def run() -> None:
    app()
