"""Plumbing shared by the ascii/errno/signal commands."""

from __future__ import annotations

from typing import Callable, Sequence

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from adapters.json_exporter import results_to_json
from cli.ui_components import print_lines, print_table
from core.config import AppSettings
from core.domain.models import Row
from core.logging_setup import configure_logging

console = Console()


def prepare(*, verbose: bool) -> AppSettings:
    """Load settings and configure logging for one invocation."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    return settings


def check_queries(queries: Sequence[str], list_all: bool) -> None:
    if list_all and queries:
        raise typer.BadParameter("QUERY cannot be combined with --list", param_hint="QUERY")


def emit(
    results: Sequence[BaseModel],
    rows: Sequence[Row],
    *,
    simple: bool,
    as_json: bool,
    build_table: Callable[[Sequence[Row]], Table],
) -> None:
    """Write results to stdout as JSON, plain lines or a table."""

    if as_json:
        console.print(
            results_to_json(results),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
    elif simple:
        print_lines(console, rows)
    else:
        print_table(console, build_table(rows))
