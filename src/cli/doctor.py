"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
import platform
import signal

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file
from core.services.lookup import ERRNOS, SIGNALS, CodeTable

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.callback()
def main() -> None:
    """Environment diagnostics and configuration checks."""


def _coverage(table: CodeTable) -> tuple[bool, str]:
    """How many table names have a number on this platform."""

    defined = sum(1 for e in table.entries if e.number is not None)
    missing = [e.name for e in table.entries if e.number is None]
    detail = f"{defined}/{len(table)} names defined"
    if missing:
        detail += f" (missing: {', '.join(missing)})"
    return defined > 0, detail


def _check_strerror() -> tuple[bool, str]:
    try:
        return True, os.strerror(2)
    except ValueError as exc:
        return False, str(exc)


def _check_strsignal() -> tuple[bool, str]:
    try:
        desc = signal.strsignal(signal.SIGINT)
    except ValueError as exc:
        return False, str(exc)
    if not desc:
        return False, "strsignal(3) returned nothing for SIGINT"
    return True, desc


@app.command()
def run() -> None:
    """Run baseline diagnostics and show what each tool will use."""

    settings = AppSettings()

    table = Table(title="posix-lookup doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Platform
    is_linux = platform.system() == "Linux"
    table.add_row(
        "Platform",
        "OK" if is_linux else "PARTIAL",
        f"{platform.system()} {platform.machine()}"
        + ("" if is_linux else " -> tables follow Linux, some names may be missing"),
    )

    # Tables
    for label, code_table in (("errno table", ERRNOS), ("signal table", SIGNALS)):
        ok, detail = _coverage(code_table)
        table.add_row(label, "OK" if ok else "FAIL", detail)

    # libc
    ok_err, detail_err = _check_strerror()
    table.add_row("strerror(3)", "OK" if ok_err else "FAIL", detail_err)
    ok_sig, detail_sig = _check_strsignal()
    table.add_row("strsignal(3)", "OK" if ok_sig else "FAIL", detail_sig)

    # Config
    table.add_row("Config file", "OK", str(get_user_env_file()))
    table.add_row("description_width", "OK", str(settings.description_width))
    table.add_row("prefer_libc", "OK", str(settings.prefer_libc))
    table.add_row("simple", "OK", str(settings.simple))
    table.add_row("log_level", "OK", settings.log_level)

    _console.print(table)

    if not (ok_err and ok_sig):
        _console.print(
            "\n[yellow]Note:[/yellow] `--libc` falls back to \"Unknown error\"/\"Unknown signal\" "
            "when the platform has no description."
        )
