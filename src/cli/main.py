"""Umbrella CLI: `posix-lookup ascii|errno|signal|doctor`.

The three lookup commands are also installed as standalone scripts
(`ascii`, `errno`, `signal`); both entry points share the same functions.
"""

from __future__ import annotations

import typer

from cli import ascii_cmd, doctor, errno_cmd, signal_cmd

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Look up ASCII characters, errno values and signals.",
)

app.command(name="ascii")(ascii_cmd.lookup)
app.command(name="errno")(errno_cmd.lookup)
app.command(name="signal")(signal_cmd.lookup)
app.add_typer(doctor.app, name="doctor")


def run() -> None:
    app()
