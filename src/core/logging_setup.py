"""Logging configuration shared by every command.

Diagnostics go to stderr through Rich so that stdout only carries lookup
results (and stays safe to pipe).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "posix-lookup"


def configure_logging(level: str | int = "WARNING") -> None:
    """Install a single `RichHandler` on the root logger.

    Calling it again only updates the level, so commands invoked repeatedly
    (tests, the umbrella CLI) never stack handlers.
    """

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    root.addHandler(handler)
