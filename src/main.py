"""Run script.

Why it exists:
- Lets you run the CLI with `python main.py` from inside `src/` during development.
- Keeps a simple entry point next to the installed console scripts.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8):
# the table borders are box-drawing characters.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
