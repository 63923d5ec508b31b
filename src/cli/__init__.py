"""Command-line layer (Typer + Rich).

Commands only parse flags and print; resolution lives in `core.services`.
"""
