"""Test module for the `cli` package"""

from typer.testing import CliRunner

runner = CliRunner()


def invoke(app, *args, **kwargs):
    return runner.invoke(app, list(args), **kwargs)


def stdout_lines(result):
    return result.stdout.splitlines()
