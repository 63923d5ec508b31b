"""Shared fixtures"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keeps user configuration and terminal settings out of the tests"""
    for key in list(os.environ):
        if key.startswith("POSIX_LOOKUP_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.chdir(tmp_path)
    return tmp_path
