"""Tests the settings"""

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, get_user_env_file

# -----------------------------------------------------------------------------


def test_defaults():
    settings = AppSettings()
    assert settings.description_width == 80
    assert settings.prefer_libc is False
    assert settings.simple is False
    assert settings.log_level == "WARNING"


def test_environment(monkeypatch):
    monkeypatch.setenv("POSIX_LOOKUP_DESCRIPTION_WIDTH", "40")
    monkeypatch.setenv("POSIX_LOOKUP_PREFER_LIBC", "true")
    monkeypatch.setenv("posix_lookup_log_level", "debug")

    settings = AppSettings()
    assert settings.description_width == 40
    assert settings.prefer_libc is True
    assert settings.log_level == "DEBUG"


def test_dotenv_file(isolated_env):
    (isolated_env / ".env").write_text("POSIX_LOOKUP_SIMPLE=1\n", encoding="utf-8")
    assert AppSettings().simple is True


@pytest.mark.parametrize(
    "key, value",
    [
        ("POSIX_LOOKUP_DESCRIPTION_WIDTH", "5"),
        ("POSIX_LOOKUP_DESCRIPTION_WIDTH", "wide"),
        ("POSIX_LOOKUP_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        AppSettings()


def test_user_config_dir(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "posix-lookup"
    assert get_user_env_file() == tmp_path / "posix-lookup" / ".env"
