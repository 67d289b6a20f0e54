"""Tests for environment settings."""

import pytest

from griddle.config import Settings
from griddle.core.errors import InvalidArgumentError


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings == Settings()
        assert (settings.width, settings.height) == (80, 24)
        assert settings.fps == 30
        assert settings.hide_cursor is True
        assert settings.log_level == "WARNING"

    def test_overrides(self) -> None:
        settings = Settings.from_env({
            "GRIDDLE_WIDTH": "40",
            "GRIDDLE_HEIGHT": "10",
            "GRIDDLE_FPS": "60",
            "GRIDDLE_HIDE_CURSOR": "no",
            "GRIDDLE_LOG_LEVEL": "debug",
        })
        assert (settings.width, settings.height) == (40, 10)
        assert settings.fps == 60
        assert settings.hide_cursor is False
        assert settings.log_level == "DEBUG"

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRIDDLE_WIDTH", "12")
        assert Settings.from_env().width == 12

    @pytest.mark.parametrize(
        "env",
        [
            {"GRIDDLE_WIDTH": "wide"},
            {"GRIDDLE_HEIGHT": "0"},
            {"GRIDDLE_FPS": "-5"},
            {"GRIDDLE_HIDE_CURSOR": "maybe"},
            {"GRIDDLE_LOG_LEVEL": "LOUD"},
        ],
    )
    def test_invalid(self, env: dict[str, str]) -> None:
        with pytest.raises(InvalidArgumentError):
            Settings.from_env(env)
