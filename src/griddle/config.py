"""Settings loaded from GRIDDLE_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from griddle.core.errors import InvalidArgumentError

ENV_PREFIX = "GRIDDLE_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(env: Mapping[str, str], name: str, default: int, minimum: int = 1) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise InvalidArgumentError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidArgumentError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for displays and the demo CLI.

    Attributes:
        width: Fallback width for text displays and unknown terminals
        height: Fallback height for text displays and unknown terminals
        fps: Frame rate of animated demos
        hide_cursor: Whether ANSI displays hide the cursor while open
        log_level: Name of the logging level used by the CLI
    """
    width: int = 80
    height: int = 24
    fps: int = 30
    hide_cursor: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment (``os.environ`` by default)."""
        env = os.environ if env is None else env
        log_level = env.get(ENV_PREFIX + "LOG_LEVEL", cls.log_level).strip().upper()
        if log_level not in LOG_LEVELS:
            raise InvalidArgumentError(
                f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )
        return cls(
            width=_env_int(env, "WIDTH", cls.width),
            height=_env_int(env, "HEIGHT", cls.height),
            fps=_env_int(env, "FPS", cls.fps),
            hide_cursor=_env_bool(env, "HIDE_CURSOR", cls.hide_cursor),
            log_level=log_level,
        )
