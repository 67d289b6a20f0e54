"""Display that records every command, for tests and inspection."""

from __future__ import annotations

from typing import Any

from griddle.core.color import Color
from griddle.display.base import Display


class RecordingDisplay(Display):
    """
    Record display commands as tuples instead of producing output.

    Each call appends ``(name, *args)`` to :attr:`calls`, for example
    ``("set_foreground_color", Color.RED)`` or ``("write_character", 72)``.
    """

    def __init__(self, width: int = 80, height: int = 24) -> None:
        super().__init__()
        self.calls: list[tuple[Any, ...]] = []
        self.width_value = width
        self.height_value = height

    @property
    def width(self) -> int:
        return self.width_value

    @property
    def height(self) -> int:
        return self.height_value

    def _record(self, name: str, *args: Any) -> None:
        self._check_open()
        self.calls.append((name, *args))

    def clear_screen(self) -> None:
        self._record("clear_screen")

    def flush(self) -> None:
        self._record("flush")

    def set_foreground_color(self, color: Color) -> None:
        self._record("set_foreground_color", color)

    def set_background_color(self, color: Color) -> None:
        self._record("set_background_color", color)

    def reset_styles(self) -> None:
        self._record("reset_styles")

    def write_character(self, code: int) -> None:
        self._record("write_character", code)

    def hide_cursor(self) -> None:
        self._record("hide_cursor")

    def show_cursor(self) -> None:
        self._record("show_cursor")

    def count(self, name: str) -> int:
        """Number of recorded calls named ``name``."""
        return sum(1 for call in self.calls if call[0] == name)

    def names(self) -> list[str]:
        """Names of all recorded calls, in order."""
        return [call[0] for call in self.calls]

    def text(self) -> str:
        """All written characters joined into a string."""
        return "".join(
            chr(call[1]) for call in self.calls if call[0] == "write_character"
        )

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()
