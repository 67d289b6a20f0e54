"""Display that writes plain text, ignoring all styling."""

from __future__ import annotations

import io

from griddle.core.color import Color
from griddle.display.base import Display


class TextDisplay(Display):
    """
    A minimal display that writes characters to a string buffer.

    Colors, style resets and cursor visibility are accepted and ignored.
    The default size of 80x24 is friendly to logs and CI output.
    """

    def __init__(
        self,
        output: io.StringIO | None = None,
        width: int = 80,
        height: int = 24,
    ) -> None:
        super().__init__()
        self._output = output if output is not None else io.StringIO()
        self._pending: list[str] = []
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def text(self) -> str:
        """Everything flushed since the last clear."""
        return self._output.getvalue()

    def clear_screen(self) -> None:
        self._check_open()
        self._pending.clear()
        self._output.seek(0)
        self._output.truncate(0)

    def flush(self) -> None:
        self._check_open()
        self._output.write("".join(self._pending))
        self._pending.clear()

    def set_foreground_color(self, color: Color) -> None:
        self._check_open()

    def set_background_color(self, color: Color) -> None:
        self._check_open()

    def reset_styles(self) -> None:
        self._check_open()

    def write_character(self, code: int) -> None:
        self._check_open()
        self._pending.append(chr(code))
