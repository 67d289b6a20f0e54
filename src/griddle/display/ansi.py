"""Display that writes ANSI escape sequences to a text stream."""

from __future__ import annotations

import logging
from typing import Callable, TextIO

from griddle.core.color import Color
from griddle.core.constants import (
    CLEAR_SCREEN,
    CSI,
    CURSOR_HOME,
    HIDE_CURSOR,
    RESET,
    SHOW_CURSOR,
)
from griddle.display.base import Display

logger = logging.getLogger(__name__)


class AnsiTerminalDisplay(Display):
    """
    Write 24-bit color ANSI output to a terminal-like stream.

    Output is collected in memory and only written to ``output`` on
    :meth:`flush`. ``width`` and ``height`` are callables so that a live
    terminal can be resized between frames.

    Example:
        display = AnsiTerminalDisplay(
            sys.stdout,
            width=lambda: shutil.get_terminal_size().columns,
            height=lambda: shutil.get_terminal_size().lines,
        )
    """

    def __init__(
        self,
        output: TextIO,
        width: Callable[[], int],
        height: Callable[[], int],
        hide_cursor: bool = True,
    ) -> None:
        super().__init__()
        self._output = output
        self._width = width
        self._height = height
        self._pending: list[str] = []
        if hide_cursor:
            self.hide_cursor()

    @property
    def width(self) -> int:
        return self._width()

    @property
    def height(self) -> int:
        return self._height()

    def clear_screen(self) -> None:
        self._check_open()
        self._pending.append(CLEAR_SCREEN + CURSOR_HOME)

    def flush(self) -> None:
        self._check_open()
        self._output.write("".join(self._pending))
        self._pending.clear()
        self._output.flush()

    def set_foreground_color(self, color: Color) -> None:
        self._check_open()
        self._pending.append(f"{CSI}{color.to_sgr_fg()}m")

    def set_background_color(self, color: Color) -> None:
        self._check_open()
        self._pending.append(f"{CSI}{color.to_sgr_bg()}m")

    def reset_styles(self) -> None:
        self._check_open()
        self._pending.append(RESET)

    def write_character(self, code: int) -> None:
        self._check_open()
        self._pending.append(chr(code))

    def hide_cursor(self) -> None:
        self._check_open()
        self._pending.append(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._check_open()
        self._pending.append(SHOW_CURSOR)

    def close(self) -> None:
        """Discard unflushed output, restore the cursor and styles, then close."""
        self._check_open()
        self._pending.clear()
        self.reset_styles()
        self.show_cursor()
        self.flush()
        logger.debug("ANSI display closed")
        super().close()
