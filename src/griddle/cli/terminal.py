"""Low-level terminal operations used by the CLI."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from griddle.core.constants import ALTERNATE_SCREEN_OFF, ALTERNATE_SCREEN_ON


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal transport helpers for the demo programs."""

    @staticmethod
    def size(fallback: TerminalSize = TerminalSize(24, 80)) -> TerminalSize:
        """Get current terminal dimensions, or ``fallback`` if unknown."""
        try:
            size = os.get_terminal_size()
        except OSError:
            return fallback
        if size.lines < 1 or size.columns < 1:
            return fallback
        return TerminalSize(size.lines, size.columns)

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """
        Context manager for unbuffered, no-echo input (Unix only).

        Uses cbreak rather than full raw mode: Ctrl+C still raises
        KeyboardInterrupt and output keeps its newline translation.
        Does nothing when stdin is not a terminal or termios is missing.
        """
        try:
            import termios
            import tty
        except ImportError:
            # Windows - just yield
            yield
            return

        if not sys.stdin.isatty():
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use the alternate screen buffer (preserves scrollback)."""
        sys.stdout.write(ALTERNATE_SCREEN_ON)
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write(ALTERNATE_SCREEN_OFF)
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Alternate screen plus cbreak input, both restored on exit."""
        with Terminal.alternate_screen(), Terminal.raw_mode():
            yield
