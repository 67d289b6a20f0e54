"""Render a Buffer to a Display, emitting only style changes."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from griddle.core.buffer import Buffer
from griddle.core.color import Color
from griddle.core.constants import CODE_NEWLINE
from griddle.display.ansi import AnsiTerminalDisplay
from griddle.display.base import Display
from griddle.display.text import TextDisplay

logger = logging.getLogger(__name__)


@dataclass
class RenderStats:
    """Commands emitted by one render pass."""
    foreground_changes: int = 0
    background_changes: int = 0
    resets: int = 0
    characters: int = 0

    @property
    def style_commands(self) -> int:
        return self.foreground_changes + self.background_changes + self.resets


class DiffRenderer:
    """
    Render a Buffer to a Display.

    Walks the buffer row-major and tracks the colors last sent to the
    display, so a color command is only emitted when the color actually
    changes. A cell that lacks a color which is active at the display gets
    a single style reset first, so it never inherits a stale color. When
    nothing is active, no reset is sent.

    The diff state is reset at the start of every render. The renderer does
    no bounds checking of its own, and display errors propagate unchanged.
    """

    def render(self, buffer: Buffer, display: Display) -> RenderStats:
        """Draw ``buffer`` on ``display`` and flush it once."""
        stats = RenderStats()
        display.clear_screen()

        last_fg: Color | None = None
        last_bg: Color | None = None

        for y in range(buffer.height):
            if y:
                display.write_character(CODE_NEWLINE)
            for x in range(buffer.width):
                cell = buffer.get(x, y)
                fg = cell.foreground
                bg = cell.background

                if (fg is None and last_fg is not None) or (bg is None and last_bg is not None):
                    display.reset_styles()
                    stats.resets += 1
                    last_fg = last_bg = None

                if fg is not None and fg != last_fg:
                    display.set_foreground_color(fg)
                    stats.foreground_changes += 1
                    last_fg = fg

                if bg is not None and bg != last_bg:
                    display.set_background_color(bg)
                    stats.background_changes += 1
                    last_bg = bg

                display.write_character(cell.character)
                stats.characters += 1

        display.flush()
        logger.debug(
            "rendered %dx%d: %d fg, %d bg, %d resets",
            buffer.width,
            buffer.height,
            stats.foreground_changes,
            stats.background_changes,
            stats.resets,
        )
        return stats


def render(buffer: Buffer, display: Display) -> RenderStats:
    """Render ``buffer`` on ``display`` with a fresh DiffRenderer."""
    return DiffRenderer().render(buffer, display)


def render_to_string(buffer: Buffer, ansi: bool = True) -> str:
    """Render a buffer in memory and return the produced text.

    With ``ansi=False`` colors are dropped and only characters and line
    breaks are returned. ANSI output ends with a style reset when the last
    cell is colored, so printing it does not tint later output.
    """
    if not ansi:
        display = TextDisplay(width=buffer.width, height=buffer.height)
        render(buffer, display)
        return display.text

    output = io.StringIO()
    display = AnsiTerminalDisplay(
        output,
        width=lambda: buffer.width,
        height=lambda: buffer.height,
        hide_cursor=False,
    )
    render(buffer, display)
    if buffer.get_at(len(buffer) - 1).has_color:
        display.reset_styles()
        display.flush()
    return output.getvalue()
