"""
griddle: a character-grid drawing library for terminal-like surfaces

Draw into a 2D buffer of styled cells, then synchronize it to a terminal,
a plain-text buffer or a test harness with a minimal number of escape
sequences.

Quick Start:
    >>> import griddle
    >>> buffer = griddle.WritableBuffer(5, 3)
    >>> buffer.print_text("HELLO", 0, 1, foreground=griddle.Color.GREEN)
    >>> print(griddle.render_to_string(buffer, ansi=False))

Features:
    - Immutable cells with optional 24-bit foreground/background colors
    - Row-major buffers with resize, fill, blit, clear and text placement
    - Diff-based rendering that only emits style changes
    - ANSI terminal, plain-text and recording displays
    - Screens that follow a live terminal's size
"""

__version__ = "0.1.0"

# Core types
from griddle.core.cell import Cell
from griddle.core.color import Color
from griddle.core.buffer import Buffer, WritableBuffer
from griddle.core.errors import (
    DisplayClosedError,
    GriddleError,
    InvalidArgumentError,
    OutOfRangeError,
)

# Displays
from griddle.display import AnsiTerminalDisplay, Display, RecordingDisplay, TextDisplay

# Rendering
from griddle.render import DiffRenderer, RenderStats, render, render_to_string
from griddle.screen import Screen
from griddle.frames import FrameLoop

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "Buffer",
    "WritableBuffer",
    # Errors
    "GriddleError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DisplayClosedError",
    # Displays
    "Display",
    "AnsiTerminalDisplay",
    "TextDisplay",
    "RecordingDisplay",
    # Rendering
    "DiffRenderer",
    "RenderStats",
    "render",
    "render_to_string",
    "Screen",
    "FrameLoop",
]
