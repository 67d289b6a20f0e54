"""Output surfaces for rendered buffers."""

from griddle.display.base import Display
from griddle.display.ansi import AnsiTerminalDisplay
from griddle.display.text import TextDisplay
from griddle.display.recording import RecordingDisplay

__all__ = ["Display", "AnsiTerminalDisplay", "TextDisplay", "RecordingDisplay"]
