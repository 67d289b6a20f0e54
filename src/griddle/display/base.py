"""Display - abstract output surface for rendered buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from griddle.core.color import Color
from griddle.core.errors import DisplayClosedError


class Display(ABC):
    """Abstract base class for terminal-like output surfaces.

    A display receives the commands produced by the renderer (clear, set
    colors, reset, write characters, flush) and materializes them. Width and
    height may change between calls, so callers should query them each time
    they need them.
    """

    def __init__(self) -> None:
        self._closed = False

    # -------------------------------------------------------------------------
    # Abstract API
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def width(self) -> int:
        """Width of the output in characters."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Height of the output in characters."""
        ...

    @abstractmethod
    def clear_screen(self) -> None:
        """Clear all previously written content."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Move any buffered output to the real destination."""
        ...

    @abstractmethod
    def set_foreground_color(self, color: Color) -> None:
        """Set the 24-bit foreground color of subsequent characters."""
        ...

    @abstractmethod
    def set_background_color(self, color: Color) -> None:
        """Set the 24-bit background color of subsequent characters."""
        ...

    @abstractmethod
    def reset_styles(self) -> None:
        """Reset foreground and background to the terminal defaults."""
        ...

    @abstractmethod
    def write_character(self, code: int) -> None:
        """Write one character code to the output."""
        ...

    # -------------------------------------------------------------------------
    # Optional API
    # -------------------------------------------------------------------------

    def hide_cursor(self) -> None:
        """Hide the cursor, if supported."""
        self._check_open()

    def show_cursor(self) -> None:
        """Show the cursor, if supported."""
        self._check_open()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the display. Further commands raise DisplayClosedError."""
        self._check_open()
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise DisplayClosedError(f"{type(self).__name__} already closed")

    def __enter__(self) -> Display:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._closed:
            self.close()
