"""Screen - a writable buffer bound to a display."""

from __future__ import annotations

import logging
from types import TracebackType

from griddle.core.buffer import WritableBuffer
from griddle.display.base import Display
from griddle.render.diff import DiffRenderer, RenderStats

logger = logging.getLogger(__name__)


class Screen(WritableBuffer):
    """
    A buffer that can synchronize itself to a Display.

    The screen starts at the display's size. Each :meth:`update` asks the
    display for its current size again, resizes the buffer if needed
    (keeping overlapping content), then renders the whole buffer.

    Example:
        with Screen(TextDisplay(width=5, height=3)) as screen:
            screen.print_text("HELLO", 0, 1)
            screen.update()
    """

    def __init__(self, display: Display, renderer: DiffRenderer | None = None) -> None:
        super().__init__(display.width, display.height)
        self._display = display
        self._renderer = renderer or DiffRenderer()

    @property
    def display(self) -> Display:
        return self._display

    def sync_size(self) -> bool:
        """Resize to the display's current size. Returns True if it changed."""
        width, height = self._display.width, self._display.height
        if (width, height) == (self.width, self.height):
            return False
        logger.debug("display resized to %dx%d", width, height)
        self.resize(width, height)
        return True

    def update(self) -> RenderStats:
        """Draw the current contents on the display."""
        self.sync_size()
        return self._renderer.render(self, self._display)

    def close(self) -> None:
        """Close the underlying display."""
        self._display.close()

    def __enter__(self) -> Screen:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._display.closed:
            self.close()
