"""Fixed-rate frame loop for animating a Screen."""

from __future__ import annotations

import logging
import time
from typing import Callable

from griddle.core.errors import InvalidArgumentError
from griddle.screen import Screen

logger = logging.getLogger(__name__)

DrawFrame = Callable[[Screen, int, float], None]


class FrameLoop:
    """
    Redraw a Screen at a fixed rate.

    Each frame syncs the screen to its display size, calls
    ``draw(screen, index, elapsed)`` and then ``screen.update()``. Frame
    deadlines are absolute, so short sleeps do not accumulate drift. A frame
    that runs past its deadline resyncs the schedule instead of bursting to
    catch up.

    Example:
        loop = FrameLoop(screen, fps=30)
        loop.run(lambda s, i, t: s.print_text(f"{i}", 0, 0), frames=90)
    """

    def __init__(
        self,
        screen: Screen,
        fps: float,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps <= 0:
            raise InvalidArgumentError(f"fps must be > 0, got {fps}")
        self.screen = screen
        self.interval = 1.0 / fps
        self._clock = clock
        self._sleep = sleep
        self.count = 0

    def run(self, draw: DrawFrame, frames: int = 0) -> int:
        """Draw ``frames`` frames, or forever when 0. Returns frames drawn.

        ``count`` is kept current, so it is still meaningful when ``draw``
        or a KeyboardInterrupt ends the loop early.
        """
        if frames < 0:
            raise InvalidArgumentError(f"frames must be >= 0, got {frames}")
        self.count = 0
        start = next_frame = self._clock()

        while not frames or self.count < frames:
            self.screen.sync_size()
            draw(self.screen, self.count, self._clock() - start)
            self.screen.update()
            self.count += 1
            if frames and self.count >= frames:
                break

            next_frame += self.interval
            now = self._clock()
            if next_frame > now:
                self._sleep(next_frame - now)
            else:
                next_frame = now

        logger.debug("frame loop finished after %d frames", self.count)
        return self.count
