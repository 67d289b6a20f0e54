"""Demo programs drawn with the public buffer API."""

from __future__ import annotations

import math
import random

from griddle.core.buffer import WritableBuffer
from griddle.core.cell import Cell
from griddle.core.color import Color
from griddle.core.constants import FULL_BLOCK


def draw_coordinate_grid(buffer: WritableBuffer) -> None:
    """Label the top row and left column with coordinates modulo 10."""
    for y in range(buffer.height):
        buffer.set(0, y, Cell.of(str(y % 10)))
    for x in range(buffer.width):
        buffer.set(x, 0, Cell.of(str(x % 10)))


def draw_wave_text(buffer: WritableBuffer, message: str, t: float) -> None:
    """Draw ``message`` as a rainbow sine wave centered in the buffer.

    Args:
        buffer: Target buffer, cleared first
        message: Text to animate
        t: Time in seconds, drives hue and wave phase
    """
    buffer.clear()
    x0 = buffer.width // 2 - len(message) // 2
    for i, char in enumerate(message):
        f = i / len(message)
        color = Color.from_hsl(f * 300 + t * 60, 1.0, 0.5)
        offset = math.sin(t * 3 + f * 5) * 2
        y = round(buffer.height / 2 + offset)
        buffer.print_text(char, x0 + i, y, foreground=color)


class GameOfLife:
    """
    Conway's Game of Life on a toroidal grid.

    State is kept as a flat row-major list of booleans, one per cell.
    """

    ALIVE = Cell.of(FULL_BLOCK).with_color(foreground=Color.BLUE, background=Color.BLACK)
    EMPTY = ALIVE.clear_character()

    _NEIGHBORS = (
        (-1, -1), (0, -1), (1, -1),
        (-1, 0),           (1, 0),
        (-1, 1),  (0, 1),  (1, 1),
    )

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        rng = rng or random.Random()
        self.width = width
        self.height = height
        self.living = [rng.random() < 0.5 for _ in range(width * height)]
        self.generation = 0

    def is_alive(self, x: int, y: int) -> bool:
        return self.living[(y % self.height) * self.width + (x % self.width)]

    def live_neighbors(self, x: int, y: int) -> int:
        return sum(self.is_alive(x + dx, y + dy) for dx, dy in self._NEIGHBORS)

    def step(self) -> None:
        """Advance one generation."""
        nxt = []
        for y in range(self.height):
            for x in range(self.width):
                n = self.live_neighbors(x, y)
                nxt.append(n == 3 or (n == 2 and self.is_alive(x, y)))
        self.living = nxt
        self.generation += 1

    def resize(self, width: int, height: int) -> None:
        """Follow a resized screen; new cells start empty."""
        if (width, height) == (self.width, self.height):
            return
        living = [False] * (width * height)
        for y in range(min(height, self.height)):
            for x in range(min(width, self.width)):
                living[y * width + x] = self.living[y * self.width + x]
        self.width, self.height, self.living = width, height, living

    def draw(self, buffer: WritableBuffer) -> None:
        """Draw the current generation into ``buffer``."""
        for y in range(min(self.height, buffer.height)):
            for x in range(min(self.width, buffer.width)):
                buffer.set(x, y, self.ALIVE if self.is_alive(x, y) else self.EMPTY)
