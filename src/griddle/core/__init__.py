"""Core data structures: cells, colors and buffers."""

from griddle.core.cell import Cell
from griddle.core.color import Color
from griddle.core.buffer import Buffer, WritableBuffer
from griddle.core.errors import (
    DisplayClosedError,
    GriddleError,
    InvalidArgumentError,
    OutOfRangeError,
)

__all__ = [
    "Cell",
    "Color",
    "Buffer",
    "WritableBuffer",
    "GriddleError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "DisplayClosedError",
]
