"""Buffer - 2D grid of cells with row-major storage."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from griddle.core.cell import Cell
from griddle.core.color import Color
from griddle.core.errors import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


def _check_positive(value: int, name: str) -> None:
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {value}")


def _check_not_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise InvalidArgumentError(f"{name} must be >= 0, got {value}")


class Buffer:
    """
    A read-only 2D grid of Cells.

    Cells are stored in a single list addressed as ``y * width + x``.
    Use :class:`WritableBuffer` for the mutating operations; both classes
    share the same storage model and constructors, so the capability set
    is chosen by the class that is instantiated.

    Buffers are not synchronized. Callers must serialize reads, writes and
    resizes on one instance.
    """

    def __init__(self, width: int, height: int, initial_cell: Cell = Cell.BLANK) -> None:
        _check_positive(width, "width")
        _check_positive(height, "height")
        self._width = width
        self._height = height
        self._cells: list[Cell] = [initial_cell] * (width * height)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], width: int) -> "Buffer":
        """Create a buffer from a flat, row-major sequence of cells.

        The height is derived from the number of cells. The input is copied.
        """
        cells = list(cells)
        if not cells:
            raise InvalidArgumentError("cells must not be empty")
        _check_positive(width, "width")
        if len(cells) % width != 0:
            raise InvalidArgumentError(
                f"{len(cells)} cells cannot be divided into rows of width {width}"
            )
        buffer = cls(width, len(cells) // width)
        buffer._cells = cells
        return buffer

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[Cell]]) -> "Buffer":
        """Create a buffer from a list of rows. The input is copied."""
        if not rows:
            raise InvalidArgumentError("rows must not be empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidArgumentError(
                    f"row {y} has length {len(row)}, expected {width}"
                )
        return cls.from_cells([cell for row in rows for cell in row], width)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return len(self._cells)

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies within the buffer."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int) -> int:
        if not 0 <= x < self._width:
            raise OutOfRangeError(f"x={x} out of bounds (width={self._width})")
        if not 0 <= y < self._height:
            raise OutOfRangeError(f"y={y} out of bounds (height={self._height})")
        return y * self._width + x

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._cells):
            raise OutOfRangeError(
                f"index={index} out of bounds (length={len(self._cells)})"
            )
        return index

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        return self._cells[self._index(x, y)]

    def get_at(self, index: int) -> Cell:
        """Get the cell at a row-major linear index."""
        return self._cells[self._check_index(index)]

    def __getitem__(self, key: int | tuple[int, int]) -> Cell:
        """Get a cell using ``buffer[i]`` or ``buffer[x, y]``."""
        if isinstance(key, tuple):
            x, y = key
            return self.get(x, y)
        return self.get_at(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cells == other._cells
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, each as a new list."""
        for y in range(self._height):
            start = y * self._width
            yield self._cells[start:start + self._width]

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples in row-major order."""
        for i, cell in enumerate(self._cells):
            y, x = divmod(i, self._width)
            yield x, y, cell

    def to_list(self) -> list[Cell]:
        """Return a copy of the row-major cell storage."""
        return list(self._cells)

    def to_matrix(self) -> list[list[Cell]]:
        """Return a copy of the cells as ``height`` rows of ``width`` cells."""
        return list(self.rows())

    def to_debug_string(self) -> str:
        """Render the character channel as text, one line per row.

        Every line, including the last, ends with a newline.
        """
        return "".join(
            "".join(cell.char for cell in row) + "\n" for row in self.rows()
        )


class WritableBuffer(Buffer):
    """A Buffer that also supports mutation."""

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        self._cells[self._index(x, y)] = cell

    def set_at(self, index: int, cell: Cell) -> None:
        """Set the cell at a row-major linear index."""
        self._cells[self._check_index(index)] = cell

    def __setitem__(self, key: int | tuple[int, int], cell: Cell) -> None:
        """Set a cell using ``buffer[i] = cell`` or ``buffer[x, y] = cell``."""
        if isinstance(key, tuple):
            x, y = key
            self.set(x, y, cell)
        else:
            self.set_at(key, cell)

    def resize(
        self,
        width: int | None = None,
        height: int | None = None,
        fill: Cell = Cell.BLANK,
    ) -> None:
        """Resize the buffer, keeping the overlapping region.

        Omitted dimensions keep their current value. Cells outside the old
        area are set to ``fill``; cells outside the new area are dropped.
        Resizing to the current size does nothing.
        """
        new_width = self._width if width is None else width
        new_height = self._height if height is None else height
        _check_positive(new_width, "width")
        _check_positive(new_height, "height")

        if new_width == self._width and new_height == self._height:
            return

        new_cells = [fill] * (new_width * new_height)
        copy_width = min(self._width, new_width)
        for y in range(min(self._height, new_height)):
            old_start = y * self._width
            new_start = y * new_width
            new_cells[new_start:new_start + copy_width] = (
                self._cells[old_start:old_start + copy_width]
            )

        logger.debug(
            "resize %dx%d -> %dx%d", self._width, self._height, new_width, new_height
        )
        self._width = new_width
        self._height = new_height
        self._cells = new_cells

    def fill(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        character: int | None = None,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> None:
        """Fill a rectangular region with the given attributes.

        Attributes left as ``None`` are unchanged in each cell. Any part of
        the rectangle outside the buffer is ignored.
        """
        _check_not_negative(x=x, y=y, width=width, height=height)
        for j in range(y, min(y + height, self._height)):
            for i in range(x, min(x + width, self._width)):
                index = j * self._width + i
                cell = self._cells[index].with_color(foreground, background)
                if character is not None:
                    cell = cell.with_character(character)
                self._cells[index] = cell

    def blit(
        self,
        source: Buffer,
        dest_x: int,
        dest_y: int,
        source_x: int = 0,
        source_y: int = 0,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        """Copy a rectangle of cells from ``source`` into this buffer.

        The rectangle starts at (source_x, source_y) in ``source`` and lands
        at (dest_x, dest_y). Unlike :meth:`fill`, the destination is not
        clipped: a rectangle that does not fit raises ``OutOfRangeError``
        and nothing is written.
        """
        width = source.width if width is None else width
        height = source.height if height is None else height
        _check_not_negative(
            dest_x=dest_x,
            dest_y=dest_y,
            source_x=source_x,
            source_y=source_y,
            width=width,
            height=height,
        )
        if width == 0 or height == 0:
            return

        if not source.in_bounds(source_x + width - 1, source_y + height - 1):
            raise OutOfRangeError(
                f"source rectangle ({source_x}, {source_y}, {width}x{height}) "
                f"exceeds source bounds ({source.width}x{source.height})"
            )
        if not self.in_bounds(dest_x + width - 1, dest_y + height - 1):
            raise OutOfRangeError(
                f"destination rectangle ({dest_x}, {dest_y}, {width}x{height}) "
                f"exceeds buffer bounds ({self._width}x{self._height})"
            )

        # Snapshot rows first; source may be this buffer.
        region = [
            source._cells[j * source.width + source_x:j * source.width + source_x + width]
            for j in range(source_y, source_y + height)
        ]
        for offset, row in enumerate(region):
            start = (dest_y + offset) * self._width + dest_x
            self._cells[start:start + width] = row

    def clear(self, cell: Cell = Cell.BLANK) -> None:
        """Set every cell in the buffer to ``cell``."""
        self._cells = [cell] * len(self._cells)

    def print_text(
        self,
        text: str,
        x: int,
        y: int,
        *,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> None:
        """Place ``text`` starting at (x, y).

        Lines are split on line feeds only (a trailing carriage return is
        dropped) and each goes on its own row. Characters that would fall outside the
        buffer are skipped.
        """
        for i, line in enumerate(text.split("\n")):
            line = line.removesuffix("\r")
            row = y + i
            if not 0 <= row < self._height:
                continue
            for n, char in enumerate(line):
                col = x + n
                if not 0 <= col < self._width:
                    continue
                index = row * self._width + col
                self._cells[index] = (
                    self._cells[index]
                    .with_character(ord(char))
                    .with_color(foreground, background)
                )
