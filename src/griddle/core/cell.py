"""Cell - atomic unit of a character grid."""

from dataclasses import dataclass
from typing import ClassVar

from griddle.core.color import Color
from griddle.core.constants import CODE_SPACE
from griddle.core.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with optional colors.

    Cells are immutable. Every "modification" returns a new cell that
    replaces the old one in a buffer slot. A color of ``None`` means the
    terminal default is inherited.
    """
    character: int = CODE_SPACE
    foreground: Color | None = None
    background: Color | None = None

    BLANK: ClassVar["Cell"]

    def __post_init__(self) -> None:
        if self.character < 0:
            raise InvalidArgumentError(
                f"character must be non-negative, got {self.character}"
            )

    @classmethod
    def blank(cls) -> "Cell":
        """Return the blank cell (a space with no colors)."""
        return cls.BLANK

    @classmethod
    def of_character(cls, code: int) -> "Cell":
        """Create a cell that renders the character ``code``."""
        return cls(code)

    @classmethod
    def of(cls, text: str | None = None) -> "Cell":
        """Create a cell from a single-character string.

        ``Cell.of()`` returns the blank cell.
        """
        if text is None:
            return cls.BLANK
        if len(text) != 1:
            raise InvalidArgumentError(
                f"Must be a string of exactly length 1, got {len(text)}"
            )
        return cls.of_character(ord(text))

    @property
    def char(self) -> str:
        """The character as a string."""
        return chr(self.character)

    @property
    def has_color(self) -> bool:
        return self.foreground is not None or self.background is not None

    def with_color(
        self,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> "Cell":
        """Return the cell with colors set.

        A channel passed as ``None`` keeps its current color. Use
        :meth:`clear_colors` to remove colors.
        """
        return Cell(
            self.character,
            self.foreground if foreground is None else foreground,
            self.background if background is None else background,
        )

    def with_character(self, code: int) -> "Cell":
        """Return the cell with a new character, keeping colors."""
        return Cell(code, self.foreground, self.background)

    def clear_character(self) -> "Cell":
        """Return the cell with the character reset to a space."""
        return Cell(CODE_SPACE, self.foreground, self.background)

    def clear_colors(self) -> "Cell":
        """Return the cell with both colors reset to the terminal default."""
        return Cell(self.character)

    def __str__(self) -> str:
        if not self.has_color:
            return f"Cell <{self.char}>"
        fg = self.foreground if self.foreground is not None else "<NONE>"
        bg = self.background if self.background is not None else "<NONE>"
        return f"Cell <{self.char} f={fg} b={bg}>"


Cell.BLANK = Cell()
