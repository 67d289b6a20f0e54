"""Color representation for terminal cells."""

import colorsys
from dataclasses import dataclass
from typing import ClassVar

from griddle.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class Color:
    """
    A 24-bit RGB color.

    Colors are plain values: two colors with the same components are equal
    and hash the same, which is what the renderer relies on to skip
    redundant escape sequences.
    """
    r: int
    g: int
    b: int

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b)):
            raise InvalidArgumentError(
                f"RGB values must be 0-255, got ({self.r}, {self.g}, {self.b})"
            )

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, value: str | int) -> "Color":
        """Create a Color from ``0xRRGGBB`` or a hex string.

        Accepts "#FF00FF", "FF00FF", "#F0F" and "F0F".
        """
        if isinstance(value, int):
            if not 0 <= value <= 0xFFFFFF:
                raise InvalidArgumentError(f"Hex color out of range: {value:#x}")
            return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

        text = value.strip().lstrip("#")
        if len(text) == 3:
            # Short form: F0F -> FF00FF
            text = text[0] * 2 + text[1] * 2 + text[2] * 2
        if len(text) != 6:
            raise InvalidArgumentError(f"Invalid hex color: {value!r}")
        try:
            return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError:
            raise InvalidArgumentError(f"Invalid hex color: {value!r}") from None

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "Color":
        """Create a Color from HSL.

        Args:
            hue: Degrees, wrapped into [0, 360)
            saturation: 0.0 - 1.0
            lightness: 0.0 - 1.0
        """
        if not (0.0 <= saturation <= 1.0 and 0.0 <= lightness <= 1.0):
            raise InvalidArgumentError(
                f"Saturation and lightness must be 0-1, got ({saturation}, {lightness})"
            )
        r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)
        return cls(round(r * 255), round(g * 255), round(b * 255))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for a 24-bit foreground color."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for a 24-bit background color."""
        return f"48;2;{self.r};{self.g};{self.b}"

    def __str__(self) -> str:
        return f"0x{self.r:02X}{self.g:02X}{self.b:02X}"


# Initialize class-level color constants
Color.BLACK = Color(0x00, 0x00, 0x00)
Color.WHITE = Color(0xFF, 0xFF, 0xFF)
Color.RED = Color(0xFF, 0x00, 0x00)
Color.GREEN = Color(0x00, 0xFF, 0x00)
Color.BLUE = Color(0x00, 0x00, 0xFF)
Color.YELLOW = Color(0xFF, 0xFF, 0x00)
Color.CYAN = Color(0x00, 0xFF, 0xFF)
Color.MAGENTA = Color(0xFF, 0x00, 0xFF)
