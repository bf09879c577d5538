"""Color representation and SGR encoding."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from cod.core.constants import (
    SGR_BG_EXTENDED,
    SGR_DEFAULT_BG,
    SGR_DEFAULT_FG,
    SGR_FG_EXTENDED,
    SGR_MODE_256,
    SGR_MODE_RGB,
)


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    INDEXED = "256"         # 8-bit indexed color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


class ColorRole(Enum):
    """Which half of the cell a color applies to."""
    FOREGROUND = "fg"
    BACKGROUND = "bg"


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be 0-255, got {value}")


@dataclass(frozen=True)
class Color:
    """
    An indexed (8-bit) or true (24-bit) terminal color.

    The "no color" case is spelled ``None`` wherever a color is accepted;
    it stands for the terminal's default foreground or background.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    # Standard 16 colors (palette index 0-15)
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def indexed(cls, index: int) -> "Color":
        """Create a Color from a 256-color palette index."""
        _check_byte("256-color index", index)
        return cls(ColorMode.INDEXED, index)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        for name, component in (("red", r), ("green", g), ("blue", b)):
            _check_byte(name, component)
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    def params(self, role: ColorRole) -> tuple[int, ...]:
        """Return the SGR parameter tokens selecting this color for ``role``."""
        lead = SGR_FG_EXTENDED if role is ColorRole.FOREGROUND else SGR_BG_EXTENDED
        if self.mode == ColorMode.INDEXED:
            assert isinstance(self.value, int)
            return (lead, SGR_MODE_256, self.value)
        assert isinstance(self.value, tuple)
        return (lead, SGR_MODE_RGB, *self.value)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        return to_sgr_params(self, ColorRole.FOREGROUND)

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        return to_sgr_params(self, ColorRole.BACKGROUND)


def indexed(n: int) -> Color:
    """Shorthand for :meth:`Color.indexed`."""
    return Color.indexed(n)


def rgb(r: int, g: int, b: int) -> Color:
    """Shorthand for :meth:`Color.rgb`."""
    return Color.rgb(r, g, b)


def to_sgr_params(color: Color | None, role: ColorRole) -> str:
    """
    Encode a color as the parameter part of an SGR sequence.

    >>> to_sgr_params(indexed(196), ColorRole.FOREGROUND)
    '38;5;196'
    >>> to_sgr_params(rgb(10, 20, 30), ColorRole.BACKGROUND)
    '48;2;10;20;30'
    >>> to_sgr_params(None, ColorRole.FOREGROUND)
    '39'
    """
    if color is None:
        code = SGR_DEFAULT_FG if role is ColorRole.FOREGROUND else SGR_DEFAULT_BG
        return str(code)
    return ";".join(str(p) for p in color.params(role))


# Initialize class-level color constants
Color.BLACK = Color(ColorMode.INDEXED, 0)
Color.RED = Color(ColorMode.INDEXED, 1)
Color.GREEN = Color(ColorMode.INDEXED, 2)
Color.YELLOW = Color(ColorMode.INDEXED, 3)
Color.BLUE = Color(ColorMode.INDEXED, 4)
Color.MAGENTA = Color(ColorMode.INDEXED, 5)
Color.CYAN = Color(ColorMode.INDEXED, 6)
Color.WHITE = Color(ColorMode.INDEXED, 7)
Color.BRIGHT_BLACK = Color(ColorMode.INDEXED, 8)
Color.BRIGHT_RED = Color(ColorMode.INDEXED, 9)
Color.BRIGHT_GREEN = Color(ColorMode.INDEXED, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.INDEXED, 11)
Color.BRIGHT_BLUE = Color(ColorMode.INDEXED, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.INDEXED, 13)
Color.BRIGHT_CYAN = Color(ColorMode.INDEXED, 14)
Color.BRIGHT_WHITE = Color(ColorMode.INDEXED, 15)
