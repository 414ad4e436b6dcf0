"""Color representation for formatted strings."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from fmtstring.core.constants import CSI, PALETTE_NAMES


class Ground(Enum):
    """Which part of a character cell a color applies to."""
    FOREGROUND = "fg"
    BACKGROUND = "bg"


class ColorKind(Enum):
    """Variant tag for Color."""
    RGB = "rgb"          # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)
    NAMED = "named"      # 16-color palette (SGR 30-37, 40-47, 90-97, 100-107)
    DEFAULT = "default"  # Terminal default (SGR 39, 49)
    NONE = "none"        # Transparent: emit nothing, inherit neighbors


@dataclass(frozen=True)
class Color:
    """
    A color value for one ground of a character cell.

    Colors are a closed set of variants distinguished by ``kind``. Equality
    is structural, so the default color is never equal to RGB black.
    """
    kind: ColorKind
    value: int | tuple[int, int, int] | None = None

    # Standard 16 colors (index 0-15)
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

    DEFAULT: ClassVar["Color"]
    NONE: ClassVar["Color"]

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(isinstance(c, int) and not isinstance(c, bool) for c in (r, g, b)):
            raise TypeError(f"RGB values must be integers, got ({r!r}, {g!r}, {b!r})")
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorKind.RGB, (r, g, b))

    @classmethod
    def default(cls) -> "Color":
        """The terminal's own default color."""
        return cls.DEFAULT

    @classmethod
    def none(cls) -> "Color":
        """The transparent color, which inherits whatever precedes it."""
        return cls.NONE

    @classmethod
    def named(cls, index: int) -> "Color":
        """Create a palette Color from its index (0-15)."""
        if not 0 <= index <= 15:
            raise ValueError(f"Palette index must be 0-15, got {index}")
        return cls(ColorKind.NAMED, index)

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37, 40-47, 90-97, 100-107)."""
        if 30 <= code <= 37:
            return cls(ColorKind.NAMED, code - 30)
        elif 40 <= code <= 47:
            return cls(ColorKind.NAMED, code - 40)
        elif 90 <= code <= 97:
            return cls(ColorKind.NAMED, code - 90 + 8)
        elif 100 <= code <= 107:
            return cls(ColorKind.NAMED, code - 100 + 8)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    @property
    def is_default(self) -> bool:
        return self.kind is ColorKind.DEFAULT

    @property
    def is_none(self) -> bool:
        return self.kind is ColorKind.NONE

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``bright_red`` or ``#ff0000``."""
        if self.kind is ColorKind.RGB:
            assert isinstance(self.value, tuple)
            return "#{:02x}{:02x}{:02x}".format(*self.value)
        elif self.kind is ColorKind.NAMED:
            assert isinstance(self.value, int)
            return PALETTE_NAMES[self.value]
        return self.kind.value

    def to_sgr(self, ground: Ground) -> str:
        """Return the SGR parameters selecting this color on ``ground``."""
        fg = ground is Ground.FOREGROUND
        if self.kind is ColorKind.RGB:
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"{38 if fg else 48};2;{r};{g};{b}"
        elif self.kind is ColorKind.NAMED:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str((30 if fg else 40) + self.value)
            else:
                return str((90 if fg else 100) + self.value - 8)
        elif self.kind is ColorKind.DEFAULT:
            return "39" if fg else "49"
        else:  # NONE
            return ""

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        return self.to_sgr(Ground.FOREGROUND)

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        return self.to_sgr(Ground.BACKGROUND)

    def to_escape(self, ground: Ground) -> str:
        """
        Return the exact escape sequence selecting this color on ``ground``.

        The transparent color produces an empty string.
        """
        if self.kind is ColorKind.NONE:
            return ""
        return f"{CSI}{self.to_sgr(ground)}m"


# Initialize class-level color constants
Color.BLACK = Color(ColorKind.NAMED, 0)
Color.RED = Color(ColorKind.NAMED, 1)
Color.GREEN = Color(ColorKind.NAMED, 2)
Color.YELLOW = Color(ColorKind.NAMED, 3)
Color.BLUE = Color(ColorKind.NAMED, 4)
Color.MAGENTA = Color(ColorKind.NAMED, 5)
Color.CYAN = Color(ColorKind.NAMED, 6)
Color.WHITE = Color(ColorKind.NAMED, 7)
Color.BRIGHT_BLACK = Color(ColorKind.NAMED, 8)
Color.BRIGHT_RED = Color(ColorKind.NAMED, 9)
Color.BRIGHT_GREEN = Color(ColorKind.NAMED, 10)
Color.BRIGHT_YELLOW = Color(ColorKind.NAMED, 11)
Color.BRIGHT_BLUE = Color(ColorKind.NAMED, 12)
Color.BRIGHT_MAGENTA = Color(ColorKind.NAMED, 13)
Color.BRIGHT_CYAN = Color(ColorKind.NAMED, 14)
Color.BRIGHT_WHITE = Color(ColorKind.NAMED, 15)
Color.DEFAULT = Color(ColorKind.DEFAULT)
Color.NONE = Color(ColorKind.NONE)
