"""FmtChar - a single character with foreground and background colors."""

from dataclasses import dataclass, field, replace

from fmtstring.core.color import Color, Ground
from fmtstring.core.constants import ESC


@dataclass(frozen=True, slots=True)
class FmtChar:
    """
    A single display character with its colors.

    Cells are immutable; an owning FmtString swaps in new cells on edit so
    its serialization cache can never go stale behind its back.
    """
    char: str
    fg: Color = field(default_factory=Color.default)
    bg: Color = field(default_factory=Color.default)

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"FmtChar holds exactly one character, got {self.char!r}")
        if self.char == ESC:
            # Would start an escape sequence when serialized
            raise ValueError("FmtChar cannot hold the ESC control character")

    def width(self) -> int:
        """Display width in columns. Wide characters are not accounted for."""
        return 1

    def render(self) -> str:
        """Render this cell alone: fg escape, bg escape, then the character."""
        return (
            self.fg.to_escape(Ground.FOREGROUND)
            + self.bg.to_escape(Ground.BACKGROUND)
            + self.char
        )

    def with_colors(self, fg: Color | None = None, bg: Color | None = None) -> "FmtChar":
        """Return a copy with the given colors replaced."""
        return replace(
            self,
            fg=self.fg if fg is None else fg,
            bg=self.bg if bg is None else bg,
        )

    def with_char(self, char: str) -> "FmtChar":
        """Return a copy holding a different character."""
        return replace(self, char=char)

    def is_default(self) -> bool:
        """Check if both colors are the terminal default."""
        return self.fg.is_default and self.bg.is_default
