"""Render colored strings to minimal ANSI escape sequences."""

from typing import TYPE_CHECKING

from fmtstring.core.color import Color, Ground
from fmtstring.core.constants import RESET

if TYPE_CHECKING:
    from fmtstring.core.fmt_string import FmtString


class OptimisedRenderer:
    """
    Render a FmtString to ANSI escape sequences for terminal display.

    Only emits a color escape when that ground's color changes, so each run
    of cells sharing a color costs one escape. The terminal starts out in its
    default colors. Transparent cells inherit the current color and never
    change it.
    """

    def __init__(self, reset_at_end: bool = False):
        self.reset_at_end = reset_at_end

    def render(self, string: "FmtString") -> str:
        """Render ``string`` to an ANSI string."""
        parts: list[str] = []

        last_fg = Color.DEFAULT
        last_bg = Color.DEFAULT

        for cell in string:
            if not cell.fg.is_none and cell.fg != last_fg:
                parts.append(cell.fg.to_escape(Ground.FOREGROUND))
                last_fg = cell.fg

            if not cell.bg.is_none and cell.bg != last_bg:
                parts.append(cell.bg.to_escape(Ground.BACKGROUND))
                last_bg = cell.bg

            parts.append(cell.char)

        if self.reset_at_end and not (last_fg.is_default and last_bg.is_default):
            parts.append(RESET)

        return ''.join(parts)
