"""Render colored strings to plain text (strip colors)."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fmtstring.core.fmt_string import FmtString


class TextRenderer:
    """Render a FmtString to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = True):
        self.preserve_whitespace = preserve_whitespace

    def render(self, string: "FmtString") -> str:
        """Render ``string`` to plain text."""
        text = string.plain_text
        if not self.preserve_whitespace:
            text = '\n'.join(line.rstrip() for line in text.split('\n')).rstrip('\n')
        return text
