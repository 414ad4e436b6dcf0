"""ANSI escape sequence parser for true-color text."""

import logging

from fmtstring.core.cell import FmtChar
from fmtstring.core.color import Color
from fmtstring.core.constants import (
    ESC,
    FINAL_BYTES,
    INTERMEDIATE_BYTES,
    MAX_FIELD_DIGITS,
    PARAM_BYTES,
    SGR_BG_DEFAULT,
    SGR_BG_EXTENDED,
    SGR_FG_DEFAULT,
    SGR_FG_EXTENDED,
    SGR_MODE_256,
    SGR_RESET,
)
from fmtstring.core.fmt_string import FmtString
from fmtstring.errors import MalformedColorFieldError, TruncatedEscapeSequenceError

logger = logging.getLogger(__name__)


class AnsiParser:
    """
    Stateful parser that turns ANSI-escaped text into a FmtString.

    Tracks the current foreground and background colors and applies them to
    every plain character that follows. Only color SGR sequences change that
    state; every other escape sequence is skipped.

    Args:
        strict: Raise TruncatedEscapeSequenceError when the input ends inside
            an escape sequence. By default the fragment is dropped with a
            warning.
        reset_both_grounds: Make SGR 39 and 49 reset both grounds instead of
            only the one they name.
    """

    def __init__(self, strict: bool = False, reset_both_grounds: bool = False):
        self.strict = strict
        self.reset_both_grounds = reset_both_grounds
        self._cells: list[FmtChar] = []

        # Terminal state
        self.fg = Color.DEFAULT
        self.bg = Color.DEFAULT

    def feed(self, text: str) -> None:
        """Process ANSI-escaped text. Color state carries across calls."""
        self._process_text(text)

    def feed_bytes(self, data: bytes, encoding: str = "utf-8") -> None:
        """Decode and process raw bytes."""
        self._process_text(data.decode(encoding))

    def _process_text(self, text: str) -> None:
        i = 0
        n = len(text)
        while i < n:
            char = text[i]
            if char == ESC:
                i = self._handle_escape(text, i)
                continue

            self._cells.append(FmtChar(char, self.fg, self.bg))
            i += 1

    def _handle_escape(self, text: str, start: int) -> int:
        """Consume the escape sequence at ``start``; return the index after it."""
        n = len(text)
        if start + 1 >= n:
            return self._truncated(text, start)

        if text[start + 1] != '[':
            logger.debug("Skipping unsupported escape ESC %r at offset %d", text[start + 1], start)
            return start + 2

        # CSI: parameter bytes, intermediate bytes, one final byte
        j = start + 2
        while j < n and ord(text[j]) in PARAM_BYTES:
            j += 1
        params_end = j
        while j < n and ord(text[j]) in INTERMEDIATE_BYTES:
            j += 1
        if j >= n:
            return self._truncated(text, start)

        if ord(text[j]) not in FINAL_BYTES:
            # Broken sequence: drop it and resume at the offending character
            logger.debug("Dropping unterminated CSI sequence at offset %d", start)
            return j

        if text[j] == 'm' and params_end == j:
            self._handle_sgr(text[start + 2:params_end], start)
        else:
            logger.debug("Ignoring unsupported CSI sequence %r at offset %d", text[start:j + 1], start)
        return j + 1

    def _truncated(self, text: str, start: int) -> int:
        if self.strict:
            raise TruncatedEscapeSequenceError(
                f"Input ends inside escape sequence {text[start:]!r}", offset=start
            )
        logger.warning("Dropping truncated escape sequence %r at offset %d", text[start:], start)
        return len(text)

    def _handle_sgr(self, params: str, offset: int) -> None:
        """Handle SGR (Select Graphic Rendition) parameters."""
        fields = params.split(';')

        i = 0
        while i < len(fields):
            # An empty parameter means 0, as in ``ESC[m`` or ``ESC[;32m``
            code = self._parse_field(fields[i], "selector", offset) if fields[i] else SGR_RESET

            if code == SGR_RESET:
                self.fg = Color.DEFAULT
                self.bg = Color.DEFAULT
            elif code == SGR_FG_DEFAULT:
                self.fg = Color.DEFAULT
                if self.reset_both_grounds:
                    self.bg = Color.DEFAULT
            elif code == SGR_BG_DEFAULT:
                self.bg = Color.DEFAULT
                if self.reset_both_grounds:
                    self.fg = Color.DEFAULT
            elif code in (SGR_FG_EXTENDED, SGR_BG_EXTENDED):
                i += self._handle_extended_color(code, fields[i:], offset)
            elif 30 <= code <= 37 or 90 <= code <= 97:
                self.fg = Color.from_sgr(code)
            elif 40 <= code <= 47 or 100 <= code <= 107:
                self.bg = Color.from_sgr(code)
            else:
                logger.debug("Ignoring unsupported SGR parameter %d at offset %d", code, offset)

            i += 1

    def _handle_extended_color(self, code: int, fields: list[str], offset: int) -> int:
        """
        Handle ``38;M;r;g;b`` and ``48;M;r;g;b`` at the start of ``fields``.

        Returns the number of fields consumed after the selector.
        """
        if len(fields) > 1 and fields[1] == str(SGR_MODE_256):
            if len(fields) < 3:
                raise MalformedColorFieldError(
                    f"256-color sequence {';'.join(fields)!r} is missing its index",
                    field="selector",
                    offset=offset,
                )
            logger.debug("Ignoring 256-color sequence %r at offset %d", ';'.join(fields[:3]), offset)
            return 2
        if len(fields) < 5:
            raise MalformedColorFieldError(
                f"Color sequence {';'.join(fields)!r} needs 5 fields, got {len(fields)}",
                field="selector",
                offset=offset,
            )

        # fields[1] is the color mode marker and is not checked
        r, g, b = (
            self._parse_field(value, name, offset, maximum=255)
            for value, name in zip(fields[2:5], ("red", "green", "blue"))
        )
        color = Color.from_rgb(r, g, b)
        if code == SGR_FG_EXTENDED:
            self.fg = color
        else:
            self.bg = color
        return 4

    @staticmethod
    def _parse_field(value: str, name: str, offset: int, maximum: int | None = None) -> int:
        if not (value.isascii() and value.isdigit()):
            raise MalformedColorFieldError(
                f"{name} field {value!r} is not a number", field=name, offset=offset
            )
        # Every SGR code and color component fits in 3 digits
        if len(value.lstrip('0')) > MAX_FIELD_DIGITS:
            raise MalformedColorFieldError(
                f"{name} field {value[:16]!r}... is too long", field=name, offset=offset
            )
        number = int(value)
        if maximum is not None and number > maximum:
            raise MalformedColorFieldError(
                f"{name} field {number} out of range 0-{maximum}", field=name, offset=offset
            )
        return number

    def get_string(self) -> FmtString:
        """Get the resulting string."""
        return FmtString(self._cells)
