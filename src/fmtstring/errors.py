"""Exceptions raised by fmtstring."""


class FmtStringError(Exception):
    """Base class for all fmtstring errors."""


class OutOfRangeError(FmtStringError, IndexError):
    """Indexed or ranged access outside the current string length."""

    def __init__(self, index: int | tuple[int, int], length: int):
        self.index = index
        self.length = length
        if isinstance(index, tuple):
            start, end = index
            msg = f"range [{start}, {end}) out of bounds (length={length})"
        else:
            msg = f"index {index} out of bounds (length={length})"
        super().__init__(msg)


class MalformedColorFieldError(FmtStringError, ValueError):
    """
    A numeric field of an SGR color sequence could not be parsed.

    Raised for a selector, R, G or B field that is not a decimal in its valid
    range, or for a color sequence with the wrong number of fields.
    """

    def __init__(self, message: str, field: str | None = None, offset: int | None = None):
        self.field = field
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)


class TruncatedEscapeSequenceError(MalformedColorFieldError):
    """Input ended in the middle of an escape sequence (strict parsing only)."""
