"""
fmtstring: strings with per-character colors

Parse ANSI true-color text into colored cells, edit them, and write them
back out with the fewest possible color escapes.

Quick Start:
    >>> import fmtstring
    >>> s = fmtstring.FmtString.from_ansi_string("\\x1b[38;2;255;0;0mR\\x1b[0mG")
    >>> s.recolor(1, bg=fmtstring.Color.from_rgb(0, 0, 255))
    >>> print(s)

Features:
    - Per-character foreground and background colors (RGB, 16-color palette,
      terminal default, transparent)
    - Parser for the SGR true-color escape subset
    - Run-length optimised serializer with a lazily rebuilt cache
    - Load and save UTF-8 ANSI text files
"""

import logging

__version__ = "0.1.0"

# Core types
from fmtstring.core.cell import FmtChar
from fmtstring.core.color import Color, ColorKind, Ground
from fmtstring.core.fmt_string import FmtString

# Errors
from fmtstring.errors import (
    FmtStringError,
    MalformedColorFieldError,
    OutOfRangeError,
    TruncatedEscapeSequenceError,
)

# Convenience functions
from fmtstring.io.reader import load
from fmtstring.io.writer import save

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "FmtChar",
    "FmtString",
    "Color",
    "ColorKind",
    "Ground",
    # Errors
    "FmtStringError",
    "OutOfRangeError",
    "MalformedColorFieldError",
    "TruncatedEscapeSequenceError",
    # I/O
    "load",
    "save",
]
