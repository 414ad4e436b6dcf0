"""Core data structures for colored strings."""

from fmtstring.core.cell import FmtChar
from fmtstring.core.color import Color, ColorKind, Ground
from fmtstring.core.fmt_string import CellHandle, FmtString

__all__ = ["FmtChar", "Color", "ColorKind", "Ground", "FmtString", "CellHandle"]
