"""File I/O for ANSI-escaped text."""

from fmtstring.io.reader import load
from fmtstring.io.writer import save

__all__ = ["load", "save"]
