"""Decoding of ANSI-escaped text."""

from fmtstring.codec.ansi_parser import AnsiParser

__all__ = ["AnsiParser"]
