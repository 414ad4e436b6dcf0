"""Load ANSI-escaped text files."""

from pathlib import Path

from fmtstring.codec.ansi_parser import AnsiParser
from fmtstring.core.fmt_string import FmtString


def load(
    path: str | Path,
    *,
    strict: bool = False,
    reset_both_grounds: bool = False,
    encoding: str = "utf-8",
) -> FmtString:
    """Load a file of ANSI-escaped text and parse it into a FmtString."""
    path = Path(path)

    with open(path, 'rb') as f:
        data = f.read()

    parser = AnsiParser(strict=strict, reset_both_grounds=reset_both_grounds)
    parser.feed_bytes(data, encoding=encoding)
    return parser.get_string()
