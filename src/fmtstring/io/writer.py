"""Save colored strings as ANSI-escaped text files."""

from pathlib import Path
from typing import TYPE_CHECKING

from fmtstring.render.terminal import OptimisedRenderer

if TYPE_CHECKING:
    from fmtstring.core.fmt_string import FmtString


def save(
    string: "FmtString",
    path: str | Path,
    reset_at_end: bool = False,
    encoding: str = "utf-8",
) -> int:
    """
    Save a FmtString to disk as its optimised ANSI serialization.

    Returns the number of bytes written.
    """
    path = Path(path)

    if reset_at_end:
        content = OptimisedRenderer(reset_at_end=True).render(string)
    else:
        content = string.optimised

    data = content.encode(encoding)
    with open(path, 'wb') as f:
        f.write(data)
    return len(data)
