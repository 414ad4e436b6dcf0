"""FmtString - a sequence of colored characters with a cached serialization."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator

from fmtstring.core.cell import FmtChar
from fmtstring.core.color import Color
from fmtstring.errors import OutOfRangeError

logger = logging.getLogger(__name__)


@dataclass
class CellHandle:
    """Mutable stand-in for a cell while it is being edited in place."""
    char: str
    fg: Color
    bg: Color


class FmtString:
    """
    An ordered sequence of FmtChar cells.

    The optimised ANSI serialization is cached. Every write through this
    class marks the cache dirty, and reading ``optimised`` (or ``str()``)
    rebuilds it first when needed. Because of that rebuild, reading the
    serialized form counts as a mutation for thread-safety purposes.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, cells: Iterable[FmtChar] | None = None):
        self._cells: list[FmtChar] = list(cells) if cells is not None else []
        self._cache = ""
        self._dirty = True

    # -- construction ---------------------------------------------------

    @classmethod
    def empty(cls) -> "FmtString":
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> "FmtString":
        """Create an empty string. ``capacity`` is only a sizing hint."""
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        return cls()

    @classmethod
    def from_plain_text(cls, text: str) -> "FmtString":
        """Every character gets the default foreground and background."""
        return cls.from_plain_text_with_color(text, Color.DEFAULT, Color.DEFAULT)

    @classmethod
    def from_plain_text_with_color(cls, text: str, fg: Color, bg: Color) -> "FmtString":
        """Every character gets the same ``fg`` and ``bg``."""
        return cls(FmtChar(ch, fg, bg) for ch in text)

    @classmethod
    def from_ansi_string(
        cls,
        text: str,
        *,
        strict: bool = False,
        reset_both_grounds: bool = False,
    ) -> "FmtString":
        """Parse ANSI-escaped text. See AnsiParser for the options."""
        from fmtstring.codec.ansi_parser import AnsiParser
        parser = AnsiParser(strict=strict, reset_both_grounds=reset_both_grounds)
        parser.feed(text)
        return parser.get_string()

    @classmethod
    def concat(cls, a: "FmtString", b: "FmtString") -> "FmtString":
        """Return a new string with ``a``'s cells followed by ``b``'s."""
        return cls([*a._cells, *b._cells])

    def __add__(self, other: object) -> "FmtString":
        if not isinstance(other, FmtString):
            return NotImplemented
        return FmtString.concat(self, other)

    # -- mutation -------------------------------------------------------

    def append(self, cell: FmtChar) -> None:
        self._cells.append(cell)
        self._dirty = True

    def extend(self, cells: Iterable[FmtChar]) -> None:
        self._cells.extend(cells)
        self._dirty = True

    def set(self, index: int, cell: FmtChar) -> None:
        """Replace the cell at ``index``."""
        self._check_index(index)
        self._cells[index] = cell
        self._dirty = True

    def recolor(self, index: int, fg: Color | None = None, bg: Color | None = None) -> None:
        """Change the colors of the cell at ``index``, leaving its character."""
        self._check_index(index)
        self._cells[index] = self._cells[index].with_colors(fg, bg)
        self._dirty = True

    @contextmanager
    def edit(self, index: int) -> Iterator[CellHandle]:
        """
        Edit the cell at ``index`` in place through a mutable handle.

        The string is marked dirty as soon as the handle is handed out, and
        the edited cell is written back when the block exits normally. If the
        block raises, the cell is left unchanged.
        """
        self._check_index(index)
        self._dirty = True
        cell = self._cells[index]
        handle = CellHandle(cell.char, cell.fg, cell.bg)
        yield handle
        self._cells[index] = FmtChar(handle.char, handle.fg, handle.bg)
        self._dirty = True

    def __setitem__(self, index: int, cell: FmtChar) -> None:
        self.set(index, cell)

    # -- reading --------------------------------------------------------

    def get(self, index: int) -> FmtChar:
        """Get the cell at ``index``."""
        self._check_index(index)
        return self._cells[index]

    def slice(self, start: int, end: int) -> tuple[FmtChar, ...]:
        """Read-only view of the cells in ``[start, end)``."""
        if start < 0 or end > len(self._cells) or start > end:
            raise OutOfRangeError((start, end), len(self._cells))
        return tuple(self._cells[start:end])

    def __getitem__(self, key: int | slice) -> FmtChar | tuple[FmtChar, ...]:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("FmtString slices do not support a step")
            start = 0 if key.start is None else key.start
            end = len(self._cells) if key.stop is None else key.stop
            return self.slice(start, end)
        return self.get(key)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[FmtChar]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FmtString):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"FmtString({self.plain_text!r}, cells={len(self._cells)})"

    @property
    def plain_text(self) -> str:
        """The characters without any color information."""
        return ''.join(cell.char for cell in self._cells)

    def display_width(self) -> int:
        return sum(cell.width() for cell in self._cells)

    # -- serialization --------------------------------------------------

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def to_optimised_string(self) -> str:
        """Serialize to minimal ANSI text. Pure; does not touch the cache."""
        from fmtstring.render.terminal import OptimisedRenderer
        return OptimisedRenderer().render(self)

    def ensure_clean(self) -> None:
        """Rebuild the cached serialization if any cell changed since the last build."""
        if self._dirty:
            logger.debug("Rebuilding serialization cache for %d cells", len(self._cells))
            self._cache = self.to_optimised_string()
            self._dirty = False

    @property
    def optimised(self) -> str:
        """The cached optimised serialization, rebuilt first if stale."""
        self.ensure_clean()
        return self._cache

    def __str__(self) -> str:
        return self.optimised

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise OutOfRangeError(index, len(self._cells))
