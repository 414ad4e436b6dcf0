"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest

# Red "R" on the default background, then a default "G"
RED_R_THEN_G = "\x1b[38;2;255;0;0mR\x1b[0mG"

# A short two-line banner using true color on both grounds
BANNER = (
    "\x1b[38;2;255;255;0m\x1b[48;2;0;0;128mHello\x1b[0m, "
    "\x1b[38;2;0;255;0mworld\x1b[0m!\n"
    "\x1b[48;2;40;40;40m   \x1b[49m done"
)


@pytest.fixture
def banner() -> str:
    return BANNER


@pytest.fixture
def write_ansi(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing text (or bytes) into a file under tmp_path."""

    def _write(content: str | bytes, name: str = "sample.ans") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write
