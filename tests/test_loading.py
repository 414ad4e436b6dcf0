"""Tests for loading and saving ANSI text files."""

from pathlib import Path

import pytest

import fmtstring
from fmtstring.core.color import Color


class TestLoad:
    """Test load()."""

    def test_load(self, write_ansi, banner: str) -> None:
        path = write_ansi(banner)
        s = fmtstring.load(path)
        assert s == fmtstring.FmtString.from_ansi_string(banner)
        assert s[0].fg == Color.from_rgb(255, 255, 0)

    def test_load_accepts_str_path(self, write_ansi) -> None:
        path = write_ansi("plain")
        assert fmtstring.load(str(path)).plain_text == "plain"

    def test_load_strict(self, write_ansi) -> None:
        path = write_ansi("abc\x1b[38;2")
        assert fmtstring.load(path).plain_text == "abc"
        with pytest.raises(fmtstring.TruncatedEscapeSequenceError):
            fmtstring.load(path, strict=True)

    def test_load_malformed(self, write_ansi) -> None:
        path = write_ansi("\x1b[38;2;1;2;256mX")
        with pytest.raises(fmtstring.MalformedColorFieldError):
            fmtstring.load(path)

    def test_load_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            fmtstring.load(tmp_path / "missing.ans")


class TestSave:
    """Test save()."""

    def test_round_trip(self, tmp_path: Path, banner: str) -> None:
        original = fmtstring.FmtString.from_ansi_string(banner)
        path = tmp_path / "out.ans"
        written = fmtstring.save(original, path)
        assert written == path.stat().st_size
        assert path.read_text(encoding="utf-8") == original.optimised
        assert fmtstring.load(path) == original

    def test_reset_at_end(self, tmp_path: Path) -> None:
        s = fmtstring.FmtString.from_plain_text_with_color("hi", Color.RED, Color.DEFAULT)
        path = tmp_path / "out.ans"
        fmtstring.save(s, path, reset_at_end=True)
        assert path.read_bytes() == b"\x1b[31mhi\x1b[0m"
