"""Tests for the ANSI parser."""

import logging

import pytest

from fmtstring.codec.ansi_parser import AnsiParser
from fmtstring.core.cell import FmtChar
from fmtstring.core.color import Color
from fmtstring.core.fmt_string import FmtString
from fmtstring.errors import MalformedColorFieldError, TruncatedEscapeSequenceError

from conftest import RED_R_THEN_G

RED = Color.from_rgb(255, 0, 0)


def parse(text: str, **kwargs) -> FmtString:
    return FmtString.from_ansi_string(text, **kwargs)


class TestColorSequences:
    """Recognized SGR color forms."""

    def test_truecolor_then_reset(self) -> None:
        s = parse(RED_R_THEN_G)
        assert len(s) == 2
        assert s[0] == FmtChar('R', RED, Color.DEFAULT)
        assert s[1] == FmtChar('G', Color.DEFAULT, Color.DEFAULT)

    def test_background(self) -> None:
        s = parse("\x1b[48;2;0;0;128mX")
        assert s[0].bg == Color.from_rgb(0, 0, 128)
        assert s[0].fg == Color.DEFAULT

    def test_color_applies_forward(self) -> None:
        s = parse("\x1b[38;2;1;2;3mabc")
        assert [cell.fg for cell in s] == [Color.from_rgb(1, 2, 3)] * 3

    def test_mode_marker_not_validated(self) -> None:
        s = parse("\x1b[38;9;1;2;3mX")
        assert s[0].fg == Color.from_rgb(1, 2, 3)

    def test_bare_reset(self) -> None:
        s = parse("\x1b[38;2;1;2;3m\x1b[mX")
        assert s[0].is_default()

    def test_fg_reset_only_resets_foreground(self) -> None:
        s = parse("\x1b[38;2;1;2;3m\x1b[48;2;4;5;6m\x1b[39mX")
        assert s[0] == FmtChar('X', Color.DEFAULT, Color.from_rgb(4, 5, 6))

    def test_bg_reset_only_resets_background(self) -> None:
        s = parse("\x1b[38;2;1;2;3m\x1b[48;2;4;5;6m\x1b[49mX")
        assert s[0] == FmtChar('X', Color.from_rgb(1, 2, 3), Color.DEFAULT)

    def test_reset_both_grounds(self) -> None:
        for code in ("39", "49"):
            s = parse(f"\x1b[38;2;1;2;3m\x1b[48;2;4;5;6m\x1b[{code}mX", reset_both_grounds=True)
            assert s[0].is_default()

    def test_named_colors(self) -> None:
        s = parse("\x1b[31m\x1b[42mX\x1b[91m\x1b[104mY")
        assert s[0] == FmtChar('X', Color.RED, Color.GREEN)
        assert s[1] == FmtChar('Y', Color.BRIGHT_RED, Color.BRIGHT_BLUE)


class TestCompoundSequences:
    """SGR bodies holding several parameters."""

    def test_reset_then_color(self) -> None:
        s = parse("\x1b[31mA\x1b[0;32mB")
        assert s[0].fg == Color.RED
        assert s[1] == FmtChar('B', Color.GREEN, Color.DEFAULT)

    def test_fg_and_bg_truecolor(self) -> None:
        s = parse("\x1b[38;2;1;2;3;48;2;4;5;6mX")
        assert s[0] == FmtChar('X', Color.from_rgb(1, 2, 3), Color.from_rgb(4, 5, 6))

    def test_named_pair(self) -> None:
        s = parse("\x1b[91;44mX")
        assert s[0] == FmtChar('X', Color.BRIGHT_RED, Color.BLUE)

    def test_unsupported_parameters_skipped(self) -> None:
        s = parse("\x1b[1;38;2;1;2;3;4mX")
        assert s[0].fg == Color.from_rgb(1, 2, 3)

    def test_256_color_group_consumed(self) -> None:
        s = parse("\x1b[38;5;196;42mX")
        assert s[0] == FmtChar('X', Color.DEFAULT, Color.GREEN)

    def test_empty_parameter_is_reset(self) -> None:
        s = parse("\x1b[31;42m\x1b[;33mX")
        assert s[0] == FmtChar('X', Color.YELLOW, Color.DEFAULT)

    def test_short_group_after_other_codes(self) -> None:
        with pytest.raises(MalformedColorFieldError) as exc_info:
            parse("\x1b[0;48;2;1;2mX")
        assert exc_info.value.field == "selector"


class TestUnsupportedSequences:
    """Sequences outside the supported subset are skipped."""

    def test_cursor_movement_skipped(self) -> None:
        s = parse("\x1b[2J\x1b[10;20HA")
        assert s.plain_text == "A"

    def test_other_sgr_ignored(self) -> None:
        s = parse("\x1b[38;2;1;2;3m\x1b[1mA")
        assert s[0].fg == Color.from_rgb(1, 2, 3)

    def test_256_color_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="fmtstring"):
            s = parse("\x1b[38;5;196mA")
        assert s[0].is_default()
        assert "256-color" in caplog.text

    def test_non_csi_escape_skipped(self) -> None:
        s = parse("\x1bcA")
        assert s.plain_text == "A"

    def test_broken_csi_resumes_at_offending_char(self) -> None:
        s = parse("\x1b[12\nA")
        assert s.plain_text == "\nA"


class TestMalformedFields:
    """Malformed numerals fail the whole parse."""

    @pytest.mark.parametrize(
        "text, field",
        [
            ("\x1b[38;2;256;0;0mX", "red"),
            ("\x1b[38;2;0;999;0mX", "green"),
            ("\x1b[48;2;0;0;mX", "blue"),
            ("\x1b[38;2;1;2mX", "selector"),
            ("\x1b[?25mX", "selector"),
        ],
    )
    def test_malformed(self, text: str, field: str) -> None:
        with pytest.raises(MalformedColorFieldError) as exc_info:
            parse(text)
        assert exc_info.value.field == field
        assert exc_info.value.offset == 0

    @pytest.mark.parametrize(
        "text, field",
        [
            ("\x1b[" + "9" * 5000 + "mX", "selector"),
            ("\x1b[38;2;" + "1" * 5000 + ";0;0mX", "red"),
            ("\x1b[31;" + "4" * 10 + "mX", "selector"),
        ],
    )
    def test_overlong_numeral(self, text: str, field: str) -> None:
        with pytest.raises(MalformedColorFieldError) as exc_info:
            parse(text)
        assert exc_info.value.field == field

    def test_leading_zeros_accepted(self) -> None:
        s = parse("\x1b[38;2;0000255;0;0mX")
        assert s[0].fg == Color.from_rgb(255, 0, 0)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse("ok\x1b[38;2;1;2;300m")


class TestTruncation:
    """Input ending inside an escape sequence."""

    @pytest.mark.parametrize("text", ["ab\x1b", "ab\x1b[", "ab\x1b[38;2;1"])
    def test_lenient_drops_fragment(self, text: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="fmtstring"):
            s = parse(text)
        assert s.plain_text == "ab"
        assert "truncated" in caplog.text

    @pytest.mark.parametrize("text", ["ab\x1b", "ab\x1b[38;2;1"])
    def test_strict_raises(self, text: str) -> None:
        with pytest.raises(TruncatedEscapeSequenceError) as exc_info:
            parse(text, strict=True)
        assert exc_info.value.offset == 2

    def test_strict_accepts_complete_input(self) -> None:
        assert parse(RED_R_THEN_G, strict=True).plain_text == "RG"


class TestAnsiParser:
    """Parser object behavior."""

    def test_state_carries_across_feeds(self) -> None:
        parser = AnsiParser()
        parser.feed("\x1b[38;2;1;2;3ma")
        parser.feed("b")
        s = parser.get_string()
        assert s[1].fg == Color.from_rgb(1, 2, 3)
        assert parser.fg == Color.from_rgb(1, 2, 3)

    def test_feed_bytes(self) -> None:
        parser = AnsiParser()
        parser.feed_bytes("\x1b[48;2;9;9;9m▒".encode("utf-8"))
        s = parser.get_string()
        assert s[0] == FmtChar('▒', Color.DEFAULT, Color.from_rgb(9, 9, 9))

    def test_get_string_is_a_copy(self) -> None:
        parser = AnsiParser()
        parser.feed("a")
        first = parser.get_string()
        parser.feed("b")
        assert len(first) == 1
        assert len(parser.get_string()) == 2
