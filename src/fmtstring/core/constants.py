"""Escape sequence constants."""

ESC = '\x1b'
CSI = ESC + '['
RESET = CSI + '0m'

# CSI grammar byte ranges (ECMA-48)
PARAM_BYTES = range(0x30, 0x40)
INTERMEDIATE_BYTES = range(0x20, 0x30)
FINAL_BYTES = range(0x40, 0x7F)

# SGR selectors understood by the parser
SGR_RESET = 0
SGR_FG_EXTENDED = 38
SGR_FG_DEFAULT = 39
SGR_BG_EXTENDED = 48
SGR_BG_DEFAULT = 49
SGR_MODE_TRUE_COLOR = 2
SGR_MODE_256 = 5

# Longest numeral (ignoring leading zeros) accepted in an SGR field
MAX_FIELD_DIGITS = 3

# Names of the 16-color palette, by index
PALETTE_NAMES = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)
