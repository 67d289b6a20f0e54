"""Shared constants for terminal output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
CLEAR_SCREEN = f"{CSI}2J"
CURSOR_HOME = f"{CSI}H"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
ALTERNATE_SCREEN_ON = f"{CSI}?1049h"
ALTERNATE_SCREEN_OFF = f"{CSI}?1049l"

# Character codes
CODE_SPACE = 0x20
CODE_NEWLINE = 0x0A

# Block drawing characters
FULL_BLOCK = "█"
