# homestead/config/config_display.py
"""
Inline format codes used in command responses.
The host renderer maps each code to a color; plain consumers can strip them.
"""

FORMAT_RED = "[[RED]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_GRAY = "[[GRAY]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
FORMAT_TITLE = FORMAT_YELLOW
FORMAT_HIGHLIGHT = FORMAT_CYAN
FORMAT_SUCCESS = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN

COLOR_DEFAULT = (255, 255, 255)
DEFAULT_COLORS = {
    FORMAT_RED: (255, 80, 80),
    FORMAT_GREEN: (80, 220, 80),
    FORMAT_YELLOW: (255, 220, 0),
    FORMAT_CYAN: (0, 220, 220),
    FORMAT_GRAY: (170, 170, 170),
    FORMAT_RESET: COLOR_DEFAULT,
}

# --- Help Output ---
HELP_MAX_COMMANDS_PER_CATEGORY = 6

# --- Host Window Colors ---
TEXT_COLOR = (255, 255, 255)
BG_COLOR = (0, 0, 0)
INPUT_BG_COLOR = (50, 50, 50)
STATUS_BG_COLOR = (30, 30, 35)
FONT_FAMILY = "helvetica"
COMMAND_HISTORY_SIZE = 50
