"""Shared constants for ANSI terminal drawing."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["

# SGR parameters
SGR_RESET = 0
SGR_DEFAULT_FG = 39
SGR_DEFAULT_BG = 49
SGR_FG_EXTENDED = 38
SGR_BG_EXTENDED = 48
SGR_MODE_256 = 5
SGR_MODE_RGB = 2

# Row used by "bottom of screen"; terminals clamp it to the last row
BOTTOM_ROW = 9998

# Fallback when the terminal size cannot be queried (cols, rows)
FALLBACK_SIZE = (80, 24)

# Box drawing characters
BOX_SINGLE = {
    "horizontal": "\u2500",    # ─
    "vertical": "\u2502",      # │
    "top_left": "\u250C",      # ┌
    "top_right": "\u2510",     # ┐
    "bottom_left": "\u2514",   # └
    "bottom_right": "\u2518",  # ┘
}

BOX_DOUBLE = {
    "horizontal": "\u2550",    # ═
    "vertical": "\u2551",      # ║
    "top_left": "\u2554",      # ╔
    "top_right": "\u2557",     # ╗
    "bottom_left": "\u255A",   # ╚
    "bottom_right": "\u255D",  # ╝
}
