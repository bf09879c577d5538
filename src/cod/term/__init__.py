"""Terminal utilities and optional keyboard input.

``read_key`` and ``read_line`` are exported only where ``INPUT_AVAILABLE``
is true (termios present).
"""

from cod.term.terminal import CursorStyle, Terminal, TerminalSize
from cod.term.input import (
    INPUT_AVAILABLE,
    InputReader,
    InputUnavailableError,
    Key,
    KeyEvent,
)

__all__ = [
    "CursorStyle",
    "Terminal",
    "TerminalSize",
    "INPUT_AVAILABLE",
    "InputReader",
    "InputUnavailableError",
    "Key",
    "KeyEvent",
]

if INPUT_AVAILABLE:
    from cod.term.input import read_key, read_line

    __all__ += ["read_key", "read_line"]
