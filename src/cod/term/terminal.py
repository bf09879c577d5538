"""Terminal-level operations: size, cursor style, screens and raw mode."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Iterator

from cod.core.constants import CSI, FALLBACK_SIZE

if TYPE_CHECKING:
    from cod.session import Session


def _emit(code: str, session: Session | None) -> None:
    """Write ESC [ code and flush, to ``session`` or straight to stdout."""
    if session is None:
        sys.stdout.write(f"{CSI}{code}")
        sys.stdout.flush()
    else:
        session.writer.escape(code)
        session.flush()


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    cols: int
    rows: int


class CursorStyle(IntEnum):
    """Cursor shapes understood by DECSCUSR (ESC [ n SP q)."""
    DEFAULT_USER_SHAPE = 0
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERSCORE = 3
    STEADY_UNDERSCORE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6


class Terminal:
    """Terminal I/O helpers. Sequences go to stdout unless a session is given."""

    @staticmethod
    def size() -> TerminalSize | None:
        """Get current terminal dimensions, or None when not a terminal."""
        try:
            size = os.get_terminal_size(sys.stdout.fileno())
        except (OSError, ValueError, AttributeError):
            return None
        return TerminalSize(size.columns, size.lines)

    @staticmethod
    def size_or(default: TerminalSize | None = None) -> TerminalSize:
        """Get terminal dimensions, falling back to 80x24 (or ``default``)."""
        size = Terminal.size()
        if size is not None:
            return size
        return default or TerminalSize(*FALLBACK_SIZE)

    @staticmethod
    def set_cursor_style(style: CursorStyle, session: Session | None = None) -> None:
        """Change the cursor shape."""
        _emit(f"{int(style)} q", session)

    @staticmethod
    def hide_cursor(session: Session | None = None) -> None:
        """Hide the cursor."""
        _emit("?25l", session)

    @staticmethod
    def show_cursor(session: Session | None = None) -> None:
        """Show the cursor."""
        _emit("?25h", session)

    @staticmethod
    def secondary_screen(session: Session | None = None) -> None:
        """Switch to the secondary screen. Use primary_screen() to swap back."""
        _emit("?1049h", session)

    @staticmethod
    def primary_screen(session: Session | None = None) -> None:
        """Switch to the primary (default) screen."""
        _emit("?1049l", session)

    @staticmethod
    @contextmanager
    def alternate_screen(session: Session | None = None) -> Iterator[None]:
        """Use the secondary screen buffer (preserves scrollback)."""
        Terminal.secondary_screen(session)
        try:
            yield
        finally:
            Terminal.primary_screen(session)

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

