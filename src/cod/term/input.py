"""Keyboard input: single keys and whole lines.

Input is optional. It needs a POSIX terminal (termios + select). Without
termios, :mod:`cod.term` does not export :func:`read_key` and
:func:`read_line`; called directly from this module they raise
:class:`InputUnavailableError`, as they do when stdin is not a terminal.
Nothing in the drawing code calls into this module.
"""

from __future__ import annotations

import importlib.util
import logging
import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cod.session import Session, resolve
from cod.term.terminal import Terminal

logger = logging.getLogger(__name__)

INPUT_AVAILABLE = importlib.util.find_spec("termios") is not None


class InputUnavailableError(RuntimeError):
    """Raised when keyboard input cannot be read on this platform or stream."""


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    INTERRUPT = auto()
    END_OF_INPUT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


class InputReader:
    """
    Keyboard input reader on a file descriptor.

    Uses os.read() to bypass Python's I/O buffering and handles escape
    sequences that arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        '[2~': Key.INSERT,
        '[3~': Key.DELETE,
        # Function keys
        'OP': Key.F1,
        'OQ': Key.F2,
        'OR': Key.F3,
        'OS': Key.F4,
        '[15~': Key.F5,
        '[17~': Key.F6,
        '[18~': Key.F7,
        '[19~': Key.F8,
        '[20~': Key.F9,
        '[21~': Key.F10,
        '[23~': Key.F11,
        '[24~': Key.F12,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
        # Raw mode turns off ISIG, so Ctrl-C and Ctrl-D arrive as bytes
        '\x03': Key.INTERRUPT,
        '\x04': Key.END_OF_INPUT,
    }

    def __init__(self, fd: int | None = None, escape_timeout: float = 0.1) -> None:
        self._buffer = ""
        self._fd = fd if fd is not None else sys.stdin.fileno()
        self.escape_timeout = escape_timeout

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_blocking(self) -> KeyEvent:
        """Read a key event, blocking until input is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _read_chunk(self) -> None:
        data = os.read(self._fd, 1024)
        if not data:
            raise EOFError("input stream closed")
        self._buffer += data.decode('utf-8', errors='replace')

    def _read_available(self) -> None:
        """Read all currently available input into buffer."""
        self._read_chunk()

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for an escape sequence to complete."""
        deadline = time.monotonic() + self.escape_timeout

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            if not self._has_input(min(remaining, 0.025)):
                continue
            self._read_chunk()

            rest = self._buffer[1:]
            if rest[:1] not in ('[', 'O'):
                return
            # Sequence ends with letter or ~
            if len(rest) > 1 and (rest[-1].isalpha() or rest[-1] == '~'):
                return

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        if not self._buffer:
            return None

        # Simple keys
        if self._buffer[0] in self.SIMPLE_KEYS:
            raw = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[raw], raw=raw)

        # Escape sequence
        if self._buffer[0] == '\x1b':
            return self._parse_escape_sequence()

        # Printable character
        if self._buffer[0].isprintable():
            ch = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        logger.debug("Skipping control character %r", self._buffer[0])
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]

        # CSI and SS3 introducers are part of the sequence, not terminators
        start = 1 if rest[:1] in ('[', 'O') else 0

        # Find where this sequence ends
        end_idx = len(rest)
        for i in range(start, len(rest)):
            ch = rest[i]
            if ch == '\x1b':
                # Start of next escape sequence
                end_idx = i
                break
            if ch.isalpha() or ch == '~':
                end_idx = i + 1
                break

        if end_idx == 0:
            # Just escape, no sequence
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        self._buffer = rest[end_idx:]
        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw='\x1b' + seq)

        logger.debug("Unknown escape sequence %r", seq)
        return KeyEvent(raw='\x1b' + seq)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout. Errors from select propagate."""
        ready, _, _ = select.select([self._fd], [], [], timeout)
        return bool(ready)


def collect_line(reader: InputReader, echo: Session | None = None) -> str:
    """
    Read key events up to Enter and return the typed text.

    Backspace removes the last character. When ``echo`` is given, typed
    characters (and erasures) are written to it as they happen.

    Ctrl-C raises :class:`KeyboardInterrupt`. Ctrl-D on an empty line
    raises :class:`EOFError` and is ignored otherwise.
    """
    chars: list[str] = []
    while True:
        event = reader.read_blocking()
        if event.key is Key.ENTER:
            break
        if event.key is Key.INTERRUPT:
            raise KeyboardInterrupt
        if event.key is Key.END_OF_INPUT:
            if not chars:
                raise EOFError("end of input")
            continue
        if event.key is Key.BACKSPACE:
            if chars:
                chars.pop()
                if echo is not None:
                    echo.writer.left(1)
                    echo.write(" ")
                    echo.writer.left(1)
                    echo.flush()
            continue
        if event.is_char:
            assert event.char is not None
            chars.append(event.char)
            if echo is not None:
                echo.write(event.char)
                echo.flush()
    return "".join(chars)


def _require_terminal() -> None:
    if not INPUT_AVAILABLE:
        raise InputUnavailableError("keyboard input requires a POSIX terminal (termios)")
    if not sys.stdin.isatty():
        raise InputUnavailableError("stdin is not a terminal")


def read_key() -> KeyEvent:
    """Read a single key from stdin, blocking until one arrives. Ctrl-C raises KeyboardInterrupt."""
    _require_terminal()
    with Terminal.raw_mode():
        event = InputReader().read_blocking()
    if event.key is Key.INTERRUPT:
        raise KeyboardInterrupt
    return event


def read_line(echo: bool = True, *, session: Session | None = None) -> str:
    """Read a line from stdin, echoing typed characters by default."""
    _require_terminal()
    target = resolve(session) if echo else None
    with Terminal.raw_mode():
        line = collect_line(InputReader(), target)
    if target is not None:
        target.println()
        target.flush()
    return line
