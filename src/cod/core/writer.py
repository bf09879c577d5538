"""Low-level escape sequence emitter."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from cod.core.constants import BOTTOM_ROW, CSI


class EscapeWriter:
    """
    Writes cursor movement, clearing and SGR sequences to a text stream.

    Positions are 0-indexed (x = column, y = row) and converted to the
    1-indexed form terminals expect. Nothing is flushed automatically;
    call :meth:`flush` when output must become visible. Write errors from
    the stream propagate to the caller unchanged.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write_raw(self, text: str) -> None:
        """Write text to the stream verbatim."""
        self.stream.write(text)

    def escape(self, code: str) -> None:
        """Write a CSI sequence: ESC [ code."""
        self.stream.write(f"{CSI}{code}")

    def sgr(self, params: Iterable[int | str]) -> None:
        """Write a Select Graphic Rendition sequence."""
        joined = ";".join(str(p) for p in params)
        if joined:
            self.escape(f"{joined}m")

    def move_cursor(self, x: int, y: int) -> None:
        """Move cursor to column x, row y (0-indexed)."""
        self.escape(f"{y + 1};{x + 1}H")

    def pixel(self, char: str, x: int, y: int) -> None:
        """Draw a single character at (x, y)."""
        self.stream.write(f"{CSI}{y + 1};{x + 1}H{char}")

    def clear_screen(self) -> None:
        """Clear the screen (full clear, not scroll)."""
        self.escape("2J")

    def clear_line(self) -> None:
        """Clear the current line."""
        self.escape("2K")

    def up(self, n: int = 1) -> None:
        if n:
            self.escape(f"{n}A")

    def down(self, n: int = 1) -> None:
        if n:
            self.escape(f"{n}B")

    def right(self, n: int = 1) -> None:
        if n:
            self.escape(f"{n}C")

    def left(self, n: int = 1) -> None:
        if n:
            self.escape(f"{n}D")

    def home(self) -> None:
        """Move the cursor to the top left of the screen."""
        self.move_cursor(0, 0)

    def bottom(self) -> None:
        """Move the cursor to the bottom left of the screen."""
        self.move_cursor(0, BOTTOM_ROW)

    def line_start(self) -> None:
        """Move the cursor to the start of the current line."""
        self.escape("G")

    def flush(self) -> None:
        self.stream.flush()
