"""Shape rendering: pixels, lines, rectangles, boxes and triangles.

Every function emits its cursor moves and characters immediately; nothing
is retained. Coordinates are neither clamped nor validated, so writes
past the visible area go to the terminal unmodified.

Each function takes an optional ``session``; without one the process-wide
default session (stdout) is used. A ``color`` applies to the foreground for
the duration of the call only.
"""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import ContextManager

from cod.core.color import Color
from cod.core.constants import BOX_DOUBLE, BOX_SINGLE
from cod.draw.geometry import border_cells, interior_rows, line_cells
from cod.session import Session, resolve


@dataclass(frozen=True)
class BoxChars:
    """Characters used to draw a box border."""
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    @classmethod
    def uniform(cls, horizontal: str, vertical: str, corner: str) -> "BoxChars":
        """Use the same character on all four corners."""
        return cls(horizontal, vertical, corner, corner, corner, corner)


SINGLE = BoxChars(**BOX_SINGLE)
DOUBLE = BoxChars(**BOX_DOUBLE)


def colored(session: Session, color: Color | None) -> ContextManager[object]:
    """Scope a foreground color, or do nothing when no color is given."""
    if color is None:
        return nullcontext()
    return session.fg(color)


def pixel(
    pos: tuple[int, int],
    char: str,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """Draw a single character."""
    session = resolve(session)
    with colored(session, color):
        session.pixel(pos, char)


def line(
    start: tuple[int, int],
    end: tuple[int, int],
    char: str,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """Draw a line of ``char`` from ``start`` to ``end`` (inclusive)."""
    session = resolve(session)
    with colored(session, color):
        for cell in line_cells(*start, *end):
            session.pixel(cell, char)


def rectangle(
    origin: tuple[int, int],
    width: int,
    height: int,
    border_char: str,
    fill_char: str | None = None,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """
    Draw a rectangle outline, optionally filling its interior.

    Border cells are written once each; the interior (cells strictly inside
    the border) is written one run per row. Zero width or height draws
    nothing.
    """
    session = resolve(session)
    x, y = origin
    with colored(session, color):
        for cell in border_cells(x, y, width, height):
            session.pixel(cell, border_char)
        if fill_char is not None:
            for start, length in interior_rows(x, y, width, height):
                session.move_cursor(start)
                session.write(fill_char * length)


def box(
    origin: tuple[int, int],
    width: int,
    height: int,
    chars: BoxChars = DOUBLE,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """Draw a rectangle with box-drawing characters."""
    if width <= 0 or height <= 0:
        return
    session = resolve(session)
    x, y = origin
    right = x + width - 1
    bottom = y + height - 1
    with colored(session, color):
        if width > 2:
            for edge in sorted({y, bottom}):
                session.move_cursor((x + 1, edge))
                session.write(chars.horizontal * (width - 2))
        for row in range(y + 1, bottom):
            session.pixel((x, row), chars.vertical)
            if right != x:
                session.pixel((right, row), chars.vertical)

        session.pixel((x, y), chars.top_left)
        session.pixel((right, y), chars.top_right)
        session.pixel((x, bottom), chars.bottom_left)
        session.pixel((right, bottom), chars.bottom_right)


def fill_rect(
    origin: tuple[int, int],
    width: int,
    height: int,
    char: str,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """Fill a whole rectangle, border included, with ``char``."""
    if width <= 0 or height <= 0:
        return
    session = resolve(session)
    x, y = origin
    with colored(session, color):
        for row in range(y, y + height):
            session.move_cursor((x, row))
            session.write(char * width)


def clear_rect(
    origin: tuple[int, int],
    width: int,
    height: int,
    *,
    session: Session | None = None,
) -> None:
    """Clear a portion of the screen. Uses the current background color."""
    fill_rect(origin, width, height, " ", session=session)


def triangle(
    v1: tuple[int, int],
    v2: tuple[int, int],
    v3: tuple[int, int],
    char: str,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """Draw a triangle outline. The interior is not filled."""
    session = resolve(session)
    with colored(session, color):
        line(v1, v2, char, session=session)
        line(v2, v3, char, session=session)
        line(v1, v3, char, session=session)

