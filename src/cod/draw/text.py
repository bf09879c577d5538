"""Text and sprite blitting."""

from __future__ import annotations

from typing import Sequence, Union

from cod.core.color import Color
from cod.draw.shapes import colored
from cod.session import Session, resolve

# A sprite is either a multi-line string or a sequence of row strings
Sprite = Union[str, Sequence[str]]


def sprite_rows(sprite: Sprite) -> list[str]:
    """Split a sprite into rows. Rows keep their own lengths."""
    if isinstance(sprite, str):
        return sprite.split("\n")
    return list(sprite)


def blit(
    origin: tuple[int, int],
    sprite: Sprite,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """
    Draw a "texture" onto the screen, row by row.

    Row ``i`` is written verbatim starting at ``(origin.x, origin.y + i)``.
    Shorter rows are not padded. The color, if any, is applied for each row
    write and restored afterwards.
    """
    session = resolve(session)
    x, y = origin
    for i, row in enumerate(sprite_rows(sprite)):
        session.move_cursor((x, y + i))
        with colored(session, color):
            session.write(row)


def blit_transparent(
    origin: tuple[int, int],
    sprite: Sprite,
    blank: str,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """
    Draw a sprite, skipping over spaces.

    Spaces leave the cell underneath untouched; every ``blank`` character is
    drawn as an actual space.

    Example:
        >>> blit((0, 0), "foobar")
        >>> blit_transparent((0, 0), "t _  n", "_")   # screen now reads "to ban"
    """
    session = resolve(session)
    x, y = origin
    with colored(session, color):
        for i, row in enumerate(sprite_rows(sprite)):
            for j, char in enumerate(row):
                if char == " ":
                    continue
                session.pixel((x + j, y + i), " " if char == blank else char)


def text(
    origin: tuple[int, int],
    s: str,
    color: Color | None = None,
    *,
    session: Session | None = None,
) -> None:
    """Draw text (non-wrapping, but respects line breaks)."""
    session = resolve(session)
    x, y = origin
    with colored(session, color):
        for i, line in enumerate(s.split("\n")):
            if line:
                session.move_cursor((x, y + i))
                session.write(line)


def println(s: str = "", *, session: Session | None = None) -> None:
    """Print text, moving the cursor to the start of the next line."""
    resolve(session).println(s)
