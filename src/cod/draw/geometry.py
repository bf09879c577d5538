"""Cell geometry: points, line rasterization and rectangle cells."""

from __future__ import annotations

from typing import Iterator, NamedTuple


class Point(NamedTuple):
    """A terminal cell, 0-indexed, origin at the top left."""
    x: int
    y: int


def line_cells(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    """
    Rasterize a line with Bresenham's algorithm.

    Yields every cell from (x1, y1) to (x2, y2) inclusive, each exactly
    once and in order from the first endpoint. The axis with the larger
    absolute delta advances on every step.
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x2 >= x1 else -1
    sy = 1 if y2 >= y1 else -1

    x, y = x1, y1
    if dx >= dy:
        err = 2 * dy - dx
        for _ in range(dx + 1):
            yield Point(x, y)
            if err > 0:
                y += sy
                err -= 2 * dx
            err += 2 * dy
            x += sx
    else:
        err = 2 * dx - dy
        for _ in range(dy + 1):
            yield Point(x, y)
            if err > 0:
                x += sx
                err -= 2 * dy
            err += 2 * dx
            y += sy


def border_cells(x: int, y: int, width: int, height: int) -> Iterator[Point]:
    """
    Yield the border cells of a rectangle, each exactly once.

    Order: top row, bottom row, then the left and right columns between
    them. Zero width or height yields nothing.
    """
    if width <= 0 or height <= 0:
        return
    right = x + width - 1
    bottom = y + height - 1

    yield from line_cells(x, y, right, y)
    if height > 1:
        yield from line_cells(x, bottom, right, bottom)
    for row in range(y + 1, bottom):
        yield Point(x, row)
        if width > 1:
            yield Point(right, row)


def interior_rows(x: int, y: int, width: int, height: int) -> Iterator[tuple[Point, int]]:
    """Yield (row start, run length) for cells strictly inside a rectangle."""
    inner = width - 2
    if inner <= 0:
        return
    for row in range(y + 1, y + height - 1):
        yield Point(x + 1, row), inner
