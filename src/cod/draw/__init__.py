"""Immediate-mode drawing primitives."""

from cod.draw.geometry import Point, line_cells
from cod.draw.shapes import (
    DOUBLE,
    SINGLE,
    BoxChars,
    box,
    clear_rect,
    fill_rect,
    line,
    pixel,
    rectangle,
    triangle,
)
from cod.draw.text import blit, blit_transparent, println

__all__ = [
    "Point",
    "line_cells",
    "BoxChars",
    "SINGLE",
    "DOUBLE",
    "pixel",
    "line",
    "rectangle",
    "box",
    "fill_rect",
    "clear_rect",
    "triangle",
    "blit",
    "blit_transparent",
    "println",
]
