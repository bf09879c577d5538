"""
cod: a small library for command-line drawing

Draw shapes, text and colors straight to the terminal with ANSI escapes.

Quick Start:
    >>> import cod
    >>> from cod import Color
    >>> session = cod.default_session()
    >>> with session.reset_guard():
    ...     session.clear_screen()
    ...     cod.rectangle((0, 0), 20, 6, "#", color=Color.CYAN)
    ...     with session.bold():
    ...         cod.text((2, 2), "Hello, terminal!")
    >>> cod.flush()

Features:
    - 8-bit indexed and 24-bit true colors
    - Text attributes with scoped (guaranteed) cleanup
    - Lines, rectangles, boxes, triangles
    - Text and sprite blitting
    - Terminal size, cursor style, alternate screen, raw mode
    - Optional single-key and line input
"""

__version__ = "0.1.0"

# Core types
from cod.core.color import Color, ColorMode, ColorRole, indexed, rgb, to_sgr_params
from cod.core.style import Attribute, StyleState
from cod.core.writer import EscapeWriter

# Sessions
from cod.session import Session, default_session, set_default_session

# Drawing
from cod.draw.geometry import Point
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
from cod.draw.text import blit, blit_transparent, println, text


def flush() -> None:
    """Flush the default session's stream."""
    default_session().flush()


def normal() -> None:
    """Disable all style and color attributes on the default session."""
    default_session().reset_all()


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "ColorRole",
    "indexed",
    "rgb",
    "to_sgr_params",
    "Attribute",
    "StyleState",
    "EscapeWriter",
    # Sessions
    "Session",
    "default_session",
    "set_default_session",
    "flush",
    "normal",
    # Drawing
    "Point",
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
    "text",
    "println",
]
