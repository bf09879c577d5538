"""Core building blocks: colors, attributes, style state and the escape writer."""

from cod.core.color import Color, ColorMode, ColorRole, indexed, rgb, to_sgr_params
from cod.core.style import Attribute, StyleState
from cod.core.writer import EscapeWriter

__all__ = [
    "Color",
    "ColorMode",
    "ColorRole",
    "indexed",
    "rgb",
    "to_sgr_params",
    "Attribute",
    "StyleState",
    "EscapeWriter",
]
