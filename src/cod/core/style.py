"""Text attributes and the style state they are tracked in.

Bold and faint are mutually exclusive on some terminals, and ANSI only has
one code (SGR 22) to turn either of them off. There is no portable way to
disable *just* bold or *just* faint, so disabling one always clears both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cod.core.color import Color, ColorRole, to_sgr_params


class Attribute(Enum):
    """SGR text attributes as (enable code, disable code)."""
    BOLD = (1, 22)
    FAINT = (2, 22)
    ITALIC = (3, 23)
    UNDERLINE = (4, 24)
    BLINK = (5, 25)
    REVERSE = (7, 27)
    HIDDEN = (8, 28)
    STRIKETHROUGH = (9, 29)

    @property
    def on_code(self) -> int:
        return self.value[0]

    @property
    def off_code(self) -> int:
        return self.value[1]

    @property
    def is_weight(self) -> bool:
        """True for the bold/faint pair sharing the intensity reset."""
        return self in WEIGHT


WEIGHT = frozenset({Attribute.BOLD, Attribute.FAINT})


@dataclass
class StyleState:
    """
    Requested text style: active attributes plus foreground/background.

    This records what was *asked for*, not what the terminal renders. With
    both bold and faint on, the terminal decides what is shown.
    """
    attributes: set[Attribute] = field(default_factory=set)
    fg: Color | None = None
    bg: Color | None = None

    def enable(self, attr: Attribute) -> None:
        self.attributes.add(attr)

    def disable(self, attr: Attribute) -> None:
        """Clear an attribute; bold or faint clears the whole weight pair."""
        if attr.is_weight:
            self.attributes -= WEIGHT
        else:
            self.attributes.discard(attr)

    def get_color(self, role: ColorRole) -> Color | None:
        return self.fg if role is ColorRole.FOREGROUND else self.bg

    def set_color(self, color: Color | None, role: ColorRole) -> None:
        if role is ColorRole.FOREGROUND:
            self.fg = color
        else:
            self.bg = color

    def reset(self) -> None:
        self.attributes.clear()
        self.fg = None
        self.bg = None

    def snapshot(self) -> StyleState:
        """Return an independent copy of this state."""
        return StyleState(set(self.attributes), self.fg, self.bg)

    def is_default(self) -> bool:
        """Check if nothing is set (terminal defaults)."""
        return not self.attributes and self.fg is None and self.bg is None

    def restore_codes(self, target: StyleState) -> list[int | str]:
        """
        SGR parameters that take a terminal in this state to ``target``.

        Weight changes go through the shared reset (22) followed by
        re-enabling whatever the target still has on.
        """
        codes: list[int | str] = []

        current_weight = self.attributes & WEIGHT
        target_weight = target.attributes & WEIGHT
        if current_weight != target_weight:
            if current_weight:
                codes.append(Attribute.BOLD.off_code)
            for attr in (Attribute.BOLD, Attribute.FAINT):
                if attr in target_weight:
                    codes.append(attr.on_code)

        for attr in Attribute:
            if attr.is_weight:
                continue
            if attr in self.attributes and attr not in target.attributes:
                codes.append(attr.off_code)
            elif attr in target.attributes and attr not in self.attributes:
                codes.append(attr.on_code)

        if self.fg != target.fg:
            codes.append(to_sgr_params(target.fg, ColorRole.FOREGROUND))
        if self.bg != target.bg:
            codes.append(to_sgr_params(target.bg, ColorRole.BACKGROUND))
        return codes
