"""Drawing sessions: one output stream plus the style state written to it.

A :class:`Session` is the single owner of "current style" for its stream.
Every styling call updates the session's :class:`StyleState` and emits the
matching SGR sequence immediately.

Scoped styling is the only way to get guaranteed cleanup:

    >>> session = Session()
    >>> session.enable(Attribute.ITALIC)
    >>> with session.bold():
    ...     session.write("italic and bold")
    >>> session.write(", just italic")

Sessions are not thread-safe; one logical writer per terminal is assumed.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, ContextManager, Iterator, TextIO, TypeVar, Union

from cod.core.color import Color, ColorRole, to_sgr_params
from cod.core.constants import SGR_RESET
from cod.core.style import Attribute, StyleState
from cod.core.writer import EscapeWriter

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Something a scope can apply: an attribute, a color, or None (default color)
StyleItem = Union[Attribute, Color, None]


class Session:
    """An output stream together with the style state requested on it."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.writer = EscapeWriter(stream)
        self.state = StyleState()
        self._color_stacks: dict[ColorRole, list[Color]] = {role: [] for role in ColorRole}

    @property
    def stream(self) -> TextIO:
        return self.writer.stream

    # -- style state -------------------------------------------------------

    def enable(self, attr: Attribute) -> None:
        """Turn an attribute on."""
        self.state.enable(attr)
        self.writer.sgr([attr.on_code])

    def disable(self, attr: Attribute) -> None:
        """
        Turn an attribute off.

        Bold and faint share one reset code, so disabling either clears both.
        """
        self.state.disable(attr)
        self.writer.sgr([attr.off_code])

    def set_color(self, color: Color | None, role: ColorRole = ColorRole.FOREGROUND) -> None:
        """Set the foreground or background color (None = terminal default)."""
        self.state.set_color(color, role)
        self.writer.sgr([to_sgr_params(color, role)])

    def set_fg(self, color: Color | None) -> None:
        self.set_color(color, ColorRole.FOREGROUND)

    def set_bg(self, color: Color | None) -> None:
        self.set_color(color, ColorRole.BACKGROUND)

    def reset_color(self, role: ColorRole | None = None) -> None:
        """Reset one color role, or both when ``role`` is None."""
        roles = [role] if role is not None else [ColorRole.FOREGROUND, ColorRole.BACKGROUND]
        for r in roles:
            self.set_color(None, r)

    def push_color(self, color: Color, role: ColorRole = ColorRole.FOREGROUND) -> None:
        """Set a color and remember it on that role's color stack."""
        self._color_stacks[role].append(color)
        self.set_color(color, role)

    def pop_color(self, role: ColorRole = ColorRole.FOREGROUND) -> None:
        """
        Drop the most recently pushed color and re-emit the one below it.

        With nothing left on the stack the default color is emitted. The
        stacks are independent of :meth:`reset_all` and scoped styling.
        """
        stack = self._color_stacks[role]
        if stack:
            stack.pop()
        self.set_color(stack[-1] if stack else None, role)

    def reset_all(self) -> None:
        """Disable all attributes and colors."""
        self.state.reset()
        self.writer.sgr([SGR_RESET])

    def restore(self, target: StyleState) -> None:
        """Bring the terminal (and this session) back to ``target``."""
        codes = self.state.restore_codes(target)
        self.state = target.snapshot()
        self.writer.sgr(codes)

    # -- scoped styling ----------------------------------------------------

    def _apply(self, item: StyleItem, role: ColorRole) -> None:
        if isinstance(item, Attribute):
            self.enable(item)
        else:
            self.set_color(item, role)

    @contextmanager
    def scoped(self, *items: StyleItem, role: ColorRole = ColorRole.FOREGROUND) -> Iterator[Session]:
        """
        Apply attributes/colors for the duration of a ``with`` block.

        The state from before the block is restored on every exit path,
        including exceptions. Nested scopes restore to whatever the
        enclosing scope established.
        """
        before = self.state.snapshot()
        try:
            for item in items:
                self._apply(item, role)
            yield self
        finally:
            self.restore(before)

    def with_style(
        self,
        item: StyleItem,
        body: Callable[[], T],
        role: ColorRole = ColorRole.FOREGROUND,
    ) -> T:
        """Run ``body`` with a style applied, then restore; returns its result."""
        with self.scoped(item, role=role):
            return body()

    def bold(self) -> ContextManager[Session]:
        return self.scoped(Attribute.BOLD)

    def faint(self) -> ContextManager[Session]:
        return self.scoped(Attribute.FAINT)

    def italic(self) -> ContextManager[Session]:
        return self.scoped(Attribute.ITALIC)

    def underline(self) -> ContextManager[Session]:
        return self.scoped(Attribute.UNDERLINE)

    def strikethrough(self) -> ContextManager[Session]:
        return self.scoped(Attribute.STRIKETHROUGH)

    def fg(self, color: Color | None) -> ContextManager[Session]:
        """Scoped foreground color."""
        return self.scoped(color, role=ColorRole.FOREGROUND)

    def bg(self, color: Color | None) -> ContextManager[Session]:
        """Scoped background color."""
        return self.scoped(color, role=ColorRole.BACKGROUND)

    @contextmanager
    def reset_guard(self) -> Iterator[Session]:
        """Reset all style and color attributes when the block exits."""
        try:
            yield self
        finally:
            logger.debug("Resetting terminal style on guard exit")
            self.reset_all()
            self.writer.flush()

    # -- output --------------------------------------------------------------

    def write(self, text: str) -> None:
        """Write text at the current cursor position."""
        self.writer.write_raw(text)

    def move_cursor(self, pos: tuple[int, int]) -> None:
        x, y = pos
        self.writer.move_cursor(x, y)

    def pixel(self, pos: tuple[int, int], char: str) -> None:
        x, y = pos
        self.writer.pixel(char, x, y)

    def clear_screen(self) -> None:
        self.writer.clear_screen()

    def clear_line(self) -> None:
        self.writer.clear_line()

    def println(self, text: str = "") -> None:
        """
        Write text, then move the cursor to the start of the next line.

        No newline is written, so line buffering is not flushed.
        """
        self.writer.write_raw(text)
        self.writer.line_start()
        self.writer.down(1)

    def flush(self) -> None:
        self.writer.flush()


_default: Session | None = None


def default_session() -> Session:
    """Get the process-wide session on stdout, creating it on first use."""
    global _default
    if _default is None:
        _default = Session()
        logger.debug("Created default session on %r", _default.stream)
    return _default


def set_default_session(session: Session | None) -> Session | None:
    """Replace the process-wide session. Returns the previous one."""
    global _default
    previous, _default = _default, session
    return previous


def resolve(session: Session | None) -> Session:
    """Return ``session`` or the process-wide default."""
    return session if session is not None else default_session()
