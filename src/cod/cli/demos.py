"""Demo programs showing styling, scoped colors and shapes."""

from __future__ import annotations

from typing import Callable

from cod.core.color import Color, rgb
from cod.core.style import Attribute
from cod.draw import shapes, text
from cod.session import Session


def faint(session: Session) -> None:
    """
    Show bold and faint together.

    On some terminals (XTerm) they are separate; on others (Alacritty) bold
    takes precedence unless the text is colored.
    """
    def lines() -> None:
        with session.bold():
            session.println("This is just bold")
        with session.faint():
            session.println("This is just faint")
        with session.bold(), session.faint():
            session.println("This is bold, then faint")
        with session.faint(), session.bold():
            session.println("This is faint, then bold")

    lines()
    for index in range(8):
        session.println()
        with session.fg(Color.indexed(index)):
            lines()


def style(session: Session) -> None:
    """Nest a scoped style inside a manually enabled one."""
    session.enable(Attribute.BOLD)
    session.write("This is ")
    with session.italic():
        session.write("italic and bold text")
    session.println(", but this is just bold.")


def colors(session: Session) -> None:
    """Color a message for the duration of one write."""
    messages = [
        (Color.RED, "Failure"),
        (Color.GREEN, "Success"),
        (Color.YELLOW, "Warning"),
        (Color.BLUE, "Information"),
    ]
    for color, message in messages:
        with session.fg(color):
            session.write(message)
        session.println("!")


def draw(session: Session) -> None:
    """Draw each primitive once."""
    session.clear_screen()
    shapes.box((0, 0), 40, 12, color=Color.CYAN, session=session)
    shapes.rectangle((2, 2), 10, 5, "#", ".", color=Color.YELLOW, session=session)
    shapes.triangle((15, 8), (22, 2), (30, 8), "*", color=rgb(255, 120, 0), session=session)
    shapes.line((2, 9), (36, 10), "~", color=Color.BRIGHT_BLUE, session=session)
    text.blit((32, 3), ["/\\", "\\/"], color=Color.MAGENTA, session=session)
    session.move_cursor((0, 12))
    session.println()


DEMOS: dict[str, Callable[[Session], None]] = {
    "faint": faint,
    "style": style,
    "colors": colors,
    "shapes": draw,
}


def run(name: str, session: Session) -> None:
    """Run a demo by name, resetting the terminal afterwards."""
    demo = DEMOS[name]
    with session.reset_guard():
        demo(session)
