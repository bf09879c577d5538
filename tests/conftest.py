"""Pytest configuration: sessions bound to in-memory streams."""

import io
import re
from typing import Iterator

import pytest

from cod.draw.geometry import Point
from cod.session import Session, set_default_session

# Cursor position followed by whatever text was written there
_POSITIONED = re.compile(r"\x1b\[(\d+);(\d+)H([^\x1b]*)")
_SGR = re.compile(r"\x1b\[([\d;]*)m")


def written_cells(output: str) -> list[tuple[Point, str]]:
    """Expand every positioned write into (cell, char) pairs, in order."""
    cells: list[tuple[Point, str]] = []
    for match in _POSITIONED.finditer(output):
        row, col, chars = int(match.group(1)), int(match.group(2)), match.group(3)
        for offset, char in enumerate(chars):
            cells.append((Point(col - 1 + offset, row - 1), char))
    return cells


def sgr_params(output: str) -> list[str]:
    """All SGR parameter strings emitted, in order."""
    return _SGR.findall(output)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def session(stream: io.StringIO) -> Session:
    return Session(stream)


@pytest.fixture
def default_to(session: Session) -> Iterator[Session]:
    """Make ``session`` the process-wide default for the test."""
    previous = set_default_session(session)
    try:
        yield session
    finally:
        set_default_session(previous)
