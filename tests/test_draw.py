"""Tests for geometry, shapes and text blitting."""

import io

import pytest

import cod
from cod.core.color import Color
from cod.draw import shapes, text
from cod.draw.geometry import Point, border_cells, interior_rows, line_cells
from cod.session import Session

from conftest import sgr_params, written_cells


class TestLineCells:
    """Tests for Bresenham rasterization."""

    def test_horizontal(self) -> None:
        assert list(line_cells(0, 0, 4, 0)) == [Point(x, 0) for x in range(5)]

    def test_reversed_horizontal_keeps_order(self) -> None:
        assert list(line_cells(4, 0, 0, 0)) == [Point(x, 0) for x in range(4, -1, -1)]

    def test_vertical(self) -> None:
        assert list(line_cells(2, 5, 2, 1)) == [Point(2, y) for y in range(5, 0, -1)]

    def test_single_point(self) -> None:
        assert list(line_cells(3, 3, 3, 3)) == [Point(3, 3)]

    def test_diagonal(self) -> None:
        assert list(line_cells(0, 0, 3, 3)) == [Point(i, i) for i in range(4)]

    def test_shallow_slope_advances_x_every_step(self) -> None:
        cells = list(line_cells(0, 0, 6, 2))
        assert [c.x for c in cells] == list(range(7))
        assert cells[0] == Point(0, 0)
        assert cells[-1] == Point(6, 2)

    def test_steep_slope_advances_y_every_step(self) -> None:
        cells = list(line_cells(5, 0, 3, 7))
        assert [c.y for c in cells] == list(range(8))
        assert cells[-1] == Point(3, 7)

    @pytest.mark.parametrize(
        "start,end",
        [((0, 0), (7, 3)), ((7, 3), (0, 0)), ((2, 9), (5, 1)), ((10, 4), (1, 6))],
    )
    def test_cells_unique_and_connected(self, start: tuple, end: tuple) -> None:
        cells = list(line_cells(*start, *end))
        assert cells[0] == start
        assert cells[-1] == end
        assert len(set(cells)) == len(cells)
        for a, b in zip(cells, cells[1:]):
            assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


class TestRectCells:
    """Tests for rectangle border and interior cells."""

    def test_three_by_three_border(self) -> None:
        cells = list(border_cells(0, 0, 3, 3))
        assert len(cells) == 8
        assert set(cells) == {
            Point(x, y) for x in range(3) for y in range(3) if (x, y) != (1, 1)
        }

    def test_zero_size(self) -> None:
        assert list(border_cells(1, 1, 0, 5)) == []
        assert list(border_cells(1, 1, 5, 0)) == []

    def test_degenerate_sizes(self) -> None:
        assert list(border_cells(0, 0, 1, 1)) == [Point(0, 0)]
        assert list(border_cells(0, 0, 1, 3)) == [Point(0, 0), Point(0, 2), Point(0, 1)]
        assert list(border_cells(0, 0, 3, 1)) == [Point(0, 0), Point(1, 0), Point(2, 0)]

    def test_interior(self) -> None:
        assert list(interior_rows(2, 2, 4, 4)) == [(Point(3, 3), 2), (Point(3, 4), 2)]
        assert list(interior_rows(0, 0, 2, 5)) == []


class TestShapes:
    """Tests for shape rendering through a session."""

    def test_line(self, session: Session, stream: io.StringIO) -> None:
        shapes.line((0, 0), (4, 0), "x", session=session)
        assert written_cells(stream.getvalue()) == [(Point(x, 0), "x") for x in range(5)]

    def test_line_with_color_restores(self, session: Session, stream: io.StringIO) -> None:
        shapes.line((0, 0), (1, 0), "x", Color.RED, session=session)
        assert sgr_params(stream.getvalue()) == ["38;5;1", "39"]
        assert session.state.fg is None

    def test_rectangle_border_only(self, session: Session, stream: io.StringIO) -> None:
        shapes.rectangle((0, 0), 3, 3, "#", None, Color.GREEN, session=session)
        cells = written_cells(stream.getvalue())
        assert len(cells) == 8
        assert Point(1, 1) not in {cell for cell, _ in cells}
        assert {char for _, char in cells} == {"#"}

    def test_rectangle_fill(self, session: Session, stream: io.StringIO) -> None:
        shapes.rectangle((1, 1), 4, 3, "#", ".", session=session)
        cells = dict(written_cells(stream.getvalue()))
        assert cells[Point(2, 2)] == "."
        assert cells[Point(3, 2)] == "."
        assert cells[Point(1, 1)] == "#"
        assert list(cells.values()).count(".") == 2

    def test_rectangle_zero_size(self, session: Session, stream: io.StringIO) -> None:
        shapes.rectangle((0, 0), 0, 3, "#", ".", session=session)
        shapes.rectangle((0, 0), 3, 0, "#", ".", session=session)
        assert stream.getvalue() == ""

    def test_triangle_outline(self, session: Session, stream: io.StringIO) -> None:
        shapes.triangle((0, 0), (4, 0), (0, 4), "*", session=session)
        cells = {cell for cell, _ in written_cells(stream.getvalue())}
        expected = (
            set(line_cells(0, 0, 4, 0))
            | set(line_cells(4, 0, 0, 4))
            | set(line_cells(0, 0, 0, 4))
        )
        assert cells == expected
        assert Point(1, 1) not in cells

    def test_box(self, session: Session, stream: io.StringIO) -> None:
        shapes.box((0, 0), 4, 3, shapes.SINGLE, session=session)
        cells = dict(written_cells(stream.getvalue()))
        assert cells[Point(0, 0)] == "┌"
        assert cells[Point(3, 0)] == "┐"
        assert cells[Point(0, 2)] == "└"
        assert cells[Point(3, 2)] == "┘"
        assert cells[Point(1, 0)] == cells[Point(2, 2)] == "─"
        assert cells[Point(0, 1)] == cells[Point(3, 1)] == "│"
        assert Point(1, 1) not in cells

    def test_box_uniform_chars(self, session: Session, stream: io.StringIO) -> None:
        shapes.box((0, 0), 3, 3, shapes.BoxChars.uniform("-", "|", "+"), session=session)
        cells = dict(written_cells(stream.getvalue()))
        assert cells[Point(0, 0)] == cells[Point(2, 2)] == "+"
        assert cells[Point(1, 0)] == "-"
        assert cells[Point(2, 1)] == "|"

    def test_fill_and_clear_rect(self, session: Session, stream: io.StringIO) -> None:
        shapes.fill_rect((1, 0), 3, 2, "=", session=session)
        shapes.clear_rect((1, 0), 2, 1, session=session)
        assert stream.getvalue() == "\x1b[1;2H===\x1b[2;2H===\x1b[1;2H  "

    def test_default_session(self, default_to: Session, stream: io.StringIO) -> None:
        cod.pixel((2, 3), "o")
        assert stream.getvalue() == "\x1b[4;3Ho"


class TestText:
    """Tests for blitting and text drawing."""

    def test_blit_unequal_rows(self, session: Session, stream: io.StringIO) -> None:
        text.blit((2, 1), ["abcd", "x", "", "yz"], session=session)
        assert stream.getvalue() == (
            "\x1b[2;3Habcd\x1b[3;3Hx\x1b[4;3H\x1b[5;3Hyz"
        )

    def test_blit_string_sprite(self, session: Session, stream: io.StringIO) -> None:
        text.blit((0, 0), "ab\ncde", session=session)
        assert written_cells(stream.getvalue()) == [
            (Point(0, 0), "a"),
            (Point(1, 0), "b"),
            (Point(0, 1), "c"),
            (Point(1, 1), "d"),
            (Point(2, 1), "e"),
        ]

    def test_blit_color_per_row(self, session: Session, stream: io.StringIO) -> None:
        session.set_fg(Color.RED)
        text.blit((0, 0), ["a", "b"], Color.BLUE, session=session)
        assert sgr_params(stream.getvalue()) == ["38;5;1", "38;5;4", "38;5;1", "38;5;4", "38;5;1"]
        assert session.state.fg == Color.RED

    def test_blit_transparent(self, session: Session, stream: io.StringIO) -> None:
        text.blit_transparent((0, 0), "t _  n", "_", session=session)
        assert written_cells(stream.getvalue()) == [
            (Point(0, 0), "t"),
            (Point(2, 0), " "),
            (Point(5, 0), "n"),
        ]

    def test_text_line_breaks(self, session: Session, stream: io.StringIO) -> None:
        text.text((4, 2), "one\ntwo", session=session)
        assert stream.getvalue() == "\x1b[3;5Hone\x1b[4;5Htwo"

    def test_println_default_session(self, default_to: Session, stream: io.StringIO) -> None:
        cod.println("done")
        assert stream.getvalue() == "done\x1b[G\x1b[1B"

    def test_normal_resets_default_session(self, default_to: Session, stream: io.StringIO) -> None:
        default_to.set_fg(Color.RED)
        cod.normal()
        assert stream.getvalue() == "\x1b[38;5;1m\x1b[0m"
        assert default_to.state.is_default()
