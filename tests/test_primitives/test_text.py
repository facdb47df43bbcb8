"""Tests for text, ruler guides and captions."""

from __future__ import annotations

import pytest

from termsketch.engine.primitives.text import (
    Orientation,
    plot_caption,
    plot_guides,
    plot_text,
    text_points,
)
from termsketch.utils.geometry import Point
from tests.conftest import make_canvas


def test_horizontal_text_advances_along_y():
    canvas = make_canvas(3, 5)
    points = plot_text(canvas, Point(0, 0), "horizontal", "AB")
    assert points == [Point(0, 0), Point(0, 1), Point(0, 2)]
    assert list(canvas.rows())[0] == "AB   "


def test_vertical_text_advances_along_x():
    canvas = make_canvas(3, 5)
    plot_text(canvas, Point(0, 1), Orientation.VERTICAL, "HI")
    rows = list(canvas.rows())
    assert rows[0] == " H   "
    assert rows[1] == " I   "
    assert rows[2] == "     "


def test_text_past_edge_is_clipped():
    canvas = make_canvas(3, 5)
    plot_text(canvas, Point(0, 3), "horizontal", "HELLO")
    assert list(canvas.rows())[0] == "   HE"


def test_text_starting_off_canvas():
    canvas = make_canvas(3, 5)
    plot_text(canvas, Point(1, -2), "horizontal", "abcd")
    assert list(canvas.rows())[1] == "cd   "


def test_empty_text_writes_nothing():
    canvas = make_canvas(3, 5)
    assert plot_text(canvas, Point(1, 1), "vertical", "") == [Point(1, 1)]
    assert all(row == "     " for row in canvas.rows())


def test_unknown_orientation_rejected():
    with pytest.raises(ValueError):
        text_points(Point(0, 0), "diagonal", 3)


def test_text_points_nearest_first():
    pts = text_points(Point(2, 2), Orientation.VERTICAL, 2)
    assert pts == [Point(2, 2), Point(3, 2), Point(4, 2)]


def test_guides():
    canvas = make_canvas(12, 25)
    plot_guides(canvas)
    rows = list(canvas.rows())
    assert rows[0] == "▓123456789▓123456789▓1234"
    assert rows[1] == "0" + " " * 9 + "10" + " " * 8 + "20" + " " * 3
    assert rows[10].startswith("▓10 ")
    assert rows[11][0] == "1"


def test_guides_custom_marker_and_spacing():
    canvas = make_canvas(6, 6)
    plot_guides(canvas, marker="+", spacing=5)
    assert list(canvas.rows())[0] == "+1234+"


def test_caption_right_aligned_bottom_up():
    canvas = make_canvas(4, 10)
    plot_caption(canvas, ["ab", "xyz"])
    rows = list(canvas.rows())
    assert rows[3] == "        ab"
    assert rows[2] == "       xyz"
    assert rows[0] == " " * 10
