"""Tests for triangle, rectangle and equilateral triangle outlines."""

from __future__ import annotations

import math

from termsketch.engine.primitives.shapes import (
    equilateral_vertices,
    plot_equilateral_triangle,
    plot_rectangle,
    plot_triangle,
)
from termsketch.utils.geometry import Dimensions, Point
from tests.conftest import FILLED_RECT_ROWS, cells_with, make_canvas


def test_triangle_outline(canvas_5x5):
    plot_triangle(canvas_5x5, Point(0, 0), Point(0, 4), Point(4, 0), "*")
    assert list(canvas_5x5.rows()) == [
        "*****",
        "*  * ",
        "* *  ",
        "**   ",
        "*    ",
    ]


def test_degenerate_triangle_is_a_point(canvas_5x5):
    plot_triangle(canvas_5x5, Point(2, 2), Point(2, 2), Point(2, 2), "*")
    assert cells_with(canvas_5x5, "*") == {(2, 2)}


def test_rectangle_outline_and_fill(canvas_5x5):
    plot_rectangle(canvas_5x5, Point(0, 0), Dimensions(width=4, height=4), "#", ".")
    assert list(canvas_5x5.rows()) == FILLED_RECT_ROWS


def test_rectangle_without_fill_leaves_interior(canvas_5x5):
    plot_rectangle(canvas_5x5, Point(0, 0), Dimensions(width=4, height=4), "#")
    assert list(canvas_5x5.rows())[2] == "#   #"


def test_rectangle_partially_off_canvas(canvas_5x5):
    plot_rectangle(canvas_5x5, Point(3, 3), Dimensions(width=4, height=4), "#", ".")
    assert cells_with(canvas_5x5, "#") == {(3, 3), (4, 3), (3, 4)}
    assert cells_with(canvas_5x5, ".") == {(4, 4)}


def test_rectangle_too_thin_to_fill(canvas_5x5):
    plot_rectangle(canvas_5x5, Point(0, 0), Dimensions(width=1, height=4), "#", ".")
    assert cells_with(canvas_5x5, ".") == set()


def test_equilateral_vertices():
    assert equilateral_vertices(Point(10, 10), 4, 0) == (Point(10, 14), Point(7, 7), Point(13, 7))


def test_equilateral_rotation_by_pi():
    a, b, c = equilateral_vertices(Point(10, 10), 4, math.pi)
    assert a == Point(10, 6)
    assert {b, c} == {Point(13, 13), Point(7, 13)}


def test_plot_equilateral_draws_vertices():
    canvas = make_canvas(20, 20)
    plot_equilateral_triangle(canvas, Point(10, 10), 4, 0, "^")
    cells = cells_with(canvas, "^")
    assert {(10, 14), (7, 7), (13, 7)} <= cells
    # base edge runs along y = 7
    assert {(x, 7) for x in range(7, 14)} <= cells
