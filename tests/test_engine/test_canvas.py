"""Tests for the canvas grid and its output helpers."""

from __future__ import annotations

import io
import os

import numpy as np
import pytest

from termsketch.engine.canvas import (
    Canvas,
    as_stroke,
    canvas_to_text,
    fill_canvas,
    print_canvas,
    stroke_at,
    terminal_dimensions,
    transpose,
)
from termsketch.utils.geometry import Dimensions, Point
from tests.conftest import make_canvas


def test_create_fills_with_blank():
    canvas = make_canvas(3, 4, blank=".")
    assert canvas.plane.shape == (3, 4)
    assert list(canvas.rows()) == ["....", "....", "...."]
    assert canvas.origin == Point(0, 0)


def test_create_zero_sized_canvas():
    canvas = make_canvas(0, 5)
    assert list(canvas.rows()) == []
    assert canvas_to_text(canvas) == ""


def test_create_rejects_long_blank():
    with pytest.raises(ValueError):
        Canvas.create(Dimensions(2, 2), blank="  ")


@pytest.mark.parametrize("bad", ["", "ab", None, 7])
def test_as_stroke_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        as_stroke(bad)


def test_as_stroke_accepts_unicode_block():
    assert as_stroke("▓") == "▓"


def test_fill_and_read():
    canvas = make_canvas(2, 3)
    fill_canvas(canvas, "○")
    assert stroke_at(canvas, 1, 2) == "○"
    assert canvas_to_text(canvas) == "○○○\n○○○"


def test_contains():
    canvas = make_canvas(2, 3)
    assert canvas.contains(1, 2)
    assert not canvas.contains(2, 0)
    assert not canvas.contains(0, -1)


def test_shape_is_fixed_after_writes():
    canvas = make_canvas(3, 3)
    canvas.plane[1, 1] = "x"
    fill_canvas(canvas, "y")
    assert canvas.plane.shape == (3, 3)


def test_print_canvas_writes_rows():
    canvas = make_canvas(2, 2)
    canvas.plane[0, 1] = "#"
    out = io.StringIO()
    print_canvas(canvas, out)
    assert out.getvalue() == " #\n  \n"


def test_transpose_swaps_dimensions():
    canvas = make_canvas(2, 3)
    canvas.plane[0, 2] = "a"
    flipped = transpose(canvas)
    assert flipped.dimensions == Dimensions(width=3, height=2)
    assert stroke_at(flipped, 2, 0) == "a"
    # source canvas keeps its shape
    assert canvas.plane.shape == (2, 3)
    assert np.array_equal(flipped.plane.T, canvas.plane)


def test_terminal_dimensions_maps_rows_to_width(monkeypatch):
    monkeypatch.setattr(
        "termsketch.engine.canvas.shutil.get_terminal_size",
        lambda fallback: os.terminal_size((120, 40)),
    )
    assert terminal_dimensions() == Dimensions(width=40, height=120)


def test_to_cell_applies_origin():
    canvas = Canvas.create(Dimensions(4, 4))
    assert canvas.to_cell(Point(1.5, 0.4)) == (2, 0)
    canvas.origin = Point(2, 1)
    assert canvas.to_cell(Point(0, 0)) == (2, 1)
    assert canvas.to_cell(Point(-2.4, -1)) == (0, 0)


def test_extent_has_one_cell_margin():
    canvas = Canvas.create(Dimensions(4, 6))
    assert canvas.extent() == (-1, 4, -1, 6)
    canvas.origin = Point(1, 2)
    assert canvas.extent() == (-2, 3, -3, 4)
