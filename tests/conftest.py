"""Shared fixtures and helpers for the termsketch test suite."""

from __future__ import annotations

import pytest

from termsketch.engine.canvas import Canvas
from termsketch.utils.geometry import Dimensions

BLANK = " "

# Scenario B: 4x4 rectangle on a 5x5 canvas, '#' border and '.' interior
FILLED_RECT_ROWS = [
    "#####",
    "#...#",
    "#...#",
    "#...#",
    "#####",
]


def make_canvas(width: int, height: int, blank: str = BLANK) -> Canvas:
    return Canvas.create(Dimensions(width=width, height=height), blank=blank)


def cells_with(canvas: Canvas, glyph: str) -> set[tuple[int, int]]:
    """Every (x, y) currently holding ``glyph``."""
    xs, ys = (canvas.plane == glyph).nonzero()
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


@pytest.fixture
def canvas_5x5() -> Canvas:
    return make_canvas(5, 5)


@pytest.fixture
def canvas_7x7() -> Canvas:
    return make_canvas(7, 7)


@pytest.fixture
def canvas_20x20() -> Canvas:
    return make_canvas(20, 20)
