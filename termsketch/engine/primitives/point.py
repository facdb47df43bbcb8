"""Point write — the only place strokes reach the grid."""

from __future__ import annotations

from collections.abc import Iterable

from termsketch.engine.canvas import Canvas, as_stroke
from termsketch.engine.registry import primitive
from termsketch.utils.geometry import Point


@primitive(name="point", description="Single cell, clipped when off-canvas", tags={"stroke"})
def plot_point(canvas: Canvas, point: Point, stroke: str) -> bool:
    """Write ``stroke`` at the rounded ``point``.

    Off-canvas and non-finite points are dropped silently and reported as
    ``False``; callers are not expected to act on it.
    """
    stroke = as_stroke(stroke)
    if not point.is_finite:
        return False
    x, y = canvas.to_cell(point)
    if not canvas.contains(x, y):
        return False
    canvas.plane[x, y] = stroke
    return True


def plot_points(canvas: Canvas, points: Iterable[Point], stroke: str) -> int:
    """Write every point; returns how many landed on the canvas."""
    return sum(1 for p in points if plot_point(canvas, p, stroke))
