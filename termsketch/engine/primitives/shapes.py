"""Polygon outlines built from line segments."""

from __future__ import annotations

import math

from termsketch.engine.canvas import Canvas
from termsketch.engine.primitives.fill import flood_fill
from termsketch.engine.primitives.line import plot_line
from termsketch.engine.registry import primitive
from termsketch.utils.geometry import Dimensions, Point, point_in_direction


@primitive(name="triangle", description="Outline through three vertices", tags={"stroke"})
def plot_triangle(canvas: Canvas, a: Point, b: Point, c: Point, stroke: str) -> None:
    plot_line(canvas, a, b, stroke)
    plot_line(canvas, b, c, stroke)
    plot_line(canvas, c, a, stroke)


@primitive(name="rectangle", description="Axis-aligned box, optionally filled", tags={"stroke", "fill"})
def plot_rectangle(
    canvas: Canvas,
    a: Point,
    dimensions: Dimensions,
    boundary: str,
    fill: str | None = None,
) -> None:
    """Box with corner ``a`` spanning ``dimensions`` (x by width, y by height)."""
    b = Point(a.x + dimensions.width, a.y)
    c = Point(a.x, a.y + dimensions.height)
    d = Point(b.x, a.y + dimensions.height)
    plot_line(canvas, a, b, boundary)
    plot_line(canvas, b, d, boundary)
    plot_line(canvas, c, d, boundary)
    plot_line(canvas, c, a, boundary)
    if fill:
        flood_fill(canvas, Point(a.x + 1, a.y + 1), boundary, fill)


def equilateral_vertices(center: Point, radius: float, alpha: float) -> tuple[Point, Point, Point]:
    return (
        point_in_direction(center, radius, math.pi / 2 + alpha),
        point_in_direction(center, radius, math.pi + math.pi / 4 + alpha),
        point_in_direction(center, radius, 2 * math.pi - math.pi / 4 + alpha),
    )


@primitive(
    name="equilateral_triangle",
    description="Triangle inscribed around a center, rotated by alpha radians",
    tags={"stroke"},
)
def plot_equilateral_triangle(
    canvas: Canvas,
    center: Point,
    radius: float,
    alpha: float,
    stroke: str,
) -> None:
    plot_triangle(canvas, *equilateral_vertices(center, radius, alpha), stroke)
