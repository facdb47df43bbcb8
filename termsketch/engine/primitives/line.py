"""Line rasterizer — dual x/y walk of the slope-intercept form.

Diagonal lines are sampled twice: once stepping x (``y = m*x + c``) and once
stepping y (``x = (y - c) / m``). Shallow lines are covered by the first walk,
steep lines by the second, so no slope leaves gaps. Sample coordinates may be
fractional; they are rounded when written.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterator

from termsketch.engine.canvas import Canvas
from termsketch.engine.primitives.point import plot_points
from termsketch.engine.registry import primitive
from termsketch.utils.geometry import Point, dedupe, require_finite, sort_by_axis

logger = logging.getLogger(__name__)


class SlopeClass(enum.Enum):
    DIAGONAL = "diagonal"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DEGENERATE = "degenerate"


def line_slope(p1: Point, p2: Point) -> float:
    """``dy / dx`` with IEEE semantics: ``±inf`` for vertical, NaN when p1 == p2."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    if dx == 0:
        if dy == 0:
            return math.nan
        return math.copysign(math.inf, dy)
    return dy / dx


def classify_slope(m: float) -> SlopeClass:
    if math.isnan(m):
        return SlopeClass.DEGENERATE
    if math.isinf(m):
        return SlopeClass.VERTICAL
    if m == 0:  # also catches -0.0
        return SlopeClass.HORIZONTAL
    return SlopeClass.DIAGONAL


def _walk(
    start: float,
    end: float,
    lo: float | None = None,
    hi: float | None = None,
) -> Iterator[float]:
    """Unit steps from ``start`` toward ``end``, never past it.

    With ``lo`` and ``hi`` only the steps inside ``[lo, hi]`` are produced, so
    the cost is bounded by that window and not by the segment length.
    """
    step = 1 if start <= end else -1
    first = 0
    last = math.floor(abs(end - start))
    if lo is not None and hi is not None:
        if step > 0:
            first = max(first, math.ceil(lo - start))
            last = min(last, math.floor(hi - start))
        else:
            first = max(first, math.ceil(start - hi))
            last = min(last, math.floor(start - lo))
    for k in range(first, last + 1):
        yield start + step * k


def line_points(
    p1: Point,
    p2: Point,
    clip: tuple[float, float, float, float] | None = None,
) -> list[Point]:
    """Sample points for the segment p1–p2, de-duplicated.

    ``clip`` is an ``(x_lo, x_hi, y_lo, y_hi)`` window; walk steps outside it
    are skipped. Raises ``ValueError`` for NaN or infinite endpoints.
    """
    require_finite(p1.x, p1.y, p2.x, p2.y)
    x_lo, x_hi, y_lo, y_hi = clip if clip is not None else (None, None, None, None)
    m = line_slope(p1, p2)
    kind = classify_slope(m)
    points: list[Point] = []

    if kind is SlopeClass.DIAGONAL:
        c = p1.y - m * p1.x
        start, end = sort_by_axis([p1, p2], "y")
        points.append(start)
        points.extend(Point(x, m * x + c) for x in _walk(start.x, end.x, x_lo, x_hi))
        points.extend(Point((y - c) / m, y) for y in _walk(start.y, end.y, y_lo, y_hi))
        points.append(end)
    elif kind is SlopeClass.HORIZONTAL:
        start, end = sort_by_axis([p1, p2], "x")
        points.append(start)
        points.extend(Point(x, start.y) for x in _walk(start.x, end.x, x_lo, x_hi))
        points.append(end)
    elif kind is SlopeClass.VERTICAL:
        start, end = sort_by_axis([p1, p2], "y")
        points.append(start)
        points.extend(Point(start.x, y) for y in _walk(start.y, end.y, y_lo, y_hi))
        points.append(end)
    else:
        points.append(p1)

    return dedupe(points)


@primitive(name="line", description="Straight segment between two points", tags={"stroke"})
def plot_line(canvas: Canvas, p1: Point, p2: Point, stroke: str) -> list[Point]:
    points = line_points(p1, p2, clip=canvas.extent())
    written = plot_points(canvas, points, stroke)
    logger.debug("line %s -> %s: %d samples, %d written", p1, p2, len(points), written)
    return points
