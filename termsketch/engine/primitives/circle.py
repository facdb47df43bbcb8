"""Circle rasterizer — axis-aligned sampling of x² + y² = r².

For each integer offset ``d`` in ``0..r`` the matching ``h`` is rounded and
the four reflections around the center are emitted. Rings are not guaranteed
to be connected near the quarter points at every radius.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from termsketch.engine.canvas import Canvas
from termsketch.engine.primitives.fill import flood_fill
from termsketch.engine.primitives.point import plot_points
from termsketch.engine.registry import primitive
from termsketch.utils.geometry import Point, dedupe, require_finite, round_half_up

logger = logging.getLogger(__name__)


def _offsets(cx: float, radius: float, lo: float | None, hi: float | None) -> Iterator[int]:
    """Integer offsets ``0..radius``; with a window, only those where ``cx ± d`` lands in it."""
    last = math.floor(radius)
    if lo is None or hi is None:
        yield from range(0, last + 1)
        return
    # cx + d in [lo, hi]  or  cx - d in [lo, hi]
    windows = [
        (max(0, math.ceil(lo - cx)), min(last, math.floor(hi - cx))),
        (max(0, math.ceil(cx - hi)), min(last, math.floor(cx - lo))),
    ]
    seen: set[int] = set()
    for first, stop in sorted(windows):
        for d in range(first, stop + 1):
            if d not in seen:
                seen.add(d)
                yield d


def circle_points(
    center: Point,
    radius: float,
    clip: tuple[float, float, float, float] | None = None,
) -> list[Point]:
    """Ring samples, de-duplicated.

    ``clip`` is an ``(x_lo, x_hi, y_lo, y_hi)`` window; offsets whose columns
    all fall outside its x range are skipped. Raises ``ValueError`` for NaN or
    infinite input.
    """
    require_finite(center.x, center.y, radius)
    if radius < 0:
        return []
    x_lo, x_hi = (clip[0], clip[1]) if clip is not None else (None, None)
    points: list[Point] = []
    for d in _offsets(center.x, radius, x_lo, x_hi):
        h = round_half_up(math.sqrt((radius - d) * (radius + d)))
        points.append(Point(center.x + d, center.y + h))
        points.append(Point(center.x - d, center.y + h))
        points.append(Point(center.x + d, center.y - h))
        points.append(Point(center.x - d, center.y - h))
    return dedupe(points)


@primitive(name="circle", description="Ring around a center, optionally filled", tags={"stroke", "fill"})
def plot_circle(
    canvas: Canvas,
    center: Point,
    radius: float,
    boundary: str,
    fill: str | None = None,
) -> list[Point]:
    points = circle_points(center, radius, clip=canvas.extent())
    plot_points(canvas, points, boundary)
    logger.debug("circle %s r=%s: %d samples", center, radius, len(points))
    if fill:
        flood_fill(canvas, center, boundary, fill)
    return points
