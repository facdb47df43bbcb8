"""Text plotter, ruler guides and captions."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from termsketch.engine.canvas import Canvas
from termsketch.engine.config import CanvasConfig
from termsketch.engine.primitives.point import plot_point
from termsketch.engine.registry import primitive
from termsketch.utils.geometry import Point, dedupe, sort_by_nearest


class Orientation(str, enum.Enum):
    """Direction successive characters advance in."""

    VERTICAL = "vertical"  # along x, one row per character
    HORIZONTAL = "horizontal"  # along y, one column per character


def text_points(start: Point, orientation: Orientation | str, length: int) -> list[Point]:
    """Candidate cells for ``length`` characters, ordered nearest-first from ``start``."""
    orientation = Orientation(orientation)
    if orientation is Orientation.VERTICAL:
        points = [Point(start.x + i, start.y) for i in range(length + 1)]
    else:
        points = [Point(start.x, start.y + i) for i in range(length + 1)]
    return sort_by_nearest(start, dedupe(points))


@primitive(name="text", description="String laid out along one axis, no wrapping", tags={"text"})
def plot_text(
    canvas: Canvas,
    start: Point,
    orientation: Orientation | str,
    text: str,
) -> list[Point]:
    """Write ``text`` one character per cell; characters past the edge are clipped."""
    points = text_points(start, orientation, len(text))
    for point, char in zip(points, text):
        plot_point(canvas, point, char)
    return points


@primitive(name="guides", description="Numbered rulers along row 0 and column 0", tags={"text"})
def plot_guides(canvas: Canvas, marker: str | None = None, spacing: int | None = None) -> None:
    """Digit ruler on both axes; every ``spacing`` cells a marker and the full index."""
    config = CanvasConfig()
    marker = marker or config.guide_marker
    spacing = spacing or config.guide_spacing

    for x in range(canvas.width):
        plot_point(canvas, Point(x, 0), str(x % 10))
        if x % spacing == 0:
            plot_point(canvas, Point(x, 0), marker)
            plot_text(canvas, Point(x, 1), Orientation.HORIZONTAL, str(x))

    for y in range(canvas.height):
        plot_point(canvas, Point(0, y), str(y % 10))
        if y % spacing == 0:
            plot_point(canvas, Point(0, y), marker)
            plot_text(canvas, Point(1, y), Orientation.HORIZONTAL, str(y))


@primitive(name="caption", description="Right-aligned lines in the bottom rows", tags={"text"})
def plot_caption(canvas: Canvas, lines: Sequence[str]) -> None:
    """First line goes on the last row, each following line one row up."""
    for i, line in enumerate(lines):
        start = Point(canvas.width - 1 - i, canvas.height - len(line))
        plot_text(canvas, start, Orientation.HORIZONTAL, line)
