"""Drawing primitives. Importing this package registers all of them."""

from termsketch.engine.primitives.point import plot_point, plot_points
from termsketch.engine.primitives.line import line_points, plot_line
from termsketch.engine.primitives.fill import flood_fill
from termsketch.engine.primitives.circle import circle_points, plot_circle
from termsketch.engine.primitives.shapes import (
    plot_equilateral_triangle,
    plot_rectangle,
    plot_triangle,
)
from termsketch.engine.primitives.text import (
    Orientation,
    plot_caption,
    plot_guides,
    plot_text,
)

__all__ = [
    "plot_point",
    "plot_points",
    "line_points",
    "plot_line",
    "flood_fill",
    "circle_points",
    "plot_circle",
    "plot_triangle",
    "plot_rectangle",
    "plot_equilateral_triangle",
    "Orientation",
    "plot_text",
    "plot_guides",
    "plot_caption",
]
