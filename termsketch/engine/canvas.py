"""Canvas — a fixed-size grid of single-glyph strokes.

The grid is a numpy ``<U1`` array of shape ``(width, height)`` indexed
``[x, y]``: x selects the row, y the column inside it. Its shape never
changes after construction.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

import numpy as np
from numpy.typing import NDArray

from termsketch.utils.geometry import Dimensions, Point, is_out_of_canvas, translate

logger = logging.getLogger(__name__)


def as_stroke(value: str) -> str:
    """Validate that ``value`` is exactly one code point."""
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"Stroke must be a single character, got {value!r}")
    return value


@dataclass(eq=False)
class Canvas:
    """Mutable glyph grid plus its dimensions and origin."""

    plane: NDArray[np.str_]
    dimensions: Dimensions
    origin: Point = field(default_factory=lambda: Point(0, 0))

    @classmethod
    def create(cls, dimensions: Dimensions, blank: str = " ") -> Canvas:
        blank = as_stroke(blank)
        plane = np.empty((dimensions.width, dimensions.height), dtype="<U1")
        canvas = cls(plane=plane, dimensions=dimensions)
        fill_canvas(canvas, blank)
        logger.debug("Created %dx%d canvas", dimensions.width, dimensions.height)
        return canvas

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height

    def contains(self, x: int, y: int) -> bool:
        return not is_out_of_canvas(self.dimensions, Point(x, y))

    def to_cell(self, point: Point) -> tuple[int, int]:
        """Grid index of a drawing point; drawing (0, 0) sits at ``origin``."""
        return translate(self.origin, point).rounded()

    def extent(self) -> tuple[float, float, float, float]:
        """``(x_lo, x_hi, y_lo, y_hi)`` in drawing coordinates, one cell of margin."""
        return (
            -1 - self.origin.x,
            self.width - self.origin.x,
            -1 - self.origin.y,
            self.height - self.origin.y,
        )

    def rows(self) -> Iterator[str]:
        """Each x-row rendered as the concatenation of its glyphs."""
        for row in self.plane:
            yield "".join(row.tolist())


def fill_canvas(canvas: Canvas, stroke: str) -> None:
    """Overwrite every cell with ``stroke``."""
    canvas.plane.fill(as_stroke(stroke))


def stroke_at(canvas: Canvas, x: int, y: int) -> str:
    return str(canvas.plane[x, y])


def canvas_to_text(canvas: Canvas) -> str:
    return "\n".join(canvas.rows())


def print_canvas(canvas: Canvas, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    for row in canvas.rows():
        out.write(row + "\n")


def transpose(canvas: Canvas) -> Canvas:
    """New canvas with rows and columns swapped."""
    dims = Dimensions(width=canvas.height, height=canvas.width)
    return Canvas(
        plane=np.ascontiguousarray(canvas.plane.T),
        dimensions=dims,
        origin=Point(canvas.origin.y, canvas.origin.x),
    )


def terminal_dimensions(fallback: Dimensions | None = None) -> Dimensions:
    """Canvas size matching the terminal: rows become width, columns height."""
    fb = fallback or Dimensions(width=24, height=80)
    size = shutil.get_terminal_size((fb.height, fb.width))
    return Dimensions(width=size.lines, height=size.columns)
