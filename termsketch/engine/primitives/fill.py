"""Boundary flood fill — iterative, 4-connected, explicit stack."""

from __future__ import annotations

import logging

from termsketch.engine.canvas import Canvas, as_stroke, stroke_at
from termsketch.engine.registry import primitive
from termsketch.utils.geometry import Point

logger = logging.getLogger(__name__)

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _eligible(canvas: Canvas, x: int, y: int, boundary: str, fill: str) -> bool:
    if not canvas.contains(x, y):
        return False
    glyph = stroke_at(canvas, x, y)
    return glyph != boundary and glyph != fill


@primitive(
    name="flood_fill",
    description="Paint the region around a seed up to a boundary glyph",
    tags={"fill"},
)
def flood_fill(canvas: Canvas, seed: Point, boundary: str, fill: str) -> int:
    """Fill every cell 4-connected to ``seed`` that is not ``boundary``.

    A region that is not closed by ``boundary`` leaks into the rest of the
    canvas. A fill glyph equal to the boundary glyph, or a seed that is off
    the canvas, already absorbed or on the boundary, leaves the canvas
    untouched. Returns the number of cells written, at most the canvas area.
    """
    boundary = as_stroke(boundary)
    fill = as_stroke(fill)
    if boundary == fill or not seed.is_finite:
        return 0
    sx, sy = canvas.to_cell(seed)
    if not _eligible(canvas, sx, sy, boundary, fill):
        return 0

    written = 0
    stack: list[tuple[int, int]] = [(sx, sy)]
    while stack:
        x, y = stack.pop()
        # pushed twice before being popped once
        if stroke_at(canvas, x, y) == fill:
            continue
        canvas.plane[x, y] = fill
        written += 1
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if _eligible(canvas, nx, ny, boundary, fill):
                stack.append((nx, ny))

    logger.debug("flood fill from (%d, %d): %d cells", sx, sy, written)
    return written
