"""Leaf-node point helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A real-valued position. Rounded only when it becomes a grid index."""

    x: float
    y: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def rounded(self) -> tuple[int, int]:
        return (round_half_up(self.x), round_half_up(self.y))


@dataclass(frozen=True)
class Dimensions:
    """Canvas size: ``width`` counts x-rows, ``height`` counts y-columns."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Dimensions must be non-negative, got {self.width}x{self.height}")

    @property
    def area(self) -> int:
        return self.width * self.height


def require_finite(*values: float) -> None:
    """Raise ``ValueError`` if any value is NaN or infinite."""
    for v in values:
        if not math.isfinite(v):
            raise ValueError(f"Coordinate must be finite, got {v!r}")


def round_half_up(value: float) -> int:
    """Nearest integer, halves go toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def is_out_of_canvas(dims: Dimensions, p: Point) -> bool:
    return p.x < 0 or p.x >= dims.width or p.y < 0 or p.y >= dims.height


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance."""
    return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)


def sort_by_axis(points: Iterable[Point], axis: str) -> list[Point]:
    """Stable ascending sort along ``"x"`` or ``"y"``."""
    if axis not in ("x", "y"):
        raise ValueError(f"Unknown axis: {axis!r}")
    return sorted(points, key=lambda p: getattr(p, axis))


def sort_by_nearest(origin: Point, points: Iterable[Point]) -> list[Point]:
    """Stable ascending sort by distance from ``origin``."""
    return sorted(points, key=lambda p: distance(origin, p))


def dedupe(points: Iterable[Point]) -> list[Point]:
    """Drop later duplicates of the same exact (x, y), keeping first-seen order."""
    seen: set[tuple[float, float]] = set()
    unique: list[Point] = []
    for p in points:
        key = (p.x, p.y)
        if key in seen:
            continue
        seen.add(key)
        unique.append(p)
    return unique


def translate(origin: Point, point: Point) -> Point:
    """Shift ``point`` so that it is expressed relative to ``origin``."""
    return Point(point.x + origin.x, point.y + origin.y)


def point_in_direction(p: Point, dist: float, angle_rad: float) -> Point:
    """Polar offset from ``p``, snapped to the nearest cell."""
    require_finite(p.x, p.y, dist, angle_rad)
    return Point(
        round_half_up(p.x + dist * math.cos(angle_rad)),
        round_half_up(p.y + dist * math.sin(angle_rad)),
    )
