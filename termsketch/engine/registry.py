"""Primitive registry — every drawing primitive is a plain function registered via decorator.

Usage:
    @primitive(name="line", description="Straight segment between two points")
    def plot_line(canvas: Canvas, p1: Point, p2: Point, stroke: str) -> list[Point]:
        ...

The sketch runner dispatches commands by name through this registry, so a new
primitive only needs the decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class PrimitiveSpec:
    name: str
    fn: Callable[..., Any]
    tags: set[str] = field(default_factory=set)
    description: str = ""


class PrimitiveRegistry:
    """Singleton registry of all primitives."""

    def __init__(self) -> None:
        self._primitives: dict[str, PrimitiveSpec] = {}

    def register(self, spec: PrimitiveSpec) -> None:
        if spec.name in self._primitives:
            raise ValueError(f"Duplicate primitive name: {spec.name}")
        self._primitives[spec.name] = spec
        logger.debug("Registered primitive %s", spec.name)

    def get(self, name: str) -> PrimitiveSpec:
        return self._primitives[name]

    def with_tag(self, tag: str) -> list[PrimitiveSpec]:
        return [s for s in self.all() if tag in s.tags]

    def all(self) -> list[PrimitiveSpec]:
        return sorted(self._primitives.values(), key=lambda s: s.name)

    def __contains__(self, name: object) -> bool:
        return name in self._primitives

    @property
    def count(self) -> int:
        return len(self._primitives)


# Module-level singleton
_registry = PrimitiveRegistry()


def get_registry() -> PrimitiveRegistry:
    return _registry


def primitive(
    *,
    name: str,
    tags: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a primitive function."""

    def decorator(fn: Callable[..., Any]):
        spec = PrimitiveSpec(
            name=name,
            fn=fn,
            tags=tags or set(),
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
