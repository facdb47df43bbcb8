"""termsketch rasterization engine."""

from termsketch.engine.canvas import Canvas
from termsketch.engine.registry import get_registry, primitive
from termsketch.engine.sketch import Sketch, SketchResult, SketchRunner

__all__ = [
    "Canvas",
    "get_registry",
    "primitive",
    "Sketch",
    "SketchResult",
    "SketchRunner",
]
