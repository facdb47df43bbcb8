"""FastAPI dependency injection."""

from __future__ import annotations

from termsketch.config import settings
from termsketch.engine.config import CanvasConfig
from termsketch.engine.sketch import SketchRunner, create_runner


def get_runner() -> SketchRunner:
    return create_runner(
        CanvasConfig(blank=settings.blank_glyph, max_cells=settings.max_canvas_cells)
    )
