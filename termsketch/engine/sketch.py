"""Sketch runner — executes draw commands in order against one canvas."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import termsketch.engine.primitives  # noqa: F401  (registers primitives)
from termsketch.engine.canvas import Canvas
from termsketch.engine.config import CanvasConfig
from termsketch.engine.primitives.text import plot_guides
from termsketch.engine.registry import PrimitiveRegistry, get_registry
from termsketch.utils.geometry import Dimensions

if TYPE_CHECKING:
    from termsketch.models.commands import Command

logger = logging.getLogger(__name__)


@dataclass
class Sketch:
    """A canvas size plus the ordered commands that draw on it."""

    dimensions: Dimensions
    commands: Sequence[Command] = field(default_factory=list)
    blank: str = " "
    guides: bool = False


@dataclass
class SketchResult:
    canvas: Canvas
    # Indices of commands that ran to completion
    completed: list[int] = field(default_factory=list)
    # "<index>:<kind>" -> error message
    errors: dict[str, str] = field(default_factory=dict)
    elapsed_ms: float = 0.0


class SketchRunner:
    """Builds the canvas and dispatches each command through the registry."""

    def __init__(
        self,
        registry: PrimitiveRegistry | None = None,
        config: CanvasConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or CanvasConfig()

    def prepare(self, sketch: Sketch) -> Canvas:
        if sketch.dimensions.area > self.config.max_cells:
            raise ValueError(
                f"Canvas of {sketch.dimensions.area} cells exceeds limit of {self.config.max_cells}"
            )
        canvas = Canvas.create(sketch.dimensions, blank=sketch.blank or self.config.blank)
        if sketch.guides:
            plot_guides(canvas, self.config.guide_marker, self.config.guide_spacing)
        return canvas

    def run(self, sketch: Sketch) -> SketchResult:
        start = time.perf_counter()
        canvas = self.prepare(sketch)
        result = SketchResult(canvas=canvas)

        logger.info(
            "Sketch: %d commands on %dx%d canvas",
            len(sketch.commands),
            canvas.width,
            canvas.height,
        )

        for index, command in enumerate(sketch.commands):
            key = f"{index}:{command.kind}"
            t0 = time.perf_counter()
            try:
                spec = self.registry.get(command.kind)
            except KeyError:
                result.errors[key] = f"Unknown primitive: {command.kind}"
                logger.warning("  %s FAILED: unknown primitive", key)
                continue

            try:
                spec.fn(canvas, **command.to_kwargs())
                result.completed.append(index)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", key, elapsed)
            except Exception as e:
                result.errors[key] = str(e)
                logger.warning("  %s FAILED: %s", key, e)

        result.elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Sketch complete: %d/%d commands in %.0fms",
            len(result.completed),
            len(sketch.commands),
            result.elapsed_ms,
        )
        return result


def create_runner(config: CanvasConfig | None = None) -> SketchRunner:
    """Factory function for creating a runner instance."""
    return SketchRunner(config=config)
