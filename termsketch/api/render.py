"""POST /api/render — run draw commands and return the canvas rows."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from termsketch.dependencies import get_runner
from termsketch.engine.canvas import canvas_to_text
from termsketch.engine.sketch import Sketch, SketchRunner
from termsketch.models.requests import RenderRequest
from termsketch.models.responses import RenderResponse

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
def render(req: RenderRequest, runner: SketchRunner = Depends(get_runner)) -> RenderResponse:
    sketch = Sketch(
        dimensions=req.dimensions,
        commands=req.commands,
        blank=req.blank,
        guides=req.guides,
    )
    result = runner.run(sketch)

    return RenderResponse(
        rows=list(result.canvas.rows()),
        text=canvas_to_text(result.canvas),
        processing_time_ms=round(result.elapsed_ms, 1),
        commands_completed=len(result.completed),
        commands_failed=len(result.errors),
        errors=result.errors,
    )
