"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from termsketch.config import settings
from termsketch.models.commands import Command, Stroke
from termsketch.utils.geometry import Dimensions


class RenderRequest(BaseModel):
    width: int = Field(default=settings.default_width, ge=0, description="Rows (x extent)")
    height: int = Field(default=settings.default_height, ge=0, description="Columns (y extent)")
    blank: Stroke = Field(default=settings.blank_glyph, description="Glyph for unset cells")
    guides: bool = Field(default=False, description="Draw numbered rulers first")
    commands: list[Command] = Field(default_factory=list, description="Draw commands, in order")

    @model_validator(mode="after")
    def check_area(self) -> RenderRequest:
        if self.width * self.height > settings.max_canvas_cells:
            raise ValueError(
                f"canvas {self.width}x{self.height} exceeds {settings.max_canvas_cells} cells"
            )
        return self

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(width=self.width, height=self.height)
