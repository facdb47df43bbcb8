"""Draw command models — one per registered primitive, discriminated by ``kind``."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from termsketch.engine.primitives.text import Orientation
from termsketch.utils.geometry import Dimensions, Point

Stroke = Annotated[str, Field(min_length=1, max_length=1, description="Single glyph")]


class PointModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    x: float
    y: float

    def to_point(self) -> Point:
        return Point(self.x, self.y)


class DimensionsModel(BaseModel):
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    def to_dimensions(self) -> Dimensions:
        return Dimensions(width=self.width, height=self.height)


class _Command(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    def to_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the primitive, with nested models as core types."""
        kwargs: dict[str, Any] = {}
        for name in type(self).model_fields:
            if name == "kind":
                continue
            value = getattr(self, name)
            if isinstance(value, PointModel):
                value = value.to_point()
            elif isinstance(value, DimensionsModel):
                value = value.to_dimensions()
            kwargs[name] = value
        return kwargs


class PointCommand(_Command):
    kind: Literal["point"] = "point"
    point: PointModel
    stroke: Stroke


class LineCommand(_Command):
    kind: Literal["line"] = "line"
    p1: PointModel
    p2: PointModel
    stroke: Stroke


class TriangleCommand(_Command):
    kind: Literal["triangle"] = "triangle"
    a: PointModel
    b: PointModel
    c: PointModel
    stroke: Stroke


class RectangleCommand(_Command):
    kind: Literal["rectangle"] = "rectangle"
    a: PointModel
    dimensions: DimensionsModel
    boundary: Stroke
    fill: Stroke | None = None


class CircleCommand(_Command):
    kind: Literal["circle"] = "circle"
    center: PointModel
    radius: float
    boundary: Stroke
    fill: Stroke | None = None


class EquilateralTriangleCommand(_Command):
    kind: Literal["equilateral_triangle"] = "equilateral_triangle"
    center: PointModel
    radius: float
    alpha: float = Field(default=0.0, description="Rotation in radians")
    stroke: Stroke


class TextCommand(_Command):
    kind: Literal["text"] = "text"
    start: PointModel
    orientation: Orientation = Orientation.HORIZONTAL
    text: str


class FloodFillCommand(_Command):
    kind: Literal["flood_fill"] = "flood_fill"
    seed: PointModel
    boundary: Stroke
    fill: Stroke


class GuidesCommand(_Command):
    kind: Literal["guides"] = "guides"
    marker: Stroke | None = None
    spacing: int | None = Field(default=None, ge=1)


class CaptionCommand(_Command):
    kind: Literal["caption"] = "caption"
    lines: list[str]


Command = Annotated[
    Union[
        PointCommand,
        LineCommand,
        TriangleCommand,
        RectangleCommand,
        CircleCommand,
        EquilateralTriangleCommand,
        TextCommand,
        FloodFillCommand,
        GuidesCommand,
        CaptionCommand,
    ],
    Field(discriminator="kind"),
]
