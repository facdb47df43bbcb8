"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    primitives_registered: int = 0


class PrimitiveInfo(BaseModel):
    name: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)


class RenderResponse(BaseModel):
    rows: list[str] = Field(default_factory=list)
    text: str = ""
    processing_time_ms: float = 0.0
    commands_completed: int = 0
    commands_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
