"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from termsketch import __version__
from termsketch.engine.registry import get_registry
from termsketch.models.responses import HealthResponse, PrimitiveInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        primitives_registered=get_registry().count,
    )


@router.get("/primitives", response_model=list[PrimitiveInfo])
async def primitives() -> list[PrimitiveInfo]:
    return [
        PrimitiveInfo(name=s.name, description=s.description, tags=sorted(s.tags))
        for s in get_registry().all()
    ]
