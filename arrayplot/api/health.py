"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from arrayplot.engine.colorscheme import available_schemes
from arrayplot.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    from arrayplot import __version__

    return HealthResponse(
        status="ok",
        version=__version__,
        colorschemes=available_schemes(),
    )
