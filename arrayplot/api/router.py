"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from arrayplot.api import health, plot

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(plot.router)
