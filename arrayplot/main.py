"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from arrayplot.config import settings
from arrayplot.errors import InvalidRank

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.arrayplot_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


async def _invalid_rank_handler(request: Request, exc: InvalidRank) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc), "rank": exc.rank})


def create_app() -> FastAPI:
    from arrayplot import __version__

    app = FastAPI(
        title="arrayplot",
        description="Render 2D numeric matrices as color-coded SVG grids",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidRank, _invalid_rank_handler)

    from arrayplot.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
