"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from artseed.api.dependencies import set_config
from artseed.api.routes import api_router
from artseed.config import SketchConfig
from artseed.core.errors import ArtseedError
from artseed.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: SketchConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = SketchConfig()

    _config = config
    set_config(_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        logger.info("API server started — canvas %dx%d, seed=%s.",
                    _config.width, _config.height, _config.seed)
        yield
        logger.info("API server shutting down.")

    app = FastAPI(
        title="artseed",
        description=(
            "Seeded generative-art sketch runner.\n\n"
            "## API Groups\n\n"
            "- **Random** — Reproducible uniform, integer, Gaussian, shuffle and blue-noise samples\n"
            "- **Noise** — Coherent noise lookups in 1 to 4 dimensions\n"
            "- **Sketch** — The default sketch as a JSON scene\n"
            "- **Config** — Read-only sketch configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Random", "description": "Sample streams. The same seed and query always return the same payload."},
            {"name": "Noise", "description": "Coherent noise seeded from seed + 1. Lookups never advance the sample stream."},
            {"name": "Sketch", "description": "Scene description (shapes in paint order) for the default sketch."},
            {"name": "Config", "description": "Read-only sketch configuration (canvas size, spacings, limits)."},
        ],
    )

    @app.exception_handler(ArtseedError)
    async def artseed_error_handler(request: Request, exc: ArtseedError) -> JSONResponse:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
