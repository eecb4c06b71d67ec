"""Versioned API route modules."""

from fastapi import APIRouter

from artseed.api.routes.config import router as config_router
from artseed.api.routes.noise import router as noise_router
from artseed.api.routes.random import router as random_router
from artseed.api.routes.sketch import router as sketch_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(random_router, tags=["Random"])
api_router.include_router(noise_router, tags=["Noise"])
api_router.include_router(sketch_router, tags=["Sketch"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
