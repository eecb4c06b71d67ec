"""GET /api/v1/random/* — seeded sample streams.

Each request gets its own engine, so the same query string always returns
the same payload.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from artseed.api.dependencies import check_poisson_grid, get_config, get_engine
from artseed.api.schemas import (
    ErrorResponse,
    GaussianResponse,
    IntResponse,
    PointsResponse,
    ShuffleResponse,
    UniformResponse,
)
from artseed.config import SketchConfig
from artseed.systems.rng import RandomEngine

router = APIRouter(prefix="/random", responses={400: {"model": ErrorResponse}})


def _check_count(count: int, config: SketchConfig) -> None:
    if count > config.max_samples:
        raise HTTPException(
            status_code=400,
            detail=f"count={count} exceeds the configured maximum of {config.max_samples}",
        )


@router.get("/uniform", response_model=UniformResponse)
def get_uniform(
    count: int = Query(1, ge=1),
    engine: RandomEngine = Depends(get_engine),
    config: SketchConfig = Depends(get_config),
) -> UniformResponse:
    _check_count(count, config)
    return UniformResponse(seed=engine.seed, values=[engine.uniform() for _ in range(count)])


@router.get("/int", response_model=IntResponse)
def get_int(
    max_value: int = Query(100, ge=0, alias="max"),
    count: int = Query(1, ge=1),
    engine: RandomEngine = Depends(get_engine),
    config: SketchConfig = Depends(get_config),
) -> IntResponse:
    _check_count(count, config)
    values = [engine.int_value(max_value) for _ in range(count)]
    return IntResponse(seed=engine.seed, max=max_value, values=values)


@router.get("/gaussian", response_model=GaussianResponse)
def get_gaussian(
    count: int = Query(1, ge=1),
    mean: float = 0.0,
    std: float = 1.0,
    engine: RandomEngine = Depends(get_engine),
    config: SketchConfig = Depends(get_config),
) -> GaussianResponse:
    _check_count(count, config)
    values = [engine.gaussian(mean, std) for _ in range(count)]
    return GaussianResponse(seed=engine.seed, mean=mean, std=std, values=values)


@router.get("/shuffle", response_model=ShuffleResponse)
def get_shuffle(
    items: list[str] = Query([]),
    engine: RandomEngine = Depends(get_engine),
    config: SketchConfig = Depends(get_config),
) -> ShuffleResponse:
    _check_count(len(items), config)
    return ShuffleResponse(seed=engine.seed, items=engine.shuffle(items))


@router.get("/poisson", response_model=PointsResponse)
def get_poisson(
    width: float = Query(..., gt=0),
    height: float = Query(..., gt=0),
    spacing: float | None = Query(None, gt=0),
    engine: RandomEngine = Depends(get_engine),
    config: SketchConfig = Depends(get_config),
) -> PointsResponse:
    spacing = spacing or config.poisson_spacing
    check_poisson_grid(width, height, spacing, config)
    points = engine.poisson(width, height, spacing)
    return PointsResponse(seed=engine.seed, count=len(points), points=points)
