"""GET /api/v1/noise/{dimension} — coherent noise lookups."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from artseed.api.dependencies import get_engine
from artseed.api.schemas import ErrorResponse, NoiseResponse
from artseed.core.enums import NoiseDimension
from artseed.core.errors import UnsupportedDimension
from artseed.systems.rng import RandomEngine

router = APIRouter()


@router.get("/noise/{dimension}", response_model=NoiseResponse, responses={400: {"model": ErrorResponse}})
def get_noise(
    dimension: str,
    coords: list[float] = Query(..., description="One coordinate per axis, e.g. ?coords=0.5&coords=1.2"),
    engine: RandomEngine = Depends(get_engine),
) -> NoiseResponse:
    try:
        dim = NoiseDimension(dimension)
    except ValueError:
        raise UnsupportedDimension(dimension) from None

    if len(coords) != dim.arity:
        raise HTTPException(
            status_code=400,
            detail=f"{dim.value} noise takes {dim.arity} coordinate(s), got {len(coords)}",
        )
    return NoiseResponse(
        seed=engine.seed, dimension=dim.value, coords=coords, value=engine.noise(dim, *coords),
    )
