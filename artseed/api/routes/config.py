"""GET /api/v1/config — expose sketch configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from artseed.api.dependencies import get_config
from artseed.api.schemas import SketchConfigResponse
from artseed.config import SketchConfig

router = APIRouter()


@router.get("/config", response_model=SketchConfigResponse)
def get_sketch_config(config: SketchConfig = Depends(get_config)) -> SketchConfigResponse:
    return SketchConfigResponse(
        seed=config.seed,
        width=config.width,
        height=config.height,
        poisson_spacing=config.poisson_spacing,
        dot_spacing=config.dot_spacing,
        max_samples=config.max_samples,
        max_grid_cells=config.max_grid_cells,
    )
