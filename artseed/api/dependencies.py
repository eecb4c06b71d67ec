"""FastAPI dependency injection: provides the active SketchConfig and per-request engines."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Query

from artseed.config import SketchConfig
from artseed.systems.poisson import PoissonDiskSampler
from artseed.systems.rng import RandomEngine
from artseed.systems.seeding import resolve_seed

_config: SketchConfig | None = None


def set_config(config: SketchConfig) -> None:
    global _config
    _config = config


def get_config() -> SketchConfig:
    if _config is None:
        raise RuntimeError("SketchConfig not initialized — server not started correctly.")
    return _config


def get_engine(
    seed: str | None = Query(None, description="Integer seed, or any phrase to hash into one."),
    config: SketchConfig = Depends(get_config),
) -> RandomEngine:
    """A fresh engine for this request. Engines are never shared between requests."""
    return RandomEngine(resolve_seed(seed, config.seed))


def check_poisson_grid(width: float, height: float, spacing: float, config: SketchConfig) -> None:
    """Reject blue-noise requests whose background grid would exceed ``max_grid_cells``."""
    cells = PoissonDiskSampler.grid_cells(width, height, spacing)
    if cells > config.max_grid_cells:
        raise HTTPException(
            status_code=400,
            detail=(
                f"{width}x{height} at spacing {spacing} needs {cells} grid cells, "
                f"over the configured maximum of {config.max_grid_cells}"
            ),
        )
