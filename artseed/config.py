"""Sketch configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SketchConfig:
    """Immutable configuration for a sketch run."""

    # Seed (None means: derive one from entropy at startup)
    seed: int | None = None

    # Canvas, in pixels
    width: int = 1200
    height: int = 800

    # Blue noise
    poisson_spacing: float = 40.0
    dot_spacing: float = 0.0               # 0 disables the dot layer in the sketch

    # API
    host: str = "127.0.0.1"
    port: int = 8000
    max_samples: int = 10000               # Upper bound for ?count= on sampling endpoints
    max_grid_cells: int = 250_000          # Upper bound for the Poisson background grid

    # Logging
    log_level: str = "INFO"
