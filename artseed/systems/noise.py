"""Coherent-noise collaborator.

The engine only needs something it can seed once and query at 2, 3 or 4
coordinates. OpenSimplex provides that; tests swap in their own source
through ``NoiseFactory``.
"""

from __future__ import annotations

from typing import Callable, Protocol

from opensimplex import OpenSimplex


class CoherentNoise(Protocol):
    """Seeded smooth noise field, values roughly in [-1, 1]."""

    def noise2(self, x: float, y: float) -> float: ...

    def noise3(self, x: float, y: float, z: float) -> float: ...

    def noise4(self, x: float, y: float, z: float, w: float) -> float: ...


NoiseFactory = Callable[[int], CoherentNoise]


def simplex_noise(seed: int) -> CoherentNoise:
    """Default factory: an OpenSimplex generator for ``seed``."""
    return OpenSimplex(seed=seed)
