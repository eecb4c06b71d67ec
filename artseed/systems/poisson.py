"""Blue-noise (Poisson-disk) point generation.

Bridson's algorithm over a background grid of cell size ``spacing / sqrt(2)``
so each cell holds at most one sample. All randomness comes from the
injected ``uniform`` callable; the sampler owns no RNG of its own, so the
caller decides what seed and call history the layout depends on.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from artseed.core.models import Point

logger = logging.getLogger(__name__)

UniformFn = Callable[[], float]


class PoissonDiskSampler:
    """Generate points in ``[0, width) x [0, height)`` no closer than ``spacing``."""

    __slots__ = ("_width", "_height", "_spacing", "_uniform", "_max_attempts",
                 "_cell", "_cols", "_rows")

    def __init__(
        self,
        width: float,
        height: float,
        spacing: float,
        uniform: UniformFn,
        max_attempts: int = 30,
    ) -> None:
        if spacing <= 0:
            raise ValueError(f"spacing must be positive, got {spacing}")
        self._width = width
        self._height = height
        self._spacing = spacing
        self._uniform = uniform
        self._max_attempts = max_attempts
        self._cell = spacing / math.sqrt(2)
        self._cols = max(1, math.ceil(width / self._cell))
        self._rows = max(1, math.ceil(height / self._cell))

    @staticmethod
    def grid_cells(width: float, height: float, spacing: float) -> float:
        """Background grid size the sampler would allocate for these inputs.

        Returns ``math.inf`` when the grid is too large to even count.
        """
        cell = spacing / math.sqrt(2)
        if cell <= 0:
            return math.inf
        cols, rows = width / cell, height / cell
        if not math.isfinite(cols * rows):
            return math.inf
        return max(1, math.ceil(cols)) * max(1, math.ceil(rows))

    def generate(self) -> list[Point]:
        """Run the sampler to exhaustion and return points in placement order."""
        if self._width <= 0 or self._height <= 0:
            return []

        grid: list[int] = [-1] * (self._cols * self._rows)
        points: list[Point] = []
        active: list[int] = []
        rand = self._uniform

        first = (rand() * self._width, rand() * self._height)
        self._insert(grid, points, active, first)

        while active:
            slot = math.floor(rand() * len(active))
            origin = points[active[slot]]
            for _ in range(self._max_attempts):
                candidate = self._around(origin)
                if self._fits(grid, points, candidate):
                    self._insert(grid, points, active, candidate)
                    break
            else:
                # Swap-remove: ordering of the active list is not significant.
                active[slot] = active[-1]
                active.pop()

        logger.debug(
            "Poisson sampler placed %d points in %sx%s (spacing=%s)",
            len(points), self._width, self._height, self._spacing,
        )
        return points

    # ------------------------------------------------------------------

    def _around(self, origin: Point) -> Point:
        # Annulus [spacing, 2*spacing) around the origin.
        theta = self._uniform() * 2.0 * math.pi
        dist = self._spacing * (1.0 + self._uniform())
        return (origin[0] + dist * math.cos(theta), origin[1] + dist * math.sin(theta))

    def _cell_of(self, p: Point) -> tuple[int, int]:
        return int(p[0] / self._cell), int(p[1] / self._cell)

    def _fits(self, grid: list[int], points: list[Point], p: Point) -> bool:
        x, y = p
        if not (0.0 <= x < self._width and 0.0 <= y < self._height):
            return False
        cx, cy = self._cell_of(p)
        min_sq = self._spacing * self._spacing
        for gy in range(max(0, cy - 2), min(self._rows, cy + 3)):
            row = gy * self._cols
            for gx in range(max(0, cx - 2), min(self._cols, cx + 3)):
                idx = grid[row + gx]
                if idx < 0:
                    continue
                ox, oy = points[idx]
                if (ox - x) ** 2 + (oy - y) ** 2 < min_sq:
                    return False
        return True

    def _insert(self, grid: list[int], points: list[Point], active: list[int], p: Point) -> None:
        cx, cy = self._cell_of(p)
        grid[cy * self._cols + cx] = len(points)
        active.append(len(points))
        points.append(p)
