"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, unique


@unique
class NoiseDimension(str, Enum):
    """Dimension tags accepted by ``RandomEngine.noise``."""

    ONE = "1d"      # 2D lookup with y pinned to 0
    TWO = "2d"
    THREE = "3d"
    FOUR = "4d"

    @property
    def arity(self) -> int:
        """Number of coordinates the caller must supply."""
        return int(self.value[0])
