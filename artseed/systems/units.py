"""Viewport units for sketches.

Never hard-code a pixel dimension in a sketch (positions, line widths,
offsets). Express it as a percentage of the canvas, the way CSS ``vw`` /
``vh`` / ``vmin`` / ``vmax`` work, and convert through a ``Viewport``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artseed.config import SketchConfig


@dataclass(frozen=True, slots=True)
class Viewport:
    """Canvas dimensions in pixels."""

    width: float
    height: float

    @classmethod
    def from_config(cls, config: SketchConfig) -> Viewport:
        return cls(config.width, config.height)

    def vw(self, percent: float) -> float:
        """Pixel value for ``percent`` (0-100) of the width."""
        return self.width * (percent / 100)

    def vh(self, percent: float) -> float:
        """Pixel value for ``percent`` (0-100) of the height."""
        return self.height * (percent / 100)

    def vmin(self, percent: float) -> float:
        return min(self.width, self.height) * (percent / 100)

    def vmax(self, percent: float) -> float:
        return max(self.width, self.height) * (percent / 100)
