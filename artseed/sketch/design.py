"""The default sketch.

A blue field, one white vertical line at a random column, and an orange
line traced through 1D noise across the middle of the canvas. With
``dot_spacing`` set, a layer of blue-noise dots is scattered on top.

Every dimension goes through the viewport, so the same seed draws the same
picture at any canvas size.
"""

from __future__ import annotations

import logging

from artseed.core.models import Dot, Point, Polyline, Rect, Scene, Shape
from artseed.systems.rng import RandomEngine
from artseed.systems.units import Viewport

logger = logging.getLogger(__name__)

BACKGROUND = "rgb(0, 70, 200)"
LINE_COLOR = "white"
NOISE_COLOR = "rgb(200, 70, 0)"
DOT_COLOR = "rgba(255, 255, 255, 0.6)"

NOISE_STEPS = 100
NOISE_STEP = 0.1


class Design:
    """Builds the scene for one sketch run."""

    __slots__ = ("_random", "_view", "_dot_spacing")

    def __init__(self, random: RandomEngine, viewport: Viewport, dot_spacing: float = 0.0) -> None:
        self._random = random
        self._view = viewport
        self._dot_spacing = dot_spacing

    def render(self) -> Scene:
        shapes: list[Shape] = [self._background(), self._vertical_line(), self._noise_line()]
        if self._dot_spacing > 0:
            shapes.extend(self._dots())

        scene = Scene(
            seed=self._random.seed,
            width=int(self._view.width),
            height=int(self._view.height),
            shapes=tuple(shapes),
        )
        logger.debug("Rendered seed=%d: %d shapes, %d draws",
                     scene.seed, len(scene.shapes), self._random.draws)
        return scene

    # ------------------------------------------------------------------

    def _background(self) -> Rect:
        v = self._view
        return Rect(0, 0, v.vw(100), v.vh(100), fill=BACKGROUND)

    def _vertical_line(self) -> Rect:
        v = self._view
        column = self._random.int_value(100)
        return Rect(v.vw(column), 0, v.vw(1), v.vh(100), fill=LINE_COLOR)

    def _noise_line(self) -> Polyline:
        v = self._view
        points: list[Point] = [(0.0, v.vh(50))]
        pos = 0.0
        for i in range(NOISE_STEPS):
            pos += NOISE_STEP
            offset = self._random.noise("1d", pos)
            points.append((v.vw(i), v.vh(50) + offset * v.vw(10)))
        return Polyline(tuple(points), stroke=NOISE_COLOR)

    def _dots(self) -> list[Dot]:
        v = self._view
        radius = v.vmin(0.5)
        return [
            Dot(p, radius, fill=DOT_COLOR)
            for p in self._random.poisson(v.width, v.height, self._dot_spacing)
        ]
