"""Core data models: Point and the scene primitives a sketch produces."""

from __future__ import annotations

from dataclasses import dataclass, field

# Geometric samples are plain (x, y) tuples so they unpack cheaply in drawing loops.
Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned filled rectangle, in pixels."""

    x: float
    y: float
    width: float
    height: float
    fill: str = "white"


@dataclass(frozen=True, slots=True)
class Polyline:
    """Open stroked path through ``points``."""

    points: tuple[Point, ...]
    stroke: str = "black"
    stroke_width: float = 1.0


@dataclass(frozen=True, slots=True)
class Dot:
    """Filled circle centred on ``center``."""

    center: Point
    radius: float
    fill: str = "white"


Shape = Rect | Polyline | Dot


@dataclass(frozen=True, slots=True)
class Scene:
    """Everything one sketch run draws, in paint order."""

    seed: int
    width: int
    height: int
    shapes: tuple[Shape, ...] = field(default_factory=tuple)

    def count(self, kind: type) -> int:
        return sum(1 for s in self.shapes if isinstance(s, kind))
