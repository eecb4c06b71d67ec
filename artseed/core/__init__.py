"""Core data models, enums and errors."""

from artseed.core.enums import NoiseDimension
from artseed.core.errors import ArtseedError, UnsupportedDimension
from artseed.core.models import Dot, Point, Polyline, Rect, Scene

__all__ = [
    "ArtseedError", "Dot", "NoiseDimension", "Point", "Polyline", "Rect",
    "Scene", "UnsupportedDimension",
]
