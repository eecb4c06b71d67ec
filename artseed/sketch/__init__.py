"""Sketches: scene descriptions built from a RandomEngine and a Viewport."""

from artseed.sketch.design import Design

__all__ = ["Design"]
