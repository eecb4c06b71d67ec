"""Exception types raised by the engine and its collaborators."""

from __future__ import annotations


class ArtseedError(Exception):
    """Base class for all artseed errors."""


class UnsupportedDimension(ArtseedError, ValueError):
    """Raised when a noise lookup is asked for a dimension tag it cannot serve."""

    def __init__(self, dimension: object) -> None:
        self.dimension = dimension
        super().__init__(f"Dimensionality of the noise is not supported: {dimension}")
