"""Engine systems: RNG, noise, blue noise, viewport units, seeding."""

from artseed.systems.poisson import PoissonDiskSampler
from artseed.systems.rng import RandomEngine
from artseed.systems.units import Viewport

__all__ = ["PoissonDiskSampler", "RandomEngine", "Viewport"]
