"""Seeded deterministic RNG for sketches.

The Golden Rule: every value a sketch draws depends ONLY on the seed and
the order of calls made on the engine. Nothing advances the state except
an explicit draw.

Formula: state += 0xABAD1DEA (mod 2^32), Value = mix32(state) / 2^32
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, TypeVar

from artseed.core.enums import NoiseDimension
from artseed.core.errors import UnsupportedDimension
from artseed.core.models import Point
from artseed.systems.noise import CoherentNoise, NoiseFactory, simplex_noise
from artseed.systems.poisson import PoissonDiskSampler

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0xABAD1DEA
_TWO_POW_32 = 4294967296.0
_TAU = 2.0 * math.pi


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply on unsigned operands."""
    return (a * b) & _MASK32


def mix32(t: int) -> int:
    """Finalize a 32-bit state word into a well-scrambled 32-bit output."""
    t &= _MASK32
    t = _imul(t ^ (t >> 15), t | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
    return (t ^ (t >> 14)) & _MASK32


class RandomEngine:
    """Stateful pseudo-random source for a single sketch run.

    One engine per run; never share one between threads. Parallel variants
    each construct their own engine (and with it their own noise source).
    """

    __slots__ = ("_seed", "_state", "_pending_gaussian", "_noise", "_draws")

    def __init__(self, seed: int, noise_factory: NoiseFactory = simplex_noise) -> None:
        self._seed = seed
        self._state = seed & _MASK32
        self._pending_gaussian: float | None = None
        self._noise: CoherentNoise = noise_factory(seed + 1)
        self._draws = 0
        logger.debug("RandomEngine created with seed=%d", seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        """Current 32-bit state word (read-only)."""
        return self._state

    @property
    def pending_gaussian(self) -> float | None:
        """Second deviate of the last polar pair, if not yet consumed."""
        return self._pending_gaussian

    @property
    def draws(self) -> int:
        """Number of uniform draws made so far."""
        return self._draws

    # ------------------------------------------------------------------
    # Uniform stream
    # ------------------------------------------------------------------

    def uniform(self) -> float:
        """Return a deterministic float in [0.0, 1.0) and advance the state."""
        self._state = (self._state + _INCREMENT) & _MASK32
        self._draws += 1
        return mix32(self._state) / _TWO_POW_32

    # Older sketches call it ``value``.
    value = uniform

    def int_value(self, max_value: int) -> int:
        """Return ``round(uniform() * max_value)``: an integer in [0, max_value] inclusive.

        Rounds half up, so both ends carry half the weight of the interior
        values. Kept that way so existing seeds reproduce existing artwork.
        """
        return math.floor(self.uniform() * max_value + 0.5)

    def between(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        return low + self.uniform() * (high - low)

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element using a single draw."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[math.floor(self.uniform() * len(seq))]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def on_circle(self, radius: float = 1.0) -> Point:
        """Uniformly-angled point exactly on the circle of ``radius`` (one draw)."""
        theta = self.uniform() * _TAU
        return radius * math.cos(theta), radius * math.sin(theta)

    def inside_circle(self, radius: float = 1.0) -> Point:
        """Point uniformly distributed over the disk of ``radius`` (two draws).

        The angle is drawn first, then the distance. The square root keeps
        area density uniform; a linear scale would crowd the centre.
        """
        x, y = self.on_circle(1.0)
        r = radius * math.sqrt(self.uniform())
        return x * r, y * r

    # ------------------------------------------------------------------
    # Gaussian
    # ------------------------------------------------------------------

    def gaussian(self, mean: float = 0.0, std: float = 1.0) -> float:
        """Normal deviate via the Marsaglia polar method.

        Each accepted pair yields two deviates: the first is returned, the
        second is held in ``pending_gaussian`` and returned by the next call
        without drawing.
        """
        if self._pending_gaussian is not None:
            cached = self._pending_gaussian
            self._pending_gaussian = None
            return mean + std * cached

        while True:
            v1 = self.uniform() * 2.0 - 1.0
            v2 = self.uniform() * 2.0 - 1.0
            s = v1 * v1 + v2 * v2
            if 0.0 < s < 1.0:
                break
        multiplier = math.sqrt(-2.0 * math.log(s) / s)
        self._pending_gaussian = v2 * multiplier
        return mean + std * (v1 * multiplier)

    # ------------------------------------------------------------------
    # Delegated collaborators
    # ------------------------------------------------------------------

    def noise(self, dimension: NoiseDimension | str, *params: float) -> float:
        """Coherent noise lookup. Does not touch the uniform stream.

        ``"1d"`` is a 2D lookup along the x axis (y = 0).
        """
        try:
            dim = NoiseDimension(dimension)
        except ValueError:
            raise UnsupportedDimension(dimension) from None

        if dim is NoiseDimension.ONE:
            return self._noise.noise2(params[0], 0.0)
        if dim is NoiseDimension.TWO:
            return self._noise.noise2(params[0], params[1])
        if dim is NoiseDimension.THREE:
            return self._noise.noise3(params[0], params[1], params[2])
        return self._noise.noise4(params[0], params[1], params[2], params[3])

    def poisson(self, width: float, height: float, spacing: float) -> list[Point]:
        """Blue-noise point set drawn from this engine's uniform stream."""
        return PoissonDiskSampler(width, height, spacing, self.uniform).generate()

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        """Return a shuffled copy of ``seq`` (Fisher-Yates, one draw per element)."""
        items = list(seq)
        counter = len(items)
        while counter > 0:
            index = math.floor(self.uniform() * counter)
            counter -= 1
            items[counter], items[index] = items[index], items[counter]
        return items

    def __repr__(self) -> str:
        return f"RandomEngine(seed={self._seed}, draws={self._draws})"
