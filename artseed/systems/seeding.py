"""Seed helpers: normalization, entropy defaults, and text seeds.

A sketch seed is a signed 32-bit integer. It usually comes from a UI
control (a number or a phrase); when nothing is supplied, one is drawn
from OS entropy and logged so the run can be reproduced later.
"""

from __future__ import annotations

import logging
import secrets

import xxhash

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000

# Default seeds stay small enough to type back into a UI field.
DEFAULT_SEED_RANGE = 10000


def normalize_seed(value: int | float) -> int:
    """Coerce ``value`` into the signed 32-bit range (floats are truncated)."""
    n = int(value) & _MASK32
    return n - (1 << 32) if n & _SIGN_BIT else n


def default_seed() -> int:
    """Return a fresh entropy-derived seed in [0, DEFAULT_SEED_RANGE)."""
    seed = secrets.randbelow(DEFAULT_SEED_RANGE)
    logger.info("No seed supplied, using seed=%d", seed)
    return seed


def seed_from_text(text: str) -> int:
    """Stable seed for a phrase. Same text, same seed, on every platform."""
    return normalize_seed(xxhash.xxh32_intdigest(text.encode("utf-8")))


def resolve_seed(*candidates: int | float | str | None) -> int:
    """First usable candidate as a seed, falling back to ``default_seed()``.

    Numeric strings are read as numbers; any other string is hashed.
    """
    for candidate in candidates:
        if candidate is None:
            continue
        if isinstance(candidate, str):
            text = candidate.strip()
            if not text:
                continue
            try:
                return normalize_seed(int(text))
            except ValueError:
                return seed_from_text(text)
        return normalize_seed(candidate)
    return default_seed()
