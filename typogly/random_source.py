#!/usr/bin/env python3
"""
Random Sources
==============
Uniform draws in [0, 1) for the scrambling engine.

Two sources are provided:
- SeededRandom: Park-Miller "minimal standard" LCG, reproducible from a seed
- AmbientRandom: non-deterministic draws from the system CSPRNG

The engine never reaches for a hidden global; it asks ``make_draw`` for a
draw function per call, and callers may inject their own ambient source.
"""

import secrets
from typing import Callable, Optional, Protocol


# =============================================================================
# Park-Miller Generator
# =============================================================================

MODULUS = 2147483647      # 2**31 - 1
MULTIPLIER = 16807        # 7**5


class SeededRandom:
    """
    Deterministic linear congruential generator.

    Uses the Park-Miller constants so a given seed yields the same stream
    in every implementation of this algorithm.

    Usage:
        rng = SeededRandom(42)
        rng.next()  # 0.0003287...
    """

    def __init__(self, seed: int):
        # Truncated remainder: negative seeds keep their sign before the fixup
        state = abs(seed) % MODULUS
        if seed < 0:
            state = -state
        if state <= 0:
            state += MODULUS - 1
        self._state = state

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        """Advance the generator and return a float in [0.0, 1.0)."""
        self._state = (self._state * MULTIPLIER) % MODULUS
        return (self._state - 1) / (MODULUS - 1)

    # Lets a SeededRandom stand in wherever an ambient source is accepted
    random = next


# =============================================================================
# Ambient Source
# =============================================================================

class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0.0, 1.0)."""

    def random(self) -> float:
        ...


class AmbientRandom:
    """Non-deterministic uniform source backed by ``secrets.SystemRandom``."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()


# Global instance
_ambient = AmbientRandom()

def get_rng() -> AmbientRandom:
    """Get the process-wide ambient random source."""
    return _ambient


# =============================================================================
# Draw Functions
# =============================================================================

Draw = Callable[[], float]


def make_draw(seed: Optional[int] = None, rng: Optional[RandomSource] = None) -> Draw:
    """
    Build the draw function for one scramble invocation.

    Args:
        seed: When given, a fresh SeededRandom drives every draw
        rng: Ambient source used when there is no seed (default: get_rng())

    Returns:
        Zero-argument callable returning floats in [0.0, 1.0)
    """
    if seed is not None:
        return SeededRandom(seed).next
    return (rng or get_rng()).random
