"""
Random sampling primitives and small geometry helpers shared by the
playground dataset generators.

Every generator draws from a ``RandomSource``. Pass one explicitly for
reproducible data; otherwise the process-wide default source is used.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, MutableSequence, Protocol, TypeVar

import numpy as np

T = TypeVar("T")


class HasXY(Protocol):
    x: float
    y: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


# =============================================================================
# Random source
# =============================================================================

class RandomSource:
    """Uniform/normal sampler backed by a ``numpy.random.Generator``.

    Not thread-safe: give each thread its own instance.

    Example:
        >>> rng = RandomSource(seed=42)
        >>> rng.uniform(-5, 5)
        >>> rng.normal(mean=2, variance=0.5)
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def random01(self) -> float:
        """Uniform sample from [0, 1)."""
        return float(self.rng.random())

    def uniform(self, a: float, b: float) -> float:
        """Uniform sample from [a, b). ``a > b`` simply reverses the interval."""
        return a + self.random01() * (b - a)

    def normal(self, mean: float = 0.0, variance: float = 1.0) -> float:
        """Gaussian sample using the Marsaglia polar method.

        Candidates (v1, v2) are drawn from the square [-1, 1)^2 until they land
        inside the unit disk, excluding the origin. About pi/4 of the candidates
        are accepted, so the loop runs ~1.27 times on average. There is no cap
        on the number of rounds.

        Args:
            mean: Mean of the distribution
            variance: Variance of the distribution (0 returns ``mean``)

        Returns:
            A single sample as a float
        """
        while True:
            v1 = 2 * self.random01() - 1
            v2 = 2 * self.random01() - 1
            s = v1 * v1 + v2 * v2
            if 0 < s <= 1:
                break

        result = math.sqrt(-2 * math.log(s) / s) * v1
        return mean + math.sqrt(variance) * result

    def shuffle(self, items: MutableSequence[T]) -> None:
        """In-place Fisher-Yates shuffle."""
        for i in range(len(items) - 1, 0, -1):
            j = int(self.random01() * (i + 1))
            items[i], items[j] = items[j], items[i]


_default_source = RandomSource()


def default_source() -> RandomSource:
    return _default_source


def seed_default_source(seed: int | None) -> RandomSource:
    """Replace the process-wide source with a freshly seeded one."""
    global _default_source
    _default_source = RandomSource(seed)
    return _default_source


def resolve_source(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else _default_source


def rand_uniform(a: float, b: float) -> float:
    return _default_source.uniform(a, b)


def normal_random(mean: float = 0.0, variance: float = 1.0) -> float:
    return _default_source.normal(mean, variance)


def shuffle(items: MutableSequence[T]) -> None:
    _default_source.shuffle(items)


# =============================================================================
# Geometry
# =============================================================================

def dist(a: HasXY, b: HasXY) -> float:
    """Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def linear_scale(
    domain: tuple[float, float],
    range_: tuple[float, float],
    clamp: bool = False,
) -> Callable[[float], float]:
    """Linear map from ``domain`` onto ``range_``.

    With ``clamp=True`` inputs outside the domain map to the nearest range end.
    """
    d0, d1 = domain
    r0, r1 = range_
    span = d1 - d0

    def scale(value: float) -> float:
        t = (value - d0) / span
        if clamp:
            t = min(max(t, 0.0), 1.0)
        return r0 + t * (r1 - r0)

    return scale
