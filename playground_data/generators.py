"""
Labeled 2D point generators in the style of the neural network playground.

All generators share the signature ``(num_samples, noise, rng=None)`` and
return a fresh ``list[Example2D]``. Classification generators label points
with +1/-1, regression generators with a continuous value.

Group sizes are truncated (``num_samples // 2`` per class, ``num_samples //
ring_count`` per ring), so the output may hold slightly fewer points than
requested.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

from .sampling import Point, RandomSource, dist, linear_scale, resolve_source


@dataclass(frozen=True)
class Example2D:
    """A two dimensional example: x and y coordinates with the label."""
    x: float
    y: float
    label: float


DataGenerator = Callable[..., list[Example2D]]

ORIGIN = Point(0.0, 0.0)


def _check_args(num_samples: int, noise: float) -> None:
    if num_samples < 0:
        raise ValueError(f"num_samples must be non-negative, got {num_samples}")
    if noise < 0:
        raise ValueError(f"noise must be non-negative, got {noise}")


def _ring_label(ring_index: int) -> float:
    # innermost ring is positive, then alternate outwards
    return -1.0 if (ring_index + 1) % 2 == 0 else 1.0


# =============================================================================
# Classification
# =============================================================================

def classify_two_gauss_data(
    num_samples: int, noise: float, rng: RandomSource | None = None
) -> list[Example2D]:
    """Two Gaussian blobs: +1 around (2, 2), -1 around (-2, -2).

    Noise widens the blobs: noise in [0, 0.5] maps to variance in [0.5, 4].
    """
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    variance = linear_scale((0.0, 0.5), (0.5, 4.0))(noise)
    points: list[Example2D] = []

    def gen_gauss(cx: float, cy: float, label: float) -> None:
        for _ in range(num_samples // 2):
            x = rng.normal(cx, variance)
            y = rng.normal(cy, variance)
            points.append(Example2D(x, y, label))

    gen_gauss(2, 2, 1.0)
    gen_gauss(-2, -2, -1.0)
    return points


def classify_spiral_data(
    num_samples: int, noise: float, rng: RandomSource | None = None
) -> list[Example2D]:
    """Two interleaved spirals, the negative one rotated by pi."""
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    points: list[Example2D] = []
    n = num_samples // 2
    r_max = 5.2
    t_max = 2.5

    def gen_spiral(delta_t: float, label: float) -> None:
        for i in range(n):
            r = (i + 1) / n * r_max
            t = t_max * (i + 1) / n * 2 * math.pi + delta_t
            x = r * math.sin(t) + rng.uniform(-1, 1) * noise
            y = r * math.cos(t) + rng.uniform(-1, 1) * noise
            points.append(Example2D(x, y, label))

    gen_spiral(0.0, 1.0)
    gen_spiral(math.pi, -1.0)
    return points


def classify_circle_data(
    num_samples: int, noise: float, rng: RandomSource | None = None
) -> list[Example2D]:
    """A disk of positives surrounded by a ring of negatives.

    Points are drawn with a small gap around the boundary at ``radius * 0.4``.
    The label is decided at the noisy position while the stored coordinates
    stay noise free, so noise shows up as mislabeled points.
    """
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    points: list[Example2D] = []
    radius = 5.2
    r_size = 0.4
    r_gap = 0.05

    def circle_label(p: Point) -> float:
        return 1.0 if dist(p, ORIGIN) < radius * r_size else -1.0

    def gen_ring(r_min: float, r_max: float) -> None:
        for _ in range(num_samples // 2):
            r = rng.uniform(r_min, r_max) * radius
            angle = rng.uniform(0, 2 * math.pi)
            x = r * math.sin(angle)
            y = r * math.cos(angle)
            noise_x = rng.uniform(-radius, radius) * noise
            noise_y = rng.uniform(-radius, radius) * noise
            label = circle_label(Point(x + noise_x, y + noise_y))
            points.append(Example2D(x, y, label))

    gen_ring(0, r_size - r_gap)  # inside the circle
    gen_ring(r_size + r_gap, 1)  # outside the circle
    return points


def classify_donut_data(
    num_samples: int, noise: float, rng: RandomSource | None = None
) -> list[Example2D]:
    """A positive ring band; negatives fill the hole and the area outside.

    Labels are fixed per pass and never recomputed, so ``noise`` has no
    effect on this dataset.
    """
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    points: list[Example2D] = []
    radius = 5.0
    r_size = 0.5
    r_thickness = 0.2  # each side, actual thickness = this * 2
    r_gap = 0.02
    hole = r_size - r_thickness - r_gap * 2

    def gen_donut(label: float) -> None:
        for i in range(num_samples // 2):
            if label > 0:
                r = (rng.uniform(-1, 1) * (r_thickness - r_gap) + r_size) * radius
            elif i < num_samples / 5:
                # inside the inner circle of the donut
                r = rng.uniform(0, 1) * hole * radius
            else:
                r = (1 - rng.uniform(1, 0) * hole) * radius
            angle = rng.uniform(0, 2 * math.pi)
            points.append(Example2D(r * math.sin(angle), r * math.cos(angle), label))

    gen_donut(1.0)
    gen_donut(-1.0)
    return points


def classify_bullseye_data(
    num_samples: int,
    noise: float,
    rng: RandomSource | None = None,
    *,
    ring_count: int = 4,
) -> list[Example2D]:
    """Concentric rings with alternating labels, +1 for the innermost one.

    Each ring keeps a 10% gap on both edges. ``noise`` is not applied.
    """
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    points: list[Example2D] = []
    if ring_count <= 0:
        return points
    radius = 5.0
    ring_thickness = 1 / ring_count
    r_gap_ratio = 0.1

    for ring_index in range(ring_count):
        label = _ring_label(ring_index)
        for _ in range(num_samples // ring_count):
            r = (rng.uniform(r_gap_ratio, 1 - r_gap_ratio) + ring_index) * ring_thickness * radius
            angle = rng.uniform(0, 2 * math.pi)
            points.append(Example2D(r * math.sin(angle), r * math.cos(angle), label))
    return points


def classify_star_data(
    num_samples: int,
    noise: float,
    rng: RandomSource | None = None,
    *,
    ring_count: int = 4,
) -> list[Example2D]:
    """Experimental: nested six-bladed stars with alternating ring labels.

    The blade geometry is not final. Each point blends a "valley" direction
    (shrunk by the body ratio) with the nearest "peak" direction and is then
    scaled into its ring band. ``noise`` is not applied.
    """
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    points: list[Example2D] = []
    if ring_count <= 0:
        return points
    radius = 5.6
    blade_count = 6
    body_ratio = 0.5
    ring_thickness = 1 / ring_count
    r_gap_ratio = 0.4

    for ring_index in range(ring_count):
        label = _ring_label(ring_index)
        for _ in range(num_samples // ring_count):
            phase = rng.uniform(0, blade_count)
            valley_a = (math.floor(phase) % blade_count + 0.5) / blade_count * 2 * math.pi
            peak_a = (math.floor(phase + 0.5) % blade_count) / blade_count * 2 * math.pi
            blend = rng.uniform(0, 1)
            r = (rng.uniform(r_gap_ratio, 1 - r_gap_ratio) + ring_index) * ring_thickness * radius
            x = r * (blend * body_ratio * math.sin(valley_a) + (1 - blend) * math.sin(peak_a))
            y = r * (blend * body_ratio * math.cos(valley_a) + (1 - blend) * math.cos(peak_a))
            points.append(Example2D(x, y, label))
    return points


def classify_xor_data(
    num_samples: int, noise: float, rng: RandomSource | None = None
) -> list[Example2D]:
    """Quadrant labels: +1 where x*y >= 0, with a padded gap along both axes."""
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    points: list[Example2D] = []
    padding = 0.3

    for _ in range(num_samples):
        x = rng.uniform(-5, 5)
        x += padding if x > 0 else -padding
        y = rng.uniform(-5, 5)
        y += padding if y > 0 else -padding
        noise_x = rng.uniform(-5, 5) * noise
        noise_y = rng.uniform(-5, 5) * noise
        label = 1.0 if (x + noise_x) * (y + noise_y) >= 0 else -1.0
        points.append(Example2D(x, y, label))
    return points


# =============================================================================
# Regression
# =============================================================================

GAUSSIAN_BUMPS: tuple[tuple[float, float, float], ...] = (
    (-4, 2.5, 1),
    (0, 2.5, -1),
    (4, 2.5, 1),
    (-4, -2.5, -1),
    (0, -2.5, 1),
    (4, -2.5, -1),
)


def regress_plane(
    num_samples: int, noise: float, rng: RandomSource | None = None
) -> list[Example2D]:
    """Uniform square with label ``(x + y) / 10`` (unclamped)."""
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    radius = 6.0
    label_scale = linear_scale((-10.0, 10.0), (-1.0, 1.0))
    points: list[Example2D] = []

    for _ in range(num_samples):
        x = rng.uniform(-radius, radius)
        y = rng.uniform(-radius, radius)
        noise_x = rng.uniform(-radius, radius) * noise
        noise_y = rng.uniform(-radius, radius) * noise
        label = label_scale(x + noise_x + y + noise_y)
        points.append(Example2D(x, y, label))
    return points


def regress_gaussian(
    num_samples: int, noise: float, rng: RandomSource | None = None
) -> list[Example2D]:
    """Uniform square labeled by six signed bumps; the strongest one wins."""
    _check_args(num_samples, noise)
    rng = resolve_source(rng)
    radius = 6.0
    label_scale = linear_scale((0.0, 2.0), (1.0, 0.0), clamp=True)
    points: list[Example2D] = []

    def gaussian_label(p: Point) -> float:
        label = 0.0
        for cx, cy, sign in GAUSSIAN_BUMPS:
            candidate = sign * label_scale(dist(p, Point(cx, cy)))
            if abs(candidate) > abs(label):
                label = candidate
        return label

    for _ in range(num_samples):
        x = rng.uniform(-radius, radius)
        y = rng.uniform(-radius, radius)
        noise_x = rng.uniform(-radius, radius) * noise
        noise_y = rng.uniform(-radius, radius) * noise
        label = gaussian_label(Point(x + noise_x, y + noise_y))
        points.append(Example2D(x, y, label))
    return points


# =============================================================================
# Registry
# =============================================================================

DATA_GENERATORS: dict[str, DataGenerator] = {
    "gauss": classify_two_gauss_data,
    "reg-plane": regress_plane,
    "reg-gauss": regress_gaussian,
    "spiral": classify_spiral_data,
    "circle": classify_circle_data,
    "donut": classify_donut_data,
    "bullseye": classify_bullseye_data,
    "star": classify_star_data,
    "xor": classify_xor_data,
}

REGRESSION_DATASETS = frozenset({"reg-plane", "reg-gauss"})

_ALIASES = {
    "two_gauss": "gauss",
    "gaussian": "gauss",
    "plane": "reg-plane",
    "reg_plane": "reg-plane",
    "reg_gauss": "reg-gauss",
    "regress_gaussian": "reg-gauss",
    "spirals": "spiral",
    "circles": "circle",
    "rings": "bullseye",
}


def canonical_name(name: str) -> str:
    key = name.lower()
    key = _ALIASES.get(key, key)
    if key not in DATA_GENERATORS:
        raise ValueError(f"Unknown playground dataset: {name}")
    return key


def make_playground_dataset(
    name: str,
    *,
    num_samples: int,
    noise: float,
    rng: RandomSource | None = None,
) -> list[Example2D]:
    return DATA_GENERATORS[canonical_name(name)](num_samples, noise, rng)


def examples_to_arrays(examples: Sequence[Example2D]) -> tuple[np.ndarray, np.ndarray]:
    """Stack examples into ``X`` of shape (N, 2) and ``y`` of shape (N,)."""
    X = np.array([[e.x, e.y] for e in examples], dtype=np.float32).reshape(-1, 2)
    y = np.array([e.label for e in examples], dtype=np.float32)
    return X, y
