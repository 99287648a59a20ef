"""
playground_data

Synthetic labeled 2D datasets (gaussians, spirals, circles, donut, bullseye,
star, xor, plane and gaussian regression) for visualizing and testing
classifiers and regressors.

Typical usage:
    from playground_data import RandomSource, classify_spiral_data

    rng = RandomSource(seed=0)
    examples = classify_spiral_data(500, noise=0.1, rng=rng)
    rng.shuffle(examples)
"""

from __future__ import annotations

from .sampling import (
    Point,
    RandomSource,
    default_source,
    seed_default_source,
    rand_uniform,
    normal_random,
    shuffle,
    dist,
    linear_scale,
)
from .generators import (
    Example2D,
    DataGenerator,
    classify_two_gauss_data,
    regress_plane,
    regress_gaussian,
    classify_spiral_data,
    classify_circle_data,
    classify_donut_data,
    classify_bullseye_data,
    classify_star_data,
    classify_xor_data,
    DATA_GENERATORS,
    REGRESSION_DATASETS,
    make_playground_dataset,
    examples_to_arrays,
)
from .toy2d import (
    PlaygroundConfig,
    PlaygroundDataset,
    generate_examples,
    split_train_test,
    get_playground_loaders,
)

__all__ = [
    # sampling
    "Point",
    "RandomSource",
    "default_source",
    "seed_default_source",
    "rand_uniform",
    "normal_random",
    "shuffle",
    "dist",
    "linear_scale",
    # generators
    "Example2D",
    "DataGenerator",
    "classify_two_gauss_data",
    "regress_plane",
    "regress_gaussian",
    "classify_spiral_data",
    "classify_circle_data",
    "classify_donut_data",
    "classify_bullseye_data",
    "classify_star_data",
    "classify_xor_data",
    "DATA_GENERATORS",
    "REGRESSION_DATASETS",
    "make_playground_dataset",
    "examples_to_arrays",
    # torch
    "PlaygroundConfig",
    "PlaygroundDataset",
    "generate_examples",
    "split_train_test",
    "get_playground_loaders",
]
