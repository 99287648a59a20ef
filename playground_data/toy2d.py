from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence

import torch
from torch.utils.data import Dataset, DataLoader
from sklearn.model_selection import train_test_split

from .generators import Example2D, canonical_name, examples_to_arrays, make_playground_dataset
from .sampling import RandomSource


@dataclass
class PlaygroundConfig:
    """Configuration for one playground dataset and its train/test loaders.

    Attributes:
        dataset: Generator name (gauss | reg-plane | reg-gauss | spiral | circle
            | donut | bullseye | star | xor) or an accepted alias
        num_samples: Points requested from the generator
        noise: Noise multiplier, typically in [0, 0.5]
        test_ratio: Fraction of the examples held out for testing
        seed: Seed for the random source (None for fresh entropy)
        batch_size: DataLoader batch size
        shuffle: Shuffle the examples once after generation
    """
    dataset: str = "circle"
    num_samples: int = 500
    noise: float = 0.0
    test_ratio: float = 0.5
    seed: int | None = None
    batch_size: int = 10
    shuffle: bool = True

    def __post_init__(self):
        self.dataset = canonical_name(self.dataset)
        if self.num_samples < 0:
            raise ValueError("num_samples must be non-negative")
        if self.noise < 0:
            raise ValueError("noise must be non-negative")
        if not 0 <= self.test_ratio < 1:
            raise ValueError("test_ratio must be in [0, 1)")
        if self.batch_size < 1:
            raise ValueError("batch_size must be >= 1")


class PlaygroundDataset(Dataset):
    def __init__(self, examples: Sequence[Example2D]) -> None:
        X, y = examples_to_arrays(examples)
        self.x = torch.from_numpy(X).float()
        self.y = torch.from_numpy(y).float()

    def __len__(self) -> int: return self.x.shape[0]
    def __getitem__(self, idx: int) -> tuple[torch.Tensor, torch.Tensor]: return self.x[idx], self.y[idx]


def generate_examples(cfg: PlaygroundConfig, rng: RandomSource | None = None) -> list[Example2D]:
    rng = rng if rng is not None else RandomSource(cfg.seed)
    examples = make_playground_dataset(
        cfg.dataset,
        num_samples=cfg.num_samples,
        noise=cfg.noise,
        rng=rng,
    )
    if cfg.shuffle:
        rng.shuffle(examples)
    return examples


def split_train_test(
    examples: Sequence[Example2D],
    test_ratio: float,
) -> tuple[list[Example2D], list[Example2D]]:
    """Split in order: the last ``ceil(N * test_ratio)`` examples are held out.

    Examples are expected to be shuffled already, so no reordering happens here.
    """
    examples = list(examples)
    # round first so 10 * 0.3 does not ceil to 4
    n_test = math.ceil(round(len(examples) * test_ratio, 9))
    n_train = len(examples) - n_test
    if n_train == 0 or n_test == 0:
        return examples[:n_train], examples[n_train:]
    train, test = train_test_split(examples, train_size=n_train, test_size=n_test, shuffle=False)
    return list(train), list(test)


def get_playground_loaders(
    cfg: PlaygroundConfig,
    rng: RandomSource | None = None,
) -> tuple[DataLoader, DataLoader]:
    train, test = split_train_test(generate_examples(cfg, rng), cfg.test_ratio)
    train_loader = DataLoader(PlaygroundDataset(train), batch_size=cfg.batch_size, shuffle=False, num_workers=0)
    test_loader = DataLoader(PlaygroundDataset(test), batch_size=cfg.batch_size, shuffle=False, num_workers=0)
    return train_loader, test_loader
