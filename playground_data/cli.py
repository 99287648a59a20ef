from __future__ import annotations
import argparse
from collections import Counter

import numpy as np

from .generators import DATA_GENERATORS, REGRESSION_DATASETS, examples_to_arrays
from .toy2d import PlaygroundConfig, generate_examples, split_train_test


def summarize(cfg: PlaygroundConfig) -> dict:
    examples = generate_examples(cfg)
    train, test = split_train_test(examples, cfg.test_ratio)
    X, y = examples_to_arrays(examples)

    summary = {
        "dataset": cfg.dataset,
        "n_examples": len(examples),
        "n_train": len(train),
        "n_test": len(test),
    }
    if len(examples):
        summary["x_range"] = (float(X[:, 0].min()), float(X[:, 0].max()))
        summary["y_range"] = (float(X[:, 1].min()), float(X[:, 1].max()))
        if cfg.dataset in REGRESSION_DATASETS:
            summary["label_range"] = (float(y.min()), float(y.max()))
            summary["label_mean"] = float(np.mean(y))
        else:
            summary["label_counts"] = {int(k): v for k, v in sorted(Counter(y.tolist()).items())}
    return summary


def parse_args(argv: list[str] | None = None) -> PlaygroundConfig:
    p = argparse.ArgumentParser(description="Generate a playground dataset and print a summary")
    p.add_argument("--dataset", type=str, default="circle",
                   help="one of: " + ", ".join(sorted(DATA_GENERATORS)))
    p.add_argument("--num-samples", type=int, default=500)
    p.add_argument("--noise", type=float, default=0.0)
    p.add_argument("--test-ratio", type=float, default=0.5)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--batch-size", type=int, default=10)
    p.add_argument("--no-shuffle", action="store_true")

    a = p.parse_args(argv)
    try:
        return PlaygroundConfig(
            dataset=a.dataset,
            num_samples=a.num_samples,
            noise=a.noise,
            test_ratio=a.test_ratio,
            seed=a.seed,
            batch_size=a.batch_size,
            shuffle=not a.no_shuffle,
        )
    except ValueError as e:
        p.error(str(e))


def main(argv: list[str] | None = None) -> None:
    cfg = parse_args(argv)
    print("Config:", cfg)

    summary = summarize(cfg)
    print(f"[{summary['dataset']}] {summary['n_examples']} examples "
          f"| train {summary['n_train']} | test {summary['n_test']}")
    if "x_range" in summary:
        print(f"   x in [{summary['x_range'][0]:.3f}, {summary['x_range'][1]:.3f}], "
              f"y in [{summary['y_range'][0]:.3f}, {summary['y_range'][1]:.3f}]")
    if "label_counts" in summary:
        for label, count in summary["label_counts"].items():
            print(f"   label {label:+d}: {count}")
    if "label_range" in summary:
        lo, hi = summary["label_range"]
        print(f"   label in [{lo:.3f}, {hi:.3f}], mean {summary['label_mean']:.3f}")


if __name__ == "__main__":
    main()
