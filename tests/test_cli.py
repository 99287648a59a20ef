from __future__ import annotations

import pytest

from playground_data.cli import main, parse_args, summarize
from playground_data.toy2d import PlaygroundConfig


def test_summarize_classification_counts() -> None:
    summary = summarize(PlaygroundConfig(dataset="circle", num_samples=100, seed=0))
    assert summary["n_examples"] == 100
    assert summary["n_train"] + summary["n_test"] == 100
    assert summary["label_counts"] == {-1: 50, 1: 50}


def test_summarize_regression_range() -> None:
    summary = summarize(PlaygroundConfig(dataset="reg-plane", num_samples=200, seed=0))
    lo, hi = summary["label_range"]
    assert -1.2 <= lo <= hi <= 1.2
    assert "label_counts" not in summary


def test_summarize_empty_dataset() -> None:
    summary = summarize(PlaygroundConfig(dataset="xor", num_samples=0))
    assert summary["n_examples"] == 0
    assert "x_range" not in summary


def test_parse_args_maps_flags() -> None:
    cfg = parse_args(["--dataset", "bullseye", "--num-samples", "12", "--noise", "0.2", "--seed", "4", "--no-shuffle"])
    assert cfg == PlaygroundConfig(dataset="bullseye", num_samples=12, noise=0.2, seed=4, shuffle=False)


def test_parse_args_rejects_bad_ratio() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--test-ratio", "1.5"])


def test_main_prints_summary(capsys) -> None:
    main(["--dataset", "xor", "--num-samples", "20", "--seed", "1"])
    out = capsys.readouterr().out
    assert "[xor] 20 examples | train 10 | test 10" in out
    assert "label +1:" in out or "label -1:" in out


def test_parse_args_accepts_aliases() -> None:
    assert parse_args(["--dataset", "two_gauss"]).dataset == "gauss"


def test_parse_args_rejects_unknown_dataset(capsys) -> None:
    with pytest.raises(SystemExit):
        parse_args(["--dataset", "moons"])
    assert "Unknown playground dataset" in capsys.readouterr().err
