"""Tests for benchmark configuration."""

from __future__ import annotations

import pytest

from engines.base import Direction
from harness.config import ITERATIONS_ENV, WARMUP_ENV, BenchmarkConfig


def test_defaults() -> None:
    config = BenchmarkConfig()
    assert config.iterations == 100
    assert config.warmup_iterations == 10
    assert (config.width, config.height) == (800, 600)
    assert config.direction is Direction.LTR


@pytest.mark.parametrize("iterations", [0, -1])
def test_iterations_must_be_positive(iterations: int) -> None:
    with pytest.raises(ValueError, match="iterations"):
        BenchmarkConfig(iterations=iterations)


def test_warmup_may_be_zero_but_not_negative() -> None:
    assert BenchmarkConfig(warmup_iterations=0).warmup_iterations == 0
    with pytest.raises(ValueError, match="warmup_iterations"):
        BenchmarkConfig(warmup_iterations=-1)


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ITERATIONS_ENV, raising=False)
    monkeypatch.delenv(WARMUP_ENV, raising=False)
    assert BenchmarkConfig.from_env() == BenchmarkConfig()


def test_from_env_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ITERATIONS_ENV, "250")
    monkeypatch.setenv(WARMUP_ENV, "0")
    config = BenchmarkConfig.from_env()
    assert config.iterations == 250
    assert config.warmup_iterations == 0


def test_explicit_values_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ITERATIONS_ENV, "250")
    config = BenchmarkConfig.from_env(iterations=5, warmup_iterations=1)
    assert config.iterations == 5
    assert config.warmup_iterations == 1


def test_to_dict() -> None:
    assert BenchmarkConfig(iterations=3).to_dict() == {
        "iterations": 3,
        "warmup_iterations": 10,
        "width": 800,
        "height": 600,
        "direction": "ltr",
    }
