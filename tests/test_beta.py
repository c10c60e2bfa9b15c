"""
Tests for :mod:`propcheck.beta`.

The sampler is checked the way a caller would check it: values stay in the
unit interval, runs are reproducible, and sample moments match the
theoretical ones within a stated tolerance.
"""

from __future__ import annotations

import numpy as np
import pytest

from propcheck.beta import beta_density, beta_moments, beta_peak, beta_sampler
from propcheck.errors.gen import InvalidRange
from propcheck.outcome import Passed
from propcheck.prop import for_all
from propcheck.rng import seed
from tests.helpers import MEAN_TOLERANCE, SAMPLE_SIZE, SEED, expect_failure, expect_success

_SHAPES: tuple[tuple[float, float], ...] = ((1.0, 1.0), (2.0, 5.0), (5.0, 2.0), (2.0, 2.0), (1.0, 3.0))


def test_peak_is_density_maximum() -> None:
    grid = np.linspace(0.0, 1.0, 4_001)[1:-1]
    for alpha, beta in _SHAPES:
        density = beta_density(alpha, beta)
        grid_max = max(density(float(x)) for x in grid)
        assert beta_peak(alpha, beta) == pytest.approx(grid_max, rel=5e-3)


def test_values_in_unit_interval() -> None:
    gen = expect_success(beta_sampler(2.0, 5.0))
    result = for_all(gen, lambda x: 0.0 <= x <= 1.0).run(500, seed(SEED))
    assert isinstance(result, Passed)


def test_reproducible() -> None:
    gen = expect_success(beta_sampler(2.0, 2.0))
    assert gen.draws(100, seed(SEED)) == gen.draws(100, seed(SEED))


@pytest.mark.statistical
@pytest.mark.parametrize(("alpha", "beta"), _SHAPES)
def test_sample_moments(alpha: float, beta: float) -> None:
    values, _ = expect_success(beta_sampler(alpha, beta)).draws(SAMPLE_SIZE, seed(SEED))
    sample = np.asarray(values, dtype=np.float64)
    mean, variance = beta_moments(alpha, beta)
    assert abs(float(sample.mean()) - mean) < MEAN_TOLERANCE
    assert abs(float(sample.var()) - variance) < MEAN_TOLERANCE


@pytest.mark.parametrize(
    ("alpha", "beta"),
    [(0.5, 2.0), (2.0, 0.9), (float("nan"), 2.0), (2.0, float("inf"))],
)
def test_unbounded_or_invalid_shapes(alpha: float, beta: float) -> None:
    assert isinstance(expect_failure(beta_sampler(alpha, beta)), InvalidRange)
