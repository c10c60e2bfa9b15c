"""
Tests for :mod:`propcheck.sampling`.

1. **Acceptance** - every returned value satisfies the predicate.
2. **State threading** - the returned source follows the accepted draw.
3. **Statistics** - ``x < 0.5`` over ``U[0, 1)`` has mean near 0.25.
4. **Budget** - the bounded variant reports exhaustion instead of looping.
"""

from __future__ import annotations

import numpy as np
import pytest

from propcheck.errors.gen import InvalidRange, SamplingExhausted
from propcheck.gen import Gen, choose_double, choose_int
from propcheck.result import Failure, Success
from propcheck.rng import seed
from propcheck.sampling import accept_reject, accept_reject_within
from tests.helpers import MEAN_TOLERANCE, SAMPLE_SIZE, SEED, expect_failure, expect_success


def _uniform() -> Gen[float]:
    return expect_success(choose_double(0.0, 1.0))


class TestAcceptReject:
    """Unbounded rejection sampling."""

    def test_every_value_accepted(self) -> None:
        evens = accept_reject(expect_success(choose_int(0, 1_000)), lambda n: n % 2 == 0)
        values, _ = evens.draws(500, seed(SEED))
        assert all(v % 2 == 0 for v in values)

    def test_returns_first_accepted_and_its_successor(self) -> None:
        base = expect_success(choose_int(0, 9))
        source = seed(SEED)
        current = source
        while True:
            candidate, current = base.run(current)
            if candidate >= 7:
                break
        assert accept_reject(base, lambda n: n >= 7).run(source) == (candidate, current)

    def test_always_true_consumes_one_draw(self) -> None:
        base = _uniform()
        source = seed(SEED)
        assert accept_reject(base, lambda _: True).run(source) == base.run(source)

    def test_reproducible(self) -> None:
        gen = accept_reject(_uniform(), lambda x: x < 0.1)
        assert gen.draws(50, seed(SEED)) == gen.draws(50, seed(SEED))

    def test_half_interval_mean(self) -> None:
        """Accepting ``x < 0.5`` from ``U[0, 1)`` gives ``U[0, 0.5)``, mean 0.25."""
        gen = accept_reject(_uniform(), lambda x: x < 0.5)
        values, _ = gen.draws(SAMPLE_SIZE, seed(SEED))
        sample = np.asarray(values, dtype=np.float64)
        assert float(sample.max()) < 0.5
        assert abs(float(sample.mean()) - 0.25) < MEAN_TOLERANCE


class TestAcceptRejectWithin:
    """Budgeted rejection sampling."""

    def test_accepts_within_budget(self) -> None:
        gen = expect_success(accept_reject_within(_uniform(), lambda x: x < 0.5, 64))
        values, _ = gen.draws(200, seed(SEED))
        assert all(isinstance(v, Success) and v.value < 0.5 for v in values)

    def test_matches_unbounded_when_accepted(self) -> None:
        bounded = expect_success(accept_reject_within(_uniform(), lambda x: x < 0.3, 1_000))
        unbounded = accept_reject(_uniform(), lambda x: x < 0.3)
        expected, expected_after = unbounded.run(seed(SEED))
        assert bounded.run(seed(SEED)) == (Success(expected), expected_after)

    def test_unsatisfiable_exhausts(self) -> None:
        base = _uniform()
        gen = expect_success(accept_reject_within(base, lambda _: False, 10))
        outcome, after = gen.run(seed(SEED))
        assert outcome == Failure(SamplingExhausted(attempts=10))
        _, expected_after = base.draws(10, seed(SEED))
        assert after == expected_after

    @pytest.mark.parametrize("budget", [0, -3])
    def test_invalid_budget(self, budget: int) -> None:
        error = expect_failure(accept_reject_within(_uniform(), bool, budget))
        assert isinstance(error, InvalidRange)
