# src/propcheck/beta.py
"""
beta.py
=======
Beta-distribution sampler derived from uniform generators.

The sampler is the classic acceptance/rejection construction: draw
``x ~ U[0, 1]`` and ``y ~ U[0, M]`` where ``M`` is the peak of the Beta
density, and keep ``x`` when ``y <= pdf(x)``. The acceptance probability is
``1 / M``, strictly positive whenever the density is bounded, so the
unbounded :func:`~propcheck.sampling.accept_reject` terminates with
probability one. Shapes below 1 have an unbounded density and are rejected
at build time.

The density comes from :mod:`scipy.stats`.
"""

from __future__ import annotations

import math
from typing import Callable

from scipy import stats

from propcheck.errors.gen import InvalidRange
from propcheck.gen import Gen, choose_double
from propcheck.result import Failure, Result, Success
from propcheck.sampling import accept_reject


__all__: list[str] = ["beta_density", "beta_moments", "beta_peak", "beta_sampler"]


def _check_shapes(alpha: float, beta: float) -> InvalidRange | None:
    if not (math.isfinite(alpha) and math.isfinite(beta)):
        return InvalidRange(message="shape parameters must be finite", lo=alpha, hi=beta)
    if alpha < 1.0 or beta < 1.0:
        return InvalidRange(
            message="shape parameters must be >= 1 for a bounded density", lo=alpha, hi=beta
        )
    return None


def beta_density(alpha: float, beta: float) -> Callable[[float], float]:
    """Probability density of Beta(alpha, beta) on ``[0, 1]``."""
    frozen = stats.beta(alpha, beta)
    return lambda x: float(frozen.pdf(x))


def beta_peak(alpha: float, beta: float) -> float:
    """Maximum of the density, attained at the mode (``alpha, beta >= 1``).

    With a shape equal to 1 the mode sits on the boundary and the peak has a
    closed form: Beta(1, b) peaks at b, Beta(a, 1) at a.
    """
    if alpha == 1.0:
        return beta
    if beta == 1.0:
        return alpha
    mode = (alpha - 1.0) / (alpha + beta - 2.0)
    return beta_density(alpha, beta)(mode)


def beta_moments(alpha: float, beta: float) -> tuple[float, float]:
    """Theoretical ``(mean, variance)`` of Beta(alpha, beta)."""
    total = alpha + beta
    return alpha / total, alpha * beta / (total * total * (total + 1.0))


def beta_sampler(alpha: float, beta: float) -> Result[Gen[float], InvalidRange]:
    """Generator of Beta(alpha, beta) samples built by rejection sampling."""
    error = _check_shapes(alpha, beta)
    if error is not None:
        return Failure(error)

    density = beta_density(alpha, beta)
    match choose_double(0.0, 1.0), choose_double(0.0, beta_peak(alpha, beta)):
        case Success(xs), Success(ys):
            candidates = xs.zip(ys)
        case Failure(err), _:
            return Failure(err)
        case _, Failure(err):
            return Failure(err)
        case _:
            raise AssertionError("Unreachable: Result pattern match exhaustive")

    accepted = accept_reject(candidates, lambda point: point[1] <= density(point[0]))
    return Success(accepted.map(lambda point: point[0]))
