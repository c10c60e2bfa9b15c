# src/propcheck/sampling.py
"""
Accept/reject (rejection) sampling on top of :class:`~propcheck.gen.Gen`.

Non-uniform distributions can be built from uniform generators by drawing
candidates and discarding those that fail an acceptance test. For a bounded
density ``f`` on ``[a, b]`` with ``f <= M``, drawing ``(x, y)`` uniformly from
``[a, b] x [0, M]`` and accepting when ``y <= f(x)`` yields ``x ~ f``.

Liveness
--------
:func:`accept_reject` imposes **no** retry bound. It terminates with
probability one only if ``predicate`` has a strictly positive acceptance
probability under ``underlying``; with an unsatisfiable predicate it loops
forever. Use :func:`accept_reject_within` when a bound is needed: it
produces ``Failure(SamplingExhausted(...))`` after ``max_attempts``
rejections instead of looping.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from propcheck.errors.gen import InvalidRange, SamplingExhausted
from propcheck.gen import Gen
from propcheck.result import Failure, Result, Success
from propcheck.rng import RandomSource


__all__: list[str] = ["accept_reject", "accept_reject_within"]

A = TypeVar("A")


def accept_reject(underlying: Gen[A], predicate: Callable[[A], bool]) -> Gen[A]:
    """Draw from ``underlying`` until a value satisfies ``predicate``.

    Each rejected draw's successor source feeds the next draw; the returned
    source is the one following the accepted draw. Unbounded, see the module
    docstring.
    """

    def draw(source: RandomSource) -> tuple[A, RandomSource]:
        current = source
        while True:
            candidate, current = underlying.run(current)
            if predicate(candidate):
                return candidate, current

    return Gen(draw)


def accept_reject_within(
    underlying: Gen[A],
    predicate: Callable[[A], bool],
    max_attempts: int,
) -> Result[Gen[Result[A, SamplingExhausted]], InvalidRange]:
    """Budgeted :func:`accept_reject`.

    Draws at most ``max_attempts`` candidates. The generator yields
    ``Success(value)`` for the first accepted candidate, or
    ``Failure(SamplingExhausted(attempts=max_attempts))`` together with the
    source following the last rejected draw.
    """
    if max_attempts < 1:
        return Failure(
            InvalidRange(message=f"max_attempts must be >= 1, got {max_attempts}", lo=max_attempts)
        )

    def draw(source: RandomSource) -> tuple[Result[A, SamplingExhausted], RandomSource]:
        current = source
        for _ in range(max_attempts):
            candidate, current = underlying.run(current)
            if predicate(candidate):
                return Success(candidate), current
        return Failure(SamplingExhausted(attempts=max_attempts)), current

    return Success(Gen(draw))
