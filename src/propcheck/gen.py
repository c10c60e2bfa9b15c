# src/propcheck/gen.py
"""
gen.py
======
Pure, state-threading generators.

A :class:`Gen` wraps a function ``RandomSource -> (value, RandomSource)``.
Drawing never mutates anything: the same generator run against the same
source always returns the same value and the same successor source.
Combinators build new function values around existing ones.

Builders whose parameters can be wrong (``choose_int``, ``choose_double``,
``one_of``, ``one_of_gens``, ``weighted``, ``list_of_n``) validate eagerly
and return a :data:`~propcheck.result.Result`. A ``Gen`` with malformed
parameters therefore cannot exist, and no draw ever fails.

Public API
----------
* :class:`Gen` - the generator value (``run``, ``sample``, ``draws``,
  ``map``, ``flat_map``, ``zip``).
* :func:`unit`, :func:`map2`, :func:`sequence`, :func:`booleans`.
* :func:`choose_int`, :func:`choose_double` - uniform inclusive ranges.
* :func:`one_of`, :func:`one_of_gens`, :func:`weighted` - choice.
* :func:`list_of_n` - fixed-length sequences.
* :data:`SGen`, :func:`list_of`, :func:`list_of_1` - size-driven generators.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeAlias, TypeVar

from propcheck.errors.gen import EmptyDomain, InvalidRange
from propcheck.result import Failure, Result, Success
from propcheck.rng import INT64_MAX, INT64_MIN, RandomSource


__all__: list[str] = [
    "Gen",
    "SGen",
    "booleans",
    "choose_double",
    "choose_int",
    "list_of",
    "list_of_1",
    "list_of_n",
    "map2",
    "one_of",
    "one_of_gens",
    "sequence",
    "unit",
    "weighted",
]

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Gen(Generic[A]):
    """A pure generator of ``A`` values.

    Attributes
    ----------
    step
        The state transition. Prefer :meth:`run` over calling it directly.
    """

    step: Callable[[RandomSource], tuple[A, RandomSource]]

    def run(self, source: RandomSource) -> tuple[A, RandomSource]:
        """Draw one value and return it with the successor source."""
        return self.step(source)

    def sample(self, source: RandomSource) -> A:
        """Draw one value, discarding the successor source."""
        value, _ = self.step(source)
        return value

    def draws(self, n: int, source: RandomSource) -> tuple[list[A], RandomSource]:
        """Draw ``n`` values in order, threading the source through each draw."""
        if n < 0:
            raise ValueError(f"cannot draw a negative number of values: {n}")
        values: list[A] = []
        current = source
        for _ in range(n):
            value, current = self.step(current)
            values.append(value)
        return values, current

    def map(self, f: Callable[[A], B]) -> Gen[B]:
        step = self.step

        def mapped(source: RandomSource) -> tuple[B, RandomSource]:
            value, successor = step(source)
            return f(value), successor

        return Gen(mapped)

    def flat_map(self, f: Callable[[A], Gen[B]]) -> Gen[B]:
        """Draw ``a``, then draw from ``f(a)`` against the resulting source."""
        step = self.step

        def chained(source: RandomSource) -> tuple[B, RandomSource]:
            value, successor = step(source)
            return f(value).run(successor)

        return Gen(chained)

    def zip(self, other: Gen[B]) -> Gen[tuple[A, B]]:
        """Draw from ``self`` then ``other``; return the pair."""
        return map2(self, other, lambda a, b: (a, b))


# --------------------------------------------------------------------------- #
# Primitive combinators                                                       #
# --------------------------------------------------------------------------- #


def unit(value: A) -> Gen[A]:
    """Constant generator; the source is returned unchanged."""
    return Gen(lambda source: (value, source))


def map2(ga: Gen[A], gb: Gen[B], f: Callable[[A, B], C]) -> Gen[C]:
    def combined(source: RandomSource) -> tuple[C, RandomSource]:
        a, after_a = ga.run(source)
        b, after_b = gb.run(after_a)
        return f(a, b), after_b

    return Gen(combined)


def sequence(gens: Sequence[Gen[A]]) -> Gen[list[A]]:
    """Run each generator in order, threading the source left to right."""
    frozen = tuple(gens)

    def sequenced(source: RandomSource) -> tuple[list[A], RandomSource]:
        values: list[A] = []
        current = source
        for gen in frozen:
            value, current = gen.run(current)
            values.append(value)
        return values, current

    return Gen(sequenced)


def booleans() -> Gen[bool]:
    return Gen(lambda source: source.next_bool())


# --------------------------------------------------------------------------- #
# Ranges                                                                      #
# --------------------------------------------------------------------------- #


def _scaled_index(span: int) -> Gen[int]:
    """Uniform integer in ``[0, span)`` by multiply-shift scaling of one draw.

    ``span`` must lie in ``[1, 2**64]``.
    """

    def draw(source: RandomSource) -> tuple[int, RandomSource]:
        raw, successor = source.next_uint64()
        return (raw * span) >> 64, successor

    return Gen(draw)


def choose_int(lo: int, hi: int) -> Result[Gen[int], InvalidRange]:
    """Uniform integer in the inclusive range ``[lo, hi]``.

    Both bounds must be int64 values. ``choose_int(lo, lo)`` always yields
    ``lo``.
    """
    if not (INT64_MIN <= lo <= INT64_MAX and INT64_MIN <= hi <= INT64_MAX):
        return Failure(InvalidRange(message="bounds must be int64 values", lo=lo, hi=hi))
    if lo > hi:
        return Failure(InvalidRange(message=f"lo ({lo}) > hi ({hi})", lo=lo, hi=hi))
    return Success(_scaled_index(hi - lo + 1).map(lambda offset: lo + offset))


def choose_double(lo: float, hi: float) -> Result[Gen[float], InvalidRange]:
    """Uniform float between ``lo`` and ``hi``.

    The draw interpolates ``lo * (1 - u) + hi * u`` with ``u`` in ``[0, 1)``,
    so no intermediate overflows even when ``hi - lo`` exceeds the largest
    float. The result is clamped to ``[lo, hi]`` against rounding, and
    ``choose_double(lo, lo)`` always yields ``lo``.
    """
    if not (math.isfinite(lo) and math.isfinite(hi)):
        return Failure(InvalidRange(message="bounds must be finite", lo=lo, hi=hi))
    if lo > hi:
        return Failure(InvalidRange(message=f"lo ({lo}) > hi ({hi})", lo=lo, hi=hi))

    def draw(source: RandomSource) -> tuple[float, RandomSource]:
        u, successor = source.next_double()
        return max(lo, min(lo * (1.0 - u) + hi * u, hi)), successor

    return Success(Gen(draw))


# --------------------------------------------------------------------------- #
# Choice                                                                      #
# --------------------------------------------------------------------------- #


def one_of(values: Sequence[A]) -> Result[Gen[A], EmptyDomain]:
    """Uniform choice among a fixed, non-empty collection of values."""
    choices = tuple(values)
    if not choices:
        return Failure(EmptyDomain(message="one_of requires at least one value"))
    return Success(_scaled_index(len(choices)).map(lambda i: choices[i]))


def one_of_gens(gens: Sequence[Gen[A]]) -> Result[Gen[A], EmptyDomain]:
    """Uniform choice of generator, then a draw from the chosen one."""
    return one_of(gens).map(lambda chooser: chooser.flat_map(lambda gen: gen))


def weighted(
    pairs: Sequence[tuple[float, Gen[A]]],
) -> Result[Gen[A], EmptyDomain | InvalidRange]:
    """Choose a generator with probability proportional to its weight.

    Weights must be finite and non-negative, with a positive total.
    """
    entries = tuple(pairs)
    if not entries:
        return Failure(EmptyDomain(message="weighted requires at least one generator"))
    weights = [w for w, _ in entries]
    if any(not math.isfinite(w) or w < 0 for w in weights):
        return Failure(InvalidRange(message="weights must be finite and non-negative"))
    total = math.fsum(weights)
    if total <= 0:
        return Failure(InvalidRange(message="weights must have a positive total"))

    def pick(u: float) -> Gen[A]:
        threshold = u * total
        cumulative = 0.0
        for weight, gen in entries:
            cumulative += weight
            if threshold < cumulative and weight > 0:
                return gen
        return next(gen for weight, gen in reversed(entries) if weight > 0)

    return Success(Gen(lambda source: source.next_double()).flat_map(pick))


# --------------------------------------------------------------------------- #
# Sequences                                                                   #
# --------------------------------------------------------------------------- #


def _replicate(n: int, gen: Gen[A]) -> Gen[list[A]]:
    return Gen(lambda source: gen.draws(n, source))


def list_of_n(n: int, gen: Gen[A]) -> Result[Gen[list[A]], InvalidRange]:
    """Exactly ``n`` elements, in draw order."""
    if n < 0:
        return Failure(InvalidRange(message=f"list length must be >= 0, got {n}", lo=n))
    return Success(_replicate(n, gen))


SGen: TypeAlias = Callable[[int], Gen[A]]
"""A generator parameterised by a size (see ``for_all_sized``)."""


def list_of(gen: Gen[A]) -> SGen[list[A]]:
    """Lists whose length equals the size passed in."""
    return lambda size: _replicate(max(size, 0), gen)


def list_of_1(gen: Gen[A]) -> SGen[list[A]]:
    """Like :func:`list_of`, but never empty."""
    return lambda size: _replicate(max(size, 1), gen)
