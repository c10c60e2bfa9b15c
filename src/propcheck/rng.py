# src/propcheck/rng.py
"""
rng.py
======
Deterministic, immutable pseudorandom state.

A :class:`RandomSource` is a value: calling :meth:`RandomSource.next` never
mutates it, it returns the drawn number together with the *successor*
source. Threading that successor into the next call is the caller's job,
which is what makes every run reproducible from its seed alone.

Transition
----------
SplitMix64: the 64-bit state advances by a fixed odd Weyl increment and
the output is the state passed through a two-round xor-shift-multiply
mixer. The sequence for a given seed is identical on every platform that
implements the same constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


__all__: list[str] = [
    "INT64_MAX",
    "INT64_MIN",
    "RandomSource",
    "abs_int64",
    "seed",
    "wrap_int64",
]

MASK_64: Final[int] = (1 << 64) - 1
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

_GOLDEN_GAMMA: Final[int] = 0x9E3779B97F4A7C15
_MIX_1: Final[int] = 0xBF58476D1CE4E5B9
_MIX_2: Final[int] = 0x94D049BB133111EB
_DOUBLE_UNIT: Final[float] = 1.0 / (1 << 53)


def wrap_int64(value: int) -> int:
    """Reinterpret ``value`` modulo 2**64 as a two's-complement int64."""
    value &= MASK_64
    return value - (1 << 64) if value > INT64_MAX else value


def abs_int64(value: int) -> int:
    """Absolute value that never leaves the non-negative int64 range.

    In two's-complement arithmetic ``abs(INT64_MIN)`` overflows back to
    ``INT64_MIN``. Here the minimum saturates to ``INT64_MAX`` instead.
    """
    if value == INT64_MIN:
        return INT64_MAX
    return abs(value)


def _mix(z: int) -> int:
    z = ((z ^ (z >> 30)) * _MIX_1) & MASK_64
    z = ((z ^ (z >> 27)) * _MIX_2) & MASK_64
    return z ^ (z >> 31)


@dataclass(frozen=True)
class RandomSource:
    """Opaque 64-bit generator state.

    Attributes
    ----------
    state
        Unsigned 64-bit state word. Two sources with equal ``state`` produce
        identical sequences.
    """

    state: int

    def __post_init__(self) -> None:
        if not 0 <= self.state <= MASK_64:
            raise ValueError(f"state must be an unsigned 64-bit integer, got {self.state}")

    @property
    def token(self) -> str:
        """Opaque rendering of the state, used in trace lines."""
        return f"{self.state:016x}"

    def next_uint64(self) -> tuple[int, RandomSource]:
        """Draw an unsigned 64-bit integer and the successor source."""
        advanced = (self.state + _GOLDEN_GAMMA) & MASK_64
        return _mix(advanced), RandomSource(advanced)

    def next(self) -> tuple[int, RandomSource]:
        """Draw a signed 64-bit integer and the successor source."""
        raw, successor = self.next_uint64()
        return wrap_int64(raw), successor

    def next_double(self) -> tuple[float, RandomSource]:
        """Draw a float in ``[0, 1)`` from the top 53 bits of one draw."""
        raw, successor = self.next_uint64()
        return (raw >> 11) * _DOUBLE_UNIT, successor

    def next_bool(self) -> tuple[bool, RandomSource]:
        raw, successor = self.next_uint64()
        return bool(raw >> 63), successor

    def __repr__(self) -> str:
        return f"RandomSource({self.token})"


def seed(value: int) -> RandomSource:
    """Create a source from an integer seed (reduced modulo 2**64)."""
    return RandomSource(value & MASK_64)
