"""
Error-accumulating validation and its bridge into properties.

A system under test that validates input returns either ``Valid(value)``
or ``Invalid(errors)`` with a non-empty, ordered tuple of messages. Unlike
:data:`~propcheck.result.Result`, combining two ``Invalid`` values keeps
*both* error lists (applicative accumulation) instead of stopping at the
first failure.

Usage:
    >>> def positive(n: int) -> Validated[int]:
    ...     return valid(n) if n > 0 else invalid(f"{n} is not positive")
    >>> map2(positive(-1), positive(0), lambda a, b: a + b)
    Invalid(errors=('-1 is not positive', '0 is not positive'), kind='Invalid')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Literal, TypeVar

from propcheck.gen import Gen
from propcheck.prop import Prop, for_all_described


__all__: list[str] = [
    "Invalid",
    "Valid",
    "Validated",
    "for_all_validated",
    "invalid",
    "map2",
    "merge",
    "traverse",
    "valid",
]

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Validation succeeded with ``value``."""

    value: T
    kind: Literal["Valid"] = "Valid"


@dataclass(frozen=True)
class Invalid:
    """Validation failed; ``errors`` is non-empty and ordered."""

    errors: tuple[str, ...]
    kind: Literal["Invalid"] = "Invalid"

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Invalid requires at least one error message")


Validated = Valid[T] | Invalid


def valid(value: T) -> Validated[T]:
    return Valid(value)


def invalid(first: str, *rest: str) -> Validated[T]:
    return Invalid((first, *rest))


def map2(va: Validated[A], vb: Validated[B], f: Callable[[A, B], C]) -> Validated[C]:
    """Combine two validations, concatenating errors when both failed."""
    match va, vb:
        case Valid(value=a), Valid(value=b):
            return Valid(f(a, b))
        case Invalid(errors=left), Invalid(errors=right):
            return Invalid(left + right)
        case Invalid() as failed, _:
            return failed
        case _, Invalid() as failed:
            return failed
        case _:
            raise AssertionError(f"Unhandled validation pair: {va!r}, {vb!r}")


def merge(va: Validated[A], vb: Validated[B]) -> Validated[tuple[A, B]]:
    return map2(va, vb, lambda a, b: (a, b))


def traverse(items: Iterable[A], f: Callable[[A], Validated[B]]) -> Validated[list[B]]:
    """Validate every item, accumulating all errors in item order."""
    acc: Validated[list[B]] = Valid([])
    for item in items:
        acc = map2(acc, f(item), lambda values, value: [*values, value])
    return acc


def for_all_validated(
    gen: Gen[A],
    validator: Callable[[A], Validated[object]],
    *,
    expect_valid: bool = True,
) -> Prop:
    """Property over a validating system under test.

    The predicate holds when ``validator`` returns ``Valid`` (or, with
    ``expect_valid=False``, when it returns ``Invalid``). Error lists are
    attached to trace lines and counterexamples.
    """

    def check(value: A) -> tuple[bool, str]:
        match validator(value):
            case Valid():
                return expect_valid, ""
            case Invalid(errors=errors):
                return not expect_valid, f"errors = {list(errors)!r}"
            case other:
                raise TypeError(f"validator returned {type(other).__name__}, not Validated")

    return for_all_described(gen, check)
