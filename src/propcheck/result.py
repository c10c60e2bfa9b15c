"""
Result type for explicit error handling.

Generator builders, configuration builders and budgeted samplers in
propcheck never raise on bad input. They return a ``Result[T, E]``: either
``Success(value)`` or ``Failure(error)`` where ``error`` is one of the
frozen error ADTs from :mod:`propcheck.errors`.

Usage::

    from propcheck.gen import choose_int
    from propcheck.rng import seed

    match choose_int(1, 6):
        case Success(die):
            print(die.sample(seed(7)))
        case Failure(error):
            print(f"bad range: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful result holding ``value``."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value with ``f``."""
        return Success(f(self.value))

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        result: Result[T, F] = Success(self.value)
        return result

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a further fallible step onto this value."""
        return f(self.value)


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A failed result holding ``error``."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Unwrap the success value.

        Raises:
            RuntimeError: Always, a Failure carries no value.
        """
        raise RuntimeError(f"Called unwrap() on Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        result: Result[U, E] = Failure(self.error)
        return result

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error value with ``f``."""
        return Failure(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        result: Result[U, E] = Failure(self.error)
        return result


Result = Success[T] | Failure[E]


def collect_results(results: list[Result[T, E]]) -> Result[list[T], E]:
    """
    Collect a list of Results into a Result of list.

    The first Failure in list order wins; otherwise every value is returned
    in the original order.
    """
    first_failure = next((result for result in results if isinstance(result, Failure)), None)
    return (
        first_failure
        if isinstance(first_failure, Failure)
        else Success([result.value for result in results if isinstance(result, Success)])
    )
