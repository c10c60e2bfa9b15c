"""
Outcome ADTs of a property run.

Type Safety:
    - All outcomes are frozen dataclasses with immutable ``trace`` tuples
    - Literal ``kind`` discriminators enable exhaustive pattern matching
    - :data:`PropResult` is the closed union of the four variants

``Failed`` is an ordinary return value: the property was disproved by
``counterexample``. ``Errored`` means the predicate itself raised, which
is a defect in the property, not a disproof. ``Exhausted`` only arises
from budgeted accept/reject generators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from propcheck.errors.gen import SamplingExhausted
from propcheck.errors.prop import PredicateDefect


__all__: list[str] = ["Errored", "Exhausted", "Failed", "Passed", "PropResult"]


@dataclass(frozen=True)
class Passed:
    """Every trial held.

    Attributes:
        trace: One diagnostic line per trial, in trial order.
    """

    trace: tuple[str, ...] = ()
    kind: Literal["Passed"] = "Passed"

    @property
    def trials_attempted(self) -> int:
        return len(self.trace)

    @property
    def is_passed(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """A trial's predicate returned False.

    Attributes:
        counterexample: Rendering of the first falsifying value.
        trace: Diagnostics of the passing trials that preceded it.
    """

    counterexample: str
    trace: tuple[str, ...] = ()
    kind: Literal["Failed"] = "Failed"

    @property
    def trials_attempted(self) -> int:
        return len(self.trace) + 1

    @property
    def is_passed(self) -> bool:
        return False


@dataclass(frozen=True)
class Errored:
    """A trial's predicate raised; the run was aborted."""

    counterexample: str
    defect: PredicateDefect
    trace: tuple[str, ...] = ()
    kind: Literal["Errored"] = "Errored"

    @property
    def trials_attempted(self) -> int:
        return len(self.trace) + 1

    @property
    def is_passed(self) -> bool:
        return False


@dataclass(frozen=True)
class Exhausted:
    """A budgeted sampler rejected every candidate for one trial."""

    exhaustion: SamplingExhausted
    trace: tuple[str, ...] = ()
    kind: Literal["Exhausted"] = "Exhausted"

    @property
    def trials_attempted(self) -> int:
        return len(self.trace) + 1

    @property
    def is_passed(self) -> bool:
        return False


PropResult = Passed | Failed | Errored | Exhausted
