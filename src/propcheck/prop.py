# src/propcheck/prop.py
"""
Properties: predicates checked across many generated inputs.

A :class:`Prop` is an immutable value wrapping a run function
``(trial_count, source, max_size) -> PropResult``. Building one does no
work; :meth:`Prop.run` executes the trials.

Trial semantics
---------------
Trials run strictly in order. Trial ``i`` starts from the source that trial
``i - 1`` ended with, so a run is reproducible from ``(trial_count,
source)`` alone. The first falsified trial ends the run; the trace then
holds only the passing trials before it. A predicate that raises, or a value
whose ``repr`` raises, aborts the run with :class:`~propcheck.outcome.Errored`.

Trace lines have the form ``a = <repr(value)>  rng = <token>`` where the
token identifies the source the trial started from.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, TypeVar

from propcheck.config import DEFAULT_MAX_SIZE
from propcheck.errors.gen import SamplingExhausted
from propcheck.errors.prop import PredicateDefect
from propcheck.gen import Gen, SGen
from propcheck.outcome import Errored, Exhausted, Failed, Passed, PropResult
from propcheck.result import Failure, Result, Success
from propcheck.rng import RandomSource


__all__: list[str] = [
    "Prop",
    "for_all",
    "for_all_described",
    "for_all_sampled",
    "for_all_sized",
]

A = TypeVar("A")

Check = Callable[[A], tuple[bool, str]]
"""Predicate returning its verdict plus an optional diagnostic detail."""


@dataclass(frozen=True)
class Prop:
    """A runnable property.

    Attributes
    ----------
    runner
        ``(trial_count, source, max_size) -> PropResult``. Use :meth:`run`.
    """

    runner: Callable[[int, RandomSource, int], PropResult]

    def run(
        self,
        trial_count: int,
        source: RandomSource,
        *,
        max_size: int = DEFAULT_MAX_SIZE,
    ) -> PropResult:
        """Run ``trial_count`` trials starting from ``source``.

        Raises:
            ValueError: If ``trial_count`` or ``max_size`` is negative.
        """
        if trial_count < 0:
            raise ValueError(f"trial_count must be >= 0, got {trial_count}")
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        return self.runner(trial_count, source, max_size)

    def and_(self, other: Prop) -> Prop:
        """Conjunction: both properties over the same trials and source.

        ``self`` runs first; if it does not pass, ``other`` is never run.
        """
        first_runner = self.runner
        second_runner = other.runner

        def run(trial_count: int, source: RandomSource, max_size: int) -> PropResult:
            first = first_runner(trial_count, source, max_size)
            match first:
                case Passed(trace=first_trace):
                    second = second_runner(trial_count, source, max_size)
                    match second:
                        case Passed(trace=second_trace):
                            return Passed(trace=first_trace + second_trace)
                        case _:
                            return second
                case _:
                    return first

        return Prop(run)

    def __and__(self, other: Prop) -> Prop:
        return self.and_(other)

    def tag(self, label: str) -> Prop:
        """Prefix counterexamples reported by this property with ``label``."""
        inner = self.runner

        def run(trial_count: int, source: RandomSource, max_size: int) -> PropResult:
            result = inner(trial_count, source, max_size)
            match result:
                case Failed(counterexample=cx) | Errored(counterexample=cx):
                    return replace(result, counterexample=f"[{label}] {cx}")
                case _:
                    return result

        return Prop(run)


def _trace_line(rendered: str, start: RandomSource, detail: str) -> str:
    line = f"a = {rendered}  rng = {start.token}"
    return f"{line}  {detail}" if detail else line


def _trials(
    gen_for_size: Callable[[int], Gen[Result[A, SamplingExhausted]]],
    check: Check[A],
) -> Prop:
    def run(trial_count: int, source: RandomSource, max_size: int) -> PropResult:
        trace: list[str] = []
        current = source
        for trial in range(trial_count):
            start = current
            drawn, current = gen_for_size(min(trial, max_size)).run(start)
            match drawn:
                case Failure(exhaustion):
                    return Exhausted(exhaustion=exhaustion, trace=tuple(trace))
                case Success(value):
                    rendered = object.__repr__(value)
                    try:
                        rendered = repr(value)
                        holds, detail = check(value)
                    except Exception as exc:
                        return Errored(
                            counterexample=rendered,
                            defect=PredicateDefect.from_exception(exc),
                            trace=tuple(trace),
                        )
                    if not holds:
                        counterexample = f"{rendered}  {detail}" if detail else rendered
                        return Failed(counterexample=counterexample, trace=tuple(trace))
                    trace.append(_trace_line(rendered, start, detail))
        return Passed(trace=tuple(trace))

    return Prop(run)


def _plain(predicate: Callable[[A], bool]) -> Check[A]:
    return lambda value: (bool(predicate(value)), "")


def _infallible(gen: Gen[A]) -> Gen[Result[A, SamplingExhausted]]:
    return gen.map(Success)


def for_all(gen: Gen[A], predicate: Callable[[A], bool]) -> Prop:
    """Property that ``predicate`` holds for every value drawn from ``gen``."""
    drawn = _infallible(gen)
    return _trials(lambda _size: drawn, _plain(predicate))


def for_all_described(gen: Gen[A], check: Check[A]) -> Prop:
    """Like :func:`for_all`; ``check`` also returns a detail for the trace."""
    drawn = _infallible(gen)
    return _trials(lambda _size: drawn, check)


def for_all_sampled(
    gen: Gen[Result[A, SamplingExhausted]],
    predicate: Callable[[A], bool],
) -> Prop:
    """:func:`for_all` over a budgeted sampler.

    A draw that yields ``Failure(SamplingExhausted)`` ends the run with
    :class:`~propcheck.outcome.Exhausted`.
    """
    return _trials(lambda _size: gen, _plain(predicate))


def for_all_sized(sgen: SGen[A], predicate: Callable[[A], bool]) -> Prop:
    """:func:`for_all` over a size-driven generator.

    Trial ``i`` draws from ``sgen(min(i, max_size))``.
    """
    return _trials(lambda size: _infallible(sgen(size)), _plain(predicate))
