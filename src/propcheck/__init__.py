"""
propcheck
=========
Deterministic property-based testing.

Seeded :class:`Gen` values produce inputs, :func:`for_all` turns a generator
and a predicate into a :class:`Prop`, and a run with a fixed trial count and
seed always yields the same :data:`PropResult`::

    from propcheck import TestRunConfig, choose_int, for_all, run_prop

    small = choose_int(0, 99).unwrap()
    result = run_prop(for_all(small, lambda n: n < 100), TestRunConfig(num_tests=50))
    assert result.is_passed
"""

from propcheck.config import TestRunConfig, build_test_run_config
from propcheck.errors import (
    EmptyDomain,
    InvalidRange,
    InvalidRunConfig,
    PredicateDefect,
    SamplingExhausted,
)
from propcheck.gen import (
    Gen,
    SGen,
    booleans,
    choose_double,
    choose_int,
    list_of,
    list_of_1,
    list_of_n,
    map2,
    one_of,
    one_of_gens,
    sequence,
    unit,
    weighted,
)
from propcheck.outcome import Errored, Exhausted, Failed, Passed, PropResult
from propcheck.prop import Prop, for_all, for_all_described, for_all_sampled, for_all_sized
from propcheck.report import LogMessage, render, report_messages, verdict
from propcheck.result import Failure, Result, Success
from propcheck.rng import INT64_MAX, INT64_MIN, RandomSource, abs_int64, seed, wrap_int64
from propcheck.runner import LoggingInterpreter, assert_passes, check, run_prop
from propcheck.sampling import accept_reject, accept_reject_within
from propcheck.validated import Invalid, Valid, Validated, for_all_validated

__all__ = [
    # Randomness
    "RandomSource",
    "seed",
    "INT64_MIN",
    "INT64_MAX",
    "abs_int64",
    "wrap_int64",
    # Generators
    "Gen",
    "SGen",
    "unit",
    "map2",
    "sequence",
    "booleans",
    "choose_int",
    "choose_double",
    "one_of",
    "one_of_gens",
    "weighted",
    "list_of_n",
    "list_of",
    "list_of_1",
    "accept_reject",
    "accept_reject_within",
    # Properties
    "Prop",
    "for_all",
    "for_all_described",
    "for_all_sampled",
    "for_all_sized",
    "for_all_validated",
    # Outcomes and reporting
    "PropResult",
    "Passed",
    "Failed",
    "Errored",
    "Exhausted",
    "render",
    "verdict",
    "report_messages",
    "LogMessage",
    # Running
    "TestRunConfig",
    "build_test_run_config",
    "run_prop",
    "check",
    "assert_passes",
    "LoggingInterpreter",
    # Results and errors
    "Result",
    "Success",
    "Failure",
    "Valid",
    "Invalid",
    "Validated",
    "InvalidRange",
    "EmptyDomain",
    "InvalidRunConfig",
    "PredicateDefect",
    "SamplingExhausted",
]
