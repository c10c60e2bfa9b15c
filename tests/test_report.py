"""Tests for :mod:`propcheck.report` rendering and log message descriptions."""

from __future__ import annotations

from propcheck.errors.gen import SamplingExhausted
from propcheck.errors.prop import PredicateDefect
from propcheck.outcome import Errored, Exhausted, Failed, Passed
from propcheck.report import LogMessage, render, report_messages, verdict

_PASSED = Passed(trace=("a = 1  rng = 00", "a = 2  rng = 01"))
_FAILED = Failed(counterexample="7", trace=("a = 1  rng = 00",))
_ERRORED = Errored(
    counterexample="3",
    defect=PredicateDefect(exception_type="KeyError", message="'x'"),
)
_EXHAUSTED = Exhausted(exhaustion=SamplingExhausted(attempts=50), trace=("a = 1  rng = 00",))


class TestVerdict:
    def test_passed(self) -> None:
        assert verdict(_PASSED) == "Passed"

    def test_falsified(self) -> None:
        assert verdict(_FAILED) == "Falsified: 7"

    def test_errored(self) -> None:
        assert verdict(_ERRORED) == "Errored: KeyError: 'x' (input: 3)"

    def test_exhausted(self) -> None:
        assert verdict(_EXHAUSTED) == "Exhausted: no sample accepted after 50 attempts"

    def test_only_passed_is_passed(self) -> None:
        outcomes = (_PASSED, _FAILED, _ERRORED, _EXHAUSTED)
        assert [o.is_passed for o in outcomes] == [True, False, False, False]
        assert [o.trials_attempted for o in outcomes] == [2, 2, 1, 2]


class TestRender:
    def test_passed_summary(self) -> None:
        assert render(_PASSED) == "OK, passed 2 tests.\nPassed"

    def test_failed_summary(self) -> None:
        assert render(_FAILED) == "Falsified after 1 passed tests (2 attempted).\nFalsified: 7"

    def test_verbose_includes_trace(self) -> None:
        assert render(_FAILED, verbose=True).splitlines() == [
            "a = 1  rng = 00",
            "Falsified after 1 passed tests (2 attempted).",
            "Falsified: 7",
        ]

    def test_errored_and_exhausted_summaries(self) -> None:
        assert render(_ERRORED).splitlines()[0] == "Aborted by a predicate error at test 1."
        assert render(_EXHAUSTED).splitlines()[0] == "Gave up generating input for test 2."

    def test_pure(self) -> None:
        twin = Failed(counterexample="7", trace=("a = 1  rng = 00",))
        assert render(_FAILED, verbose=True) == render(twin, verbose=True)


class TestReportMessages:
    def test_quiet_passed(self) -> None:
        assert report_messages(_PASSED) == (
            LogMessage(level="info", message="OK, passed 2 tests. Passed"),
        )

    def test_verbose_trace_at_debug(self) -> None:
        messages = report_messages(_PASSED, verbose=True)
        assert [m.level for m in messages] == ["debug", "debug", "info"]
        assert [m.message for m in messages[:2]] == list(_PASSED.trace)

    def test_levels_by_outcome(self) -> None:
        assert report_messages(_FAILED)[-1].level == "warning"
        assert report_messages(_EXHAUSTED)[-1].level == "warning"
        assert report_messages(_ERRORED)[-1].level == "error"

    def test_label_and_logger(self) -> None:
        (message,) = report_messages(_FAILED, label="reverse", logger_name="suite")
        assert message.message.startswith("reverse: Falsified after 1")
        assert message.logger_name == "suite"
