"""Tests for the :mod:`propcheck.result` ADT."""

from __future__ import annotations

import pytest

from propcheck.result import Failure, Result, Success, collect_results


def test_success_accessors() -> None:
    ok: Result[int, str] = Success(3)
    assert ok.is_success() and not ok.is_failure()
    assert ok.unwrap() == 3
    assert ok.unwrap_or(0) == 3
    assert ok.map(lambda v: v + 1) == Success(4)
    assert ok.map_error(str.upper) == Success(3)
    assert ok.flat_map(lambda v: Failure(f"no {v}")) == Failure("no 3")


def test_failure_accessors() -> None:
    bad: Result[int, str] = Failure("boom")
    assert bad.is_failure() and not bad.is_success()
    assert bad.unwrap_or(0) == 0
    assert bad.map(lambda v: v + 1) == Failure("boom")
    assert bad.map_error(str.upper) == Failure("BOOM")
    assert bad.flat_map(lambda v: Success(v)) == Failure("boom")
    with pytest.raises(RuntimeError, match="boom"):
        bad.unwrap()


def test_collect_results_all_success() -> None:
    assert collect_results([Success(1), Success(2)]) == Success([1, 2])


def test_collect_results_first_failure_wins() -> None:
    results: list[Result[int, str]] = [Success(1), Failure("a"), Failure("b")]
    assert collect_results(results) == Failure("a")
