"""
Pure rendering of property outcomes.

Nothing here performs I/O. :func:`render` turns a
:data:`~propcheck.outcome.PropResult` into text, and :func:`report_messages`
describes the log records a run should produce as :class:`LogMessage`
values. :mod:`propcheck.runner` is the only place those are emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, assert_never

from propcheck.outcome import Errored, Exhausted, Failed, Passed, PropResult


__all__: list[str] = ["LogMessage", "render", "report_messages", "verdict"]

LogLevel = Literal["debug", "info", "warning", "error"]


@dataclass(frozen=True)
class LogMessage:
    """Request to emit a log message.

    Attributes:
        level: Log level to emit.
        message: Log message payload.
        logger_name: Logger name to use; the runner's default when empty.
    """

    level: LogLevel = "info"
    message: str = ""
    logger_name: str = ""
    kind: Literal["LogMessage"] = "LogMessage"


def verdict(result: PropResult) -> str:
    """The final report line: ``Passed`` or ``Falsified: <counterexample>``."""
    match result:
        case Passed():
            return "Passed"
        case Failed(counterexample=cx):
            return f"Falsified: {cx}"
        case Errored(counterexample=cx, defect=defect):
            return f"Errored: {defect.exception_type}: {defect.message} (input: {cx})"
        case Exhausted(exhaustion=exhaustion):
            return f"Exhausted: no sample accepted after {exhaustion.attempts} attempts"
        case _:
            assert_never(result)


def _summary(result: PropResult) -> str:
    match result:
        case Passed():
            return f"OK, passed {result.trials_attempted} tests."
        case Failed():
            return (
                f"Falsified after {len(result.trace)} passed tests "
                f"({result.trials_attempted} attempted)."
            )
        case Errored():
            return f"Aborted by a predicate error at test {result.trials_attempted}."
        case Exhausted():
            return f"Gave up generating input for test {result.trials_attempted}."
        case _:
            assert_never(result)


def render(result: PropResult, *, verbose: bool = False) -> str:
    """Human-readable report; identical results always render identically."""
    lines: list[str] = list(result.trace) if verbose else []
    lines.append(_summary(result))
    lines.append(verdict(result))
    return "\n".join(lines)


def _verdict_level(result: PropResult) -> LogLevel:
    match result:
        case Passed():
            return "info"
        case Failed() | Exhausted():
            return "warning"
        case Errored():
            return "error"
        case _:
            assert_never(result)


def report_messages(
    result: PropResult,
    *,
    verbose: bool = False,
    label: str = "",
    logger_name: str = "",
) -> tuple[LogMessage, ...]:
    """Describe the log records for ``result``.

    Trace lines are DEBUG records (only when ``verbose``); the summary and
    verdict form one record whose level reflects the outcome.
    """
    prefix = f"{label}: " if label else ""
    trace = (
        tuple(
            LogMessage(level="debug", message=line, logger_name=logger_name)
            for line in result.trace
        )
        if verbose
        else ()
    )
    final = LogMessage(
        level=_verdict_level(result),
        message=f"{prefix}{_summary(result)} {verdict(result)}",
        logger_name=logger_name,
    )
    return trace + (final,)
