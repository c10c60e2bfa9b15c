# src/propcheck/runner.py
"""
Running properties against a :class:`~propcheck.config.TestRunConfig`.

:func:`run_prop` is pure. :func:`check` additionally reports the outcome
through the standard :mod:`logging` module via :class:`LoggingInterpreter`;
propcheck never installs handlers, so output appears wherever the host
application routes the ``"propcheck"`` logger.
"""

from __future__ import annotations

import logging
from typing import assert_never

from propcheck.config import TestRunConfig
from propcheck.outcome import Passed, PropResult
from propcheck.prop import Prop
from propcheck.report import LogMessage, render, report_messages


__all__: list[str] = ["LoggingInterpreter", "assert_passes", "check", "run_prop"]

DEFAULT_LOGGER_NAME = "propcheck"


class LoggingInterpreter:
    """Interpreter for :class:`~propcheck.report.LogMessage` requests.

    Emits each request via the standard logging module.
    """

    def __init__(self, default_logger_name: str = DEFAULT_LOGGER_NAME) -> None:
        """Initialize logging interpreter.

        Args:
            default_logger_name: Fallback logger name when message.logger_name is empty.
        """
        self._default_logger_name = default_logger_name

    def interpret(self, message: LogMessage) -> None:
        """Emit a log message at the requested level."""
        logger = logging.getLogger(message.logger_name or self._default_logger_name)
        match message.level:
            case "debug":
                logger.debug(message.message)
            case "info":
                logger.info(message.message)
            case "warning":
                logger.warning(message.message)
            case "error":
                logger.error(message.message)
            case _ as unreachable:
                assert_never(unreachable)

    def interpret_all(self, messages: tuple[LogMessage, ...]) -> None:
        for message in messages:
            self.interpret(message)


def run_prop(prop: Prop, config: TestRunConfig) -> PropResult:
    """Run ``prop`` with the trial count, size bound and seed of ``config``."""
    return prop.run(config.num_tests, config.source(), max_size=config.max_size)


def check(
    prop: Prop,
    config: TestRunConfig | None = None,
    *,
    verbose: bool = False,
    label: str = "",
    interpreter: LoggingInterpreter | None = None,
) -> PropResult:
    """Run ``prop`` and log its report.

    Args:
        prop: Property to run.
        config: Run configuration; the defaults of :class:`TestRunConfig` if omitted.
        verbose: Also log one DEBUG record per passing trial.
        label: Name prepended to the verdict record.
        interpreter: Destination for log records.

    Returns:
        The outcome of the run.
    """
    resolved = config if config is not None else TestRunConfig()
    result = run_prop(prop, resolved)
    (interpreter or LoggingInterpreter()).interpret_all(
        report_messages(result, verbose=verbose, label=label)
    )
    return result


def assert_passes(prop: Prop, config: TestRunConfig | None = None, *, label: str = "") -> None:
    """Run ``prop`` and raise ``AssertionError`` with the report unless it passed.

    Intended for use inside test functions.
    """
    result = check(prop, config, label=label)
    if not isinstance(result, Passed):
        prefix = f"{label}\n" if label else ""
        raise AssertionError(prefix + render(result))
