"""Shared test utilities for the propcheck test suite.

Usage:
    >>> from tests.helpers import expect_success, SEED
    >>> digits = expect_success(choose_int(0, 9))
"""

from __future__ import annotations

from tests.helpers.constants import (
    ALT_SEEDS,
    DEFAULT_TRIALS,
    MEAN_TOLERANCE,
    SAMPLE_SIZE,
    SEED,
)
from tests.helpers.result_utils import E, T, expect_failure, expect_success

__all__ = [
    # Result unwrapping
    "expect_success",
    "expect_failure",
    "T",
    "E",
    # Constants
    "SEED",
    "ALT_SEEDS",
    "DEFAULT_TRIALS",
    "SAMPLE_SIZE",
    "MEAN_TOLERANCE",
]
