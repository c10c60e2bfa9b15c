"""Run configuration for property checks."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from propcheck.errors.config import InvalidRunConfig
from propcheck.result import Failure, Result, Success
from propcheck.rng import INT64_MAX, INT64_MIN, RandomSource, seed
from propcheck.validation import validate_model


__all__: list[str] = ["TestRunConfig", "build_test_run_config"]

DEFAULT_NUM_TESTS = 100
DEFAULT_MAX_SIZE = 100
DEFAULT_SEED = 42


class TestRunConfig(BaseModel):
    """Everything that determines the outcome of a property run.

    Attributes
    ----------
    num_tests
        Number of trials to attempt.
    max_size
        Upper bound handed to size-driven generators.
    seed
        Signed 64-bit seed; identical seeds reproduce identical runs.
    """

    # Keep pytest from collecting this class.
    __test__ = False

    num_tests: Annotated[int, Field(gt=0, description="Trials per run")] = DEFAULT_NUM_TESTS
    max_size: Annotated[int, Field(gt=0, description="Size bound for sized generators")] = (
        DEFAULT_MAX_SIZE
    )
    seed: Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX, description="int64 seed")] = (
        DEFAULT_SEED
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def source(self) -> RandomSource:
        """The random source a run with this configuration starts from."""
        return seed(self.seed)


def build_test_run_config(**params: object) -> Result[TestRunConfig, InvalidRunConfig]:
    """Create a TestRunConfig via pure validation."""
    match validate_model(TestRunConfig, **params):
        case Failure(error):
            return Failure(InvalidRunConfig(error=error))
        case Success(config):
            return Success(config)
