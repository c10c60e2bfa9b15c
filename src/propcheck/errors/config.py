"""Error ADTs for run configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class InvalidRunConfig:
    """Pydantic validation failed when building a TestRunConfig."""

    error: ValidationError
    kind: Literal["InvalidRunConfig"] = "InvalidRunConfig"
