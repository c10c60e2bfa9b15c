"""Error ADTs for generator construction and sampling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class InvalidRange:
    """Bounds or counts are inconsistent (``lo > hi``, ``n < 0``, non-finite)."""

    message: str
    lo: float | None = None
    hi: float | None = None
    kind: Literal["InvalidRange"] = "InvalidRange"


@dataclass(frozen=True)
class EmptyDomain:
    """A choice combinator was given nothing to choose from."""

    message: str
    kind: Literal["EmptyDomain"] = "EmptyDomain"


@dataclass(frozen=True)
class SamplingExhausted:
    """A budgeted accept/reject draw rejected every candidate.

    Attributes:
        attempts: Number of candidates drawn and rejected.
        kind: Discriminator for pattern matching.
    """

    attempts: int
    kind: Literal["SamplingExhausted"] = "SamplingExhausted"


ConstructionError = InvalidRange | EmptyDomain
