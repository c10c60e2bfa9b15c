"""Error ADTs raised by property evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class PredicateDefect:
    """A trial raised instead of returning a verdict.

    This is a defect in the property under test, not a disproof of it.

    Attributes:
        exception_type: Qualified name of the raised exception class.
        message: ``str()`` of the raised exception.
        kind: Discriminator for pattern matching.
    """

    exception_type: str
    message: str
    kind: Literal["PredicateDefect"] = "PredicateDefect"

    @classmethod
    def from_exception(cls, exc: Exception) -> PredicateDefect:
        return cls(exception_type=type(exc).__qualname__, message=str(exc))
