# src/propcheck/errors/__init__.py
"""propcheck error ADTs."""

from propcheck.errors.config import InvalidRunConfig
from propcheck.errors.gen import ConstructionError, EmptyDomain, InvalidRange, SamplingExhausted
from propcheck.errors.prop import PredicateDefect

__all__ = [
    "ConstructionError",
    "EmptyDomain",
    "InvalidRange",
    "InvalidRunConfig",
    "PredicateDefect",
    "SamplingExhausted",
]
