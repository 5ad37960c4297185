"""
Backoff sequences: lazily generated retry delays.

Pick a growth function (``Exponential``, ``Geometric``, ``Clamped`` or any
``f(iteration) -> value`` callable), bound it with ``Backoff`` and pull values
from the resulting iterator. Nothing here sleeps; callers wait on the values
themselves.

Defaults and logging are configured via `backoff_sequence.core.config`.
"""

from .core.config import Settings, settings
from .sequence import (
    Backoff,
    BackoffError,
    BackoffOverflowError,
    BackoffSequenceIter,
    Clamped,
    Exponential,
    FunctionCalculator,
    Geometric,
    GrowthCalculator,
    GrowthFunction,
    InvalidBackoffConfigError,
    MinimumUnreachableError,
    as_calculator,
    full_jitter,
)
from .utils.logger import configure_logging, get_logger

__all__ = [
    "Backoff",
    "BackoffSequenceIter",
    "GrowthCalculator",
    "GrowthFunction",
    "Exponential",
    "Geometric",
    "Clamped",
    "FunctionCalculator",
    "as_calculator",
    "full_jitter",
    "BackoffError",
    "BackoffOverflowError",
    "InvalidBackoffConfigError",
    "MinimumUnreachableError",
    "Settings",
    "settings",
    "configure_logging",
    "get_logger",
]
