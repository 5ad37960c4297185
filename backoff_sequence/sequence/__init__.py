from .builder import Backoff
from .calculators import (
    Clamped,
    Exponential,
    FunctionCalculator,
    Geometric,
    GrowthCalculator,
    GrowthFunction,
    as_calculator,
)
from .engine import BackoffSequenceIter
from .exceptions import (
    BackoffError,
    BackoffOverflowError,
    InvalidBackoffConfigError,
    MinimumUnreachableError,
)
from .jitter import full_jitter

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
]
