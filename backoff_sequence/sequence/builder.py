from __future__ import annotations

from typing import Any, Iterator, List, Optional

from backoff_sequence.core.config import Settings
from backoff_sequence.core.config import settings as default_settings

from .calculators import (
    Exponential,
    Geometric,
    GrowthCalculator,
    GrowthFunction,
    as_calculator,
)
from .engine import BackoffSequenceIter, validate_max_iterations


class Backoff:
    """
    Reusable backoff configuration.

    The bound setters mutate in place and return ``self`` for chaining::

        backoff = Backoff(Exponential(2)).max_iterations(5).max(10)
        list(backoff)  # [1, 3, 7, 10, 10]

    Iterating never consumes the configuration: every ``iter()`` call returns
    a new sequence starting from the first iteration, using the bounds as they
    are at that moment.
    """

    def __init__(self, growth_function: GrowthFunction):
        self._calculator: GrowthCalculator = as_calculator(growth_function)
        self._max_iterations: Optional[int] = None
        self._min_value: Optional[Any] = None
        self._max_value: Optional[Any] = None

    @classmethod
    def exponential(cls, base: int | float = 2) -> "Backoff":
        return cls(Exponential(base))

    @classmethod
    def geometric(cls, factor: Any = 1) -> "Backoff":
        return cls(Geometric(factor))

    @classmethod
    def from_settings(
        cls, growth_function: GrowthFunction, settings: Settings | None = None
    ) -> "Backoff":
        """Build a configuration whose bounds come from ``BACKOFF_*`` settings."""
        if settings is None:
            settings = default_settings
        backoff = cls(growth_function)
        if settings.BACKOFF_MAX_ITERATIONS is not None:
            backoff.max_iterations(settings.BACKOFF_MAX_ITERATIONS)
        if settings.BACKOFF_MIN_VALUE is not None:
            backoff.min(settings.BACKOFF_MIN_VALUE)
        if settings.BACKOFF_MAX_VALUE is not None:
            backoff.max(settings.BACKOFF_MAX_VALUE)
        return backoff

    @property
    def calculator(self) -> GrowthCalculator:
        return self._calculator

    def max_iterations(self, max_iterations: Optional[int]) -> "Backoff":
        self._max_iterations = validate_max_iterations(max_iterations)
        return self

    def min(self, value: Optional[Any]) -> "Backoff":
        self._min_value = value
        return self

    def max(self, value: Optional[Any]) -> "Backoff":
        self._max_value = value
        return self

    def iter(self) -> BackoffSequenceIter:
        # fresh() keeps stateful calculators such as Clamped private to one sequence
        return BackoffSequenceIter(
            self._calculator.fresh(),
            max_iterations=self._max_iterations,
            min_value=self._min_value,
            max_value=self._max_value,
        )

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def take(self, count: int) -> List[Any]:
        """Return up to ``count`` values from a fresh sequence."""
        values = []
        sequence = self.iter()
        for _ in range(count):
            try:
                values.append(next(sequence))
            except StopIteration:
                break
        return values

    def __repr__(self) -> str:
        return (
            f"Backoff({self._calculator!r}, max_iterations={self._max_iterations}, "
            f"min={self._min_value!r}, max={self._max_value!r})"
        )
