from __future__ import annotations

from typing import Any, Iterator, NoReturn, Optional

from backoff_sequence.core.config import settings
from backoff_sequence.utils.logger import get_logger

from .calculators import GrowthCalculator, GrowthFunction, as_calculator
from .exceptions import InvalidBackoffConfigError, MinimumUnreachableError

logger = get_logger(__name__)


def validate_max_iterations(max_iterations: Optional[int]) -> Optional[int]:
    if max_iterations is None:
        return None
    if (
        isinstance(max_iterations, bool)
        or not isinstance(max_iterations, int)
        or max_iterations < 0
    ):
        raise InvalidBackoffConfigError(
            f"max_iterations must be a non-negative int, got {max_iterations!r}"
        )
    return max_iterations


class BackoffSequenceIter(Iterator[Any]):
    """
    Lazily produces backoff values from a growth function.

    Each ``next()``:

    - stops once ``max_iterations`` values have been produced (if set);
    - re-emits ``max_value`` without calling the growth function once the
      previous value already reached it;
    - on the first value only, skips iterations whose value is below
      ``min_value``, extending ``max_iterations`` by the number skipped so
      the caller still gets the full count;
    - clamps anything above ``max_value`` down to it.

    With ``min_value > max_value`` every value is ``max_value``: the skip runs
    past the floor and the clamp immediately pins the result.

    Overflow raised by the growth function propagates unchanged.
    """

    def __init__(
        self,
        growth_function: GrowthFunction,
        max_iterations: Optional[int] = None,
        min_value: Optional[Any] = None,
        max_value: Optional[Any] = None,
    ):
        self._calculator: GrowthCalculator = as_calculator(growth_function)
        self._max_iterations = validate_max_iterations(max_iterations)
        self._min_value = min_value
        self._max_value = max_value

        self._iteration = 0
        self._current_value: Optional[Any] = None
        self._exhausted = False

    @property
    def iteration(self) -> int:
        """Number of growth-function iterations consumed so far."""
        return self._iteration

    @property
    def max_iterations(self) -> Optional[int]:
        return self._max_iterations

    @property
    def current_value(self) -> Optional[Any]:
        return self._current_value

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "BackoffSequenceIter":
        return self

    def __next__(self) -> Any:
        if self._exhausted:
            raise StopIteration

        if self._max_iterations is not None and self._iteration >= self._max_iterations:
            self._finish("max_iterations")

        self._iteration += 1
        iteration = self._iteration

        if (
            self._max_value is not None
            and self._current_value is not None
            and self._current_value >= self._max_value
        ):
            return self._max_value

        candidate = self._calculator.value(iteration)
        if candidate is None:
            self._finish("calculator")

        if self._min_value is not None:
            candidate = self._skip_below_min(iteration, candidate)

        if self._max_value is not None and candidate > self._max_value:
            candidate = self._max_value

        self._current_value = candidate
        return candidate

    def _skip_below_min(self, iteration: int, candidate: Any) -> Any:
        start = iteration
        limit = settings.BACKOFF_MAX_MIN_SKIP
        while candidate < self._min_value:
            if limit is not None and iteration - start >= limit:
                raise MinimumUnreachableError(
                    f"no value >= {self._min_value!r} within "
                    f"{limit} iterations",
                    skipped=iteration - start,
                )
            iteration += 1
            candidate = self._calculator.value(iteration)
            if candidate is None:
                self._iteration = iteration
                self._finish("calculator")

        delta = iteration - start
        if delta:
            if self._max_iterations is not None:
                self._max_iterations += delta
            logger.debug(
                "backoff_min_skip",
                min_value=self._min_value,
                skipped=delta,
                max_iterations=self._max_iterations,
            )
        self._iteration = iteration
        # the floor only trims the opening values of the sequence
        self._min_value = None
        return candidate

    def _finish(self, reason: str) -> NoReturn:
        if not self._exhausted:
            self._exhausted = True
            logger.debug("backoff_exhausted", reason=reason, iteration=self._iteration)
        raise StopIteration

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(calculator={self._calculator!r}, "
            f"iteration={self._iteration}, max_iterations={self._max_iterations}, "
            f"min_value={self._min_value!r}, max_value={self._max_value!r})"
        )
