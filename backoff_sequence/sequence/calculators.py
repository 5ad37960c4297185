from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, NoReturn, Optional, Union

from backoff_sequence.core.config import settings
from backoff_sequence.utils.logger import get_logger

from .exceptions import BackoffOverflowError, InvalidBackoffConfigError

logger = get_logger(__name__)


class GrowthCalculator(ABC):
    """
    Maps a 1-based iteration index to a raw backoff value.

    ``value`` returns ``None`` once the calculator has nothing further to
    produce; sequences treat that as exhaustion. Calculators are also plain
    callables, so they can be passed anywhere a growth function is expected.
    """

    @abstractmethod
    def value(self, iteration: int) -> Optional[Any]:
        """Return the raw value for ``iteration`` (first call uses 1)."""

    def reset(self) -> None:
        """Forget any running state. Stateless calculators do nothing."""

    def fresh(self) -> "GrowthCalculator":
        """
        Return the calculator a new sequence should use.

        Calculators are shared by default; stateful ones override this to
        hand out a pristine instance.
        """
        return self

    def __call__(self, iteration: int) -> Optional[Any]:
        return self.value(iteration)


GrowthFunction = Union[GrowthCalculator, Callable[[int], Optional[Any]]]


def _checked(calculator: str, iteration: int, result: Any) -> Any:
    """Reject results outside ``[0, BACKOFF_VALUE_LIMIT]`` for real numbers."""
    if isinstance(result, numbers.Real) and not (
        0 <= result <= settings.BACKOFF_VALUE_LIMIT
    ):
        _overflow(calculator, iteration)
    return result


def _overflow(
    calculator: str, iteration: int, exc: BaseException | None = None
) -> NoReturn:
    logger.error("backoff_overflow", calculator=calculator, iteration=iteration)
    raise BackoffOverflowError(
        f"arithmetic operation overflowed in {calculator} at iteration {iteration}",
        iteration=iteration,
    ) from exc


def _is_negative(amount: Any) -> bool:
    # amount * 0 is the additive zero for ints, floats and timedeltas alike
    try:
        return amount < amount * 0
    except TypeError as exc:
        raise InvalidBackoffConfigError(
            f"{amount!r} does not support ordering and multiplication"
        ) from exc


@dataclass
class Exponential(GrowthCalculator):
    """``base ** iteration - 1``: 1, 3, 7, 15, ... for base 2."""

    base: Union[int, float] = 2

    def __post_init__(self) -> None:
        if not isinstance(self.base, numbers.Real) or self.base < 0:
            raise InvalidBackoffConfigError(
                f"Exponential base must be a non-negative number, got {self.base!r}"
            )

    @classmethod
    def new_binary(cls) -> "Exponential":
        return cls(base=2)

    def value(self, iteration: int) -> Union[int, float]:
        # Stop before materialising huge integers: base ** iteration already
        # exceeds the limit once iteration passes the limit's bit length.
        if self.base >= 2 and iteration > settings.BACKOFF_VALUE_LIMIT.bit_length():
            _overflow("Exponential", iteration)
        try:
            power = self.base**iteration
        except OverflowError as exc:
            _overflow("Exponential", iteration, exc)
        if power > settings.BACKOFF_VALUE_LIMIT:
            _overflow("Exponential", iteration)
        return _checked("Exponential", iteration, power - 1)


@dataclass
class Geometric(GrowthCalculator):
    """``factor * iteration``: linear growth, also for ``timedelta`` factors."""

    factor: Any = 1

    def __post_init__(self) -> None:
        if _is_negative(self.factor):
            raise InvalidBackoffConfigError(
                f"Geometric factor must not be negative, got {self.factor!r}"
            )

    def value(self, iteration: int) -> Any:
        try:
            result = self.factor * iteration
        except OverflowError as exc:
            _overflow("Geometric", iteration, exc)
        return _checked("Geometric", iteration, result)


class FunctionCalculator(GrowthCalculator):
    """Adapts a plain ``f(iteration) -> value | None`` callable."""

    def __init__(self, func: Callable[[int], Optional[Any]]):
        if not callable(func):
            raise InvalidBackoffConfigError(
                f"growth function must be callable, got {type(func).__name__}"
            )
        self.func = func

    def value(self, iteration: int) -> Optional[Any]:
        return self.func(iteration)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", None) or repr(self.func)
        return f"FunctionCalculator({name})"


def as_calculator(growth_function: GrowthFunction) -> GrowthCalculator:
    """Return ``growth_function`` as a ``GrowthCalculator``."""
    if isinstance(growth_function, GrowthCalculator):
        return growth_function
    return FunctionCalculator(growth_function)


@dataclass
class Clamped(GrowthCalculator):
    """
    Saturates an inner calculator at ``max_value``.

    Once the running value reaches the ceiling every later call returns the
    ceiling without consulting the inner calculator, which keeps fast-growing
    calculators from overflowing at high iteration counts.

    Stateful: one consuming sequence at a time.
    """

    calculator: GrowthFunction
    max_value: Any
    _current_value: Optional[Any] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.calculator = as_calculator(self.calculator)

    @property
    def current_value(self) -> Optional[Any]:
        return self._current_value

    def reset(self) -> None:
        self._current_value = None
        self.calculator.reset()

    def fresh(self) -> "Clamped":
        return Clamped(self.calculator.fresh(), self.max_value)

    def value(self, iteration: int) -> Optional[Any]:
        # check the ceiling before calculating to avoid overflow
        if self._current_value is not None and self._current_value >= self.max_value:
            return self.max_value

        raw = self.calculator.value(iteration)
        if raw is None:
            return None
        self._current_value = raw

        if self._current_value >= self.max_value:
            logger.debug(
                "backoff_saturated",
                iteration=iteration,
                raw_value=raw,
                max_value=self.max_value,
            )
            self._current_value = self.max_value

        return self._current_value
