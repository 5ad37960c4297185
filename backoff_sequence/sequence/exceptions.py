"""
Exceptions raised while building or iterating backoff sequences.

Running out of iterations is not an error: sequences end with the normal
``StopIteration`` protocol.
"""


class BackoffError(Exception):
    """Base exception for all backoff sequence errors."""

    pass


class BackoffOverflowError(BackoffError, OverflowError):
    """
    A growth function left the representable value range.

    Unbounded exponential growth always ends here eventually. Callers avoid it
    by bounding the iteration count or wrapping the calculator in ``Clamped``.
    """

    def __init__(self, message: str, iteration: int | None = None):
        super().__init__(message)
        self.iteration = iteration


class InvalidBackoffConfigError(BackoffError, ValueError):
    """Invalid calculator or builder argument."""

    pass


class MinimumUnreachableError(BackoffError):
    """
    The growth function never reached the configured minimum.

    Raised by the min-skip step when ``BACKOFF_MAX_MIN_SKIP`` is set and
    that many extra iterations pass without a value at or above the floor.
    """

    def __init__(self, message: str, skipped: int):
        super().__init__(message)
        self.skipped = skipped
