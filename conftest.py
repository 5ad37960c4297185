#!/usr/bin/env python3
"""
Shared fixtures for the backoff sequence tests.
"""

import os
import sys
from typing import Callable, Generator, Optional

import pytest

# Force the development log renderer regardless of the caller's environment
os.environ.setdefault("APP_ENV", "test")

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from backoff_sequence.core.config import settings  # noqa: E402
from backoff_sequence.utils.logger import configure_logging  # noqa: E402

# The package never configures logging itself; the tests act as the application
configure_logging()


@pytest.fixture
def powers_of_ten() -> Callable[[int], int]:
    """Growth function f(i) = 10**i - 1: 9, 99, 999, ..."""

    def f(iteration: int) -> int:
        return 10**iteration - 1

    return f


@pytest.fixture
def constant() -> Callable[[int], Optional[int]]:
    return lambda _iteration: 0


@pytest.fixture
def small_value_limit(monkeypatch) -> Generator[int, None, None]:
    """Shrink the arithmetic range so overflow is reached quickly."""
    monkeypatch.setattr(settings, "BACKOFF_VALUE_LIMIT", 1000)
    yield 1000
