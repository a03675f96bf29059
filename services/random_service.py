"""
services/random_service.py
--------------------------
Random number generation within a range taken from the environment.
The range is re-read on every call so it can change without a restart.
"""

import os
import random
import re

from config import (
    DEFAULT_RANDOM_MAX,
    DEFAULT_RANDOM_MIN,
    RANDOM_MAX_KEY,
    RANDOM_MIN_KEY,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


def _read_bound(key: str, default: int) -> int:
    """Strict decimal integer within 32 bits, else the default."""
    raw = os.getenv(key)
    if raw is None or not _INT_PATTERN.fullmatch(raw):
        return default
    value = int(raw)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return default
    return value


def read_random_range() -> tuple[int, int]:
    """
    Read RANDOM_MIN / RANDOM_MAX, falling back to 1 / 100.

    Returns:
        (low, high) with low <= high. Inverted bounds are swapped.
    """
    low = _read_bound(RANDOM_MIN_KEY, DEFAULT_RANDOM_MIN)
    high = _read_bound(RANDOM_MAX_KEY, DEFAULT_RANDOM_MAX)
    if low > high:
        low, high = high, low
    return low, high


def generate_random_number() -> int:
    """Return a uniformly distributed integer in the configured closed range."""
    low, high = read_random_range()
    return random.randint(low, high)
