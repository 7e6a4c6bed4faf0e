"""
Clock sources for interval accounting.

A clock is any zero-argument callable returning the current time in
integer milliseconds.
"""

import time
from typing import Callable

Clock = Callable[[], int]


def system_clock_ms() -> int:
    """Current wall-clock time in milliseconds."""
    return int(time.time() * 1000)
