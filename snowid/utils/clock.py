"""Clock helpers.

This module provides:
- current_millis: a function returning the wall clock in milliseconds
"""

from time import time


def current_millis() -> int:
    """Reads the wall clock.

    Returns:
        int: Milliseconds since the Unix epoch
    """
    return int(time() * 1000)
