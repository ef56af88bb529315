"""Errors tailored for this project.

This module provides:
- ConfigurationError: An error if a generator is built with unusable capacity bounds
- ClockRegressionError: An error if the clock went back past the last issued timestamp
- TimestampOverflowError: An error if the timestamp no longer fits its bits
"""


class ConfigurationError(ValueError):
    """Capacity bounds or machine ID are unusable."""

class ClockRegressionError(RuntimeError):
    """The clock moved backwards. Refusing to issue IDs."""

    def __init__(self, last_timestamp: int, current_timestamp: int):
        super().__init__(
            f"Clock moved backwards by {last_timestamp - current_timestamp}ms, refusing to generate IDs"
        )
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp

class TimestampOverflowError(OverflowError):
    """The timestamp outgrew the bits reserved for it."""
