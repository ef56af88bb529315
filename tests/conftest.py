"""Shared fixtures for generator tests."""

import pytest

# 2025-01-01 00:00:00 UTC in milliseconds
START = 1735689600000


class FakeClock:
    """A millisecond clock that only moves when told to.

    Readings queued with ``schedule`` are served first, after that the
    clock keeps returning ``now``.
    """

    def __init__(self, now: int = START):
        self.now = now
        self.queue = []
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        if self.queue:
            self.now = self.queue.pop(0)
        return self.now

    def schedule(self, *readings: int):
        self.queue.extend(readings)

    def advance(self, ms: int = 1):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
