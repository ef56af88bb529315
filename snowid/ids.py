"""A module for handling unique ID generation.

This module provides:
- IdGenerator: a class that packs timestamp, machine ID and sequence into 63-bit IDs
- IdParts: a named tuple of the fields recovered from an ID
"""

import logging
from collections.abc import Callable
from threading import Lock
from typing import NamedTuple, Optional

from .constants import USABLE_BITS
from .utils.clock import current_millis
from .utils.errors import ClockRegressionError, ConfigurationError, TimestampOverflowError


class IdParts(NamedTuple):
    """Fields of a decomposed ID."""

    timestamp: int
    machine_id: int
    sequence: int


class IdGenerator:
    """A class that spits out unique, time-ordered IDs for one machine.

    The 63 usable bits are split in three, highest first: timestamp,
    machine ID, sequence. Machine and sequence widths are the fewest bits
    that hold ``max_machine_id - 1`` and ``max_sequence - 1``; the timestamp
    gets whatever is left.
    """

    def __init__(
            self,
            machine_id: int,
            max_machine_id: int,
            max_sequence: int,
            clock: Optional[Callable[[], int]] = None
    ):
        """Derives the bit layout and remembers the current timestamp.

        Args:
            machine_id (int): ID of this machine, unique among cooperating generators
            max_machine_id (int): How many machine IDs exist, ``machine_id`` must be below it
            max_sequence (int): How many IDs one machine may issue per millisecond
            clock (Callable[[], int]): Millisecond clock, the wall clock if omitted

        Raises:
            TypeError: If any of the bounds is not an integer
            ConfigurationError: If a bound is below 2, the machine ID is out of range,
                or the timestamp has no room left
        """
        for name, value in (
                ("machine_id", machine_id),
                ("max_machine_id", max_machine_id),
                ("max_sequence", max_sequence)
        ):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer")
        if max_machine_id < 2 or max_sequence < 2:
            raise ConfigurationError("Machine and sequence capacity must be at least 2")
        if not 0 <= machine_id < max_machine_id:
            raise ConfigurationError(f"Machine ID must be between 0 and {max_machine_id - 1}")

        self.logger = logging.getLogger(__name__)
        self._clock = clock or current_millis
        self._machine_id = machine_id
        self._max_machine_id = max_machine_id
        self._max_sequence = max_sequence

        self._machine_bits = (max_machine_id - 1).bit_length()
        self._sequence_bits = (max_sequence - 1).bit_length()
        self._timestamp_bits = USABLE_BITS - self._machine_bits - self._sequence_bits

        now = self._clock()
        if self._timestamp_bits < now.bit_length():
            raise ConfigurationError(
                f"Machine and sequence take {self._machine_bits + self._sequence_bits} bits, "
                f"leaving {self._timestamp_bits} for a {now.bit_length()}-bit timestamp"
            )

        # -1 so a call within the construction millisecond still gets sequence 0
        self.sequence = -1
        self.last_timestamp = now
        self.lock = Lock()

        self.logger.debug(
            "Generator for machine %d: %d timestamp, %d machine, %d sequence bits",
            machine_id, self._timestamp_bits, self._machine_bits, self._sequence_bits
        )

    @property
    def machine_id(self) -> int:
        """ID of this machine."""
        return self._machine_id

    @property
    def max_machine_id(self) -> int:
        """How many machine IDs the layout holds."""
        return self._max_machine_id

    @property
    def max_sequence(self) -> int:
        """How many IDs may be issued per millisecond."""
        return self._max_sequence

    @property
    def timestamp_bits(self) -> int:
        """Width of the timestamp field."""
        return self._timestamp_bits

    @property
    def machine_bits(self) -> int:
        """Width of the machine ID field."""
        return self._machine_bits

    @property
    def sequence_bits(self) -> int:
        """Width of the sequence field."""
        return self._sequence_bits

    def next_id(self) -> int:
        """Generates a 63-bit Snowflake ID.

        State is left untouched when an error is raised.

        Returns:
            int: The ID, strictly greater than any earlier one from this instance

        Raises:
            TimestampOverflowError: If the clock no longer fits in the timestamp bits
            ClockRegressionError: If the clock reads earlier than the last issued timestamp
        """
        with self.lock:
            timestamp = self._clock()
            self._check_timestamp(timestamp)
            if timestamp < self.last_timestamp:
                self.logger.error(
                    "Clock moved backwards from %d to %d", self.last_timestamp, timestamp
                )
                raise ClockRegressionError(self.last_timestamp, timestamp)

            sequence = 0
            if timestamp == self.last_timestamp:
                sequence = self.sequence + 1
                if sequence == self._max_sequence:
                    sequence = 0
                    timestamp = self.next_millis()
                    # the spin may land past the last representable millisecond
                    self._check_timestamp(timestamp)
            self.sequence = sequence
            self.last_timestamp = timestamp

            return (
                (timestamp << (self._machine_bits + self._sequence_bits))
                | (self._machine_id << self._sequence_bits)
                | self.sequence
            )

    def _check_timestamp(self, timestamp: int):
        """Raises TimestampOverflowError if ``timestamp`` is wider than the timestamp field."""
        if timestamp.bit_length() > self._timestamp_bits:
            self.logger.error(
                "Timestamp %d does not fit in %d bits", timestamp, self._timestamp_bits
            )
            raise TimestampOverflowError(
                f"Timestamp {timestamp} does not fit in {self._timestamp_bits} bits"
            )

    def next_id_str(self) -> str:
        """Generates an ID as a string, for consumers that choke on 64-bit integers."""
        return str(self.next_id())

    def next_millis(self) -> int:
        """Spins until the clock passes the last issued timestamp.

        Must be called with ``lock`` held.

        Returns:
            int: The first timestamp strictly greater than ``last_timestamp``
        """
        self.logger.debug(
            "Sequence exhausted at %d, waiting for the next millisecond", self.last_timestamp
        )
        timestamp = self._clock()
        while timestamp <= self.last_timestamp:
            timestamp = self._clock()
        return timestamp

    def decompose(self, snowflake: int) -> IdParts:
        """Splits an ID from this layout back into its fields.

        Args:
            snowflake (int): An ID produced by a generator with the same bounds

        Returns:
            IdParts: Timestamp, machine ID and sequence

        Raises:
            TypeError: If ``snowflake`` is not an integer
            ValueError: If ``snowflake`` is negative or wider than 63 bits
        """
        if not isinstance(snowflake, int) or isinstance(snowflake, bool):
            raise TypeError("ID must be an integer")
        if snowflake < 0 or snowflake.bit_length() > USABLE_BITS:
            raise ValueError(f"ID must be a non-negative {USABLE_BITS}-bit integer")
        return IdParts(
            timestamp=snowflake >> (self._machine_bits + self._sequence_bits),
            machine_id=(snowflake >> self._sequence_bits) & ((1 << self._machine_bits) - 1),
            sequence=snowflake & ((1 << self._sequence_bits) - 1),
        )
