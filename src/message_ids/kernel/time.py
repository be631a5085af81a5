"""
Clock source abstraction for deterministic identifier generation

Provides both a wall-clock implementation and a controllable test clock,
so that generators and TTL checks can be exercised at exact instants.

Fun fact: Unix time ignores leap seconds entirely - a "Unix day" is always
exactly 86,400 seconds, even on the days that were really 86,401 long!
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ClockSource(Protocol):
    """Protocol for clock sources - allows deterministic testing"""

    def now(self) -> datetime:
        """Return current UTC datetime"""
        ...


class SystemClock:
    """Production clock source using the system wall clock"""

    def now(self) -> datetime:
        """Return current UTC time from system clock"""
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Controllable clock source for deterministic tests

    Time only moves when the test moves it, which makes counter
    saturation and TTL boundaries reproducible.
    """

    def __init__(self, initial_time: datetime | None = None) -> None:
        """
        Initialize with optional fixed time

        Args:
            initial_time: Starting time (defaults to Unix epoch)
        """
        self._current_time = initial_time or EPOCH

    def now(self) -> datetime:
        """Return current test time"""
        return self._current_time

    def set_time(self, dt: datetime) -> None:
        """Set current time to specific value"""
        self._current_time = dt

    def advance_millis(self, millis: int) -> None:
        """Advance (or rewind, if negative) time by milliseconds"""
        self._current_time += timedelta(milliseconds=millis)

    def advance_seconds(self, seconds: int) -> None:
        """Advance time by specified seconds"""
        self._current_time += timedelta(seconds=seconds)


def to_epoch_millis(instant: datetime) -> int:
    """
    Convert a datetime to whole milliseconds since the Unix epoch.

    Naive datetimes are treated as UTC. Sub-millisecond precision is
    truncated toward negative infinity, matching integer-millisecond
    clocks.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant - EPOCH) // timedelta(milliseconds=1)


def to_epoch_micros(instant: datetime) -> int:
    """Convert a datetime to whole microseconds since the Unix epoch"""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant - EPOCH) // timedelta(microseconds=1)


def from_epoch_millis(millis: int) -> datetime:
    """Build a UTC datetime from milliseconds since the Unix epoch"""
    return EPOCH + timedelta(milliseconds=millis)


# Global default clock source
default_clock: ClockSource = SystemClock()
