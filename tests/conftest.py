"""
Pytest configuration and shared fixtures

Every generator built here gets its own FixedClock, so counter state and
TTL arithmetic never depend on the wall clock or on other tests.
"""

from datetime import datetime, timezone

import pytest

from message_ids.kernel.time import FixedClock, to_epoch_millis
from message_ids.uuid.factory import IdentifierGenerator


@pytest.fixture
def test_instant() -> datetime:
    """
    Fixed instant for deterministic tests

    2025-01-15 12:00:00.123 UTC - the trailing milliseconds make sure
    sub-second precision survives encoding.
    """
    return datetime(2025, 1, 15, 12, 0, 0, 123_000, tzinfo=timezone.utc)


@pytest.fixture
def test_clock(test_instant: datetime) -> FixedClock:
    """Provide a controllable clock starting at test_instant"""
    return FixedClock(test_instant)


@pytest.fixture
def test_millis(test_instant: datetime) -> int:
    return to_epoch_millis(test_instant)


@pytest.fixture
def generator(test_clock: FixedClock) -> IdentifierGenerator:
    """Provide a fresh generator with zeroed counter state"""
    return IdentifierGenerator(clock=test_clock)
