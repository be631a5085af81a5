"""
Identifier generation - time-ordered (v6) and counter-based (v7) layouts

Two flavors are produced:

- Time-ordered: RFC 9562 version 6. A 60-bit Gregorian timestamp in 100 ns
  ticks, followed by a random clock sequence and node drawn fresh on every
  call. Stateless, so any number of threads may call it without locking.

- Counter-based: 48-bit Unix milliseconds, version nibble 7, a 12-bit
  counter that climbs within each millisecond, and a 62-bit random tail
  drawn once per generator and reused for every identifier it issues.

        high = millis << 16 | 7 << 12 | counter
        low  = tail | 1 << 63

  The counter saturates at 4095 rather than wrapping, so a burst beyond
  4096 identifiers in one millisecond repeats the last value until the
  clock moves on.

Fun fact: the Gregorian epoch (15 October 1582) was chosen by RFC 4122
because that's the first day of the calendar most of the world uses today -
the ten days before it simply never happened in Catholic Europe!
"""

import secrets
import threading
from collections.abc import Callable
from datetime import datetime

from pydantic import BaseModel, Field

from message_ids.kernel.errors import InstantOutOfRange
from message_ids.kernel.logging import get_logger
from message_ids.kernel.metrics import (
    clock_regressions_total,
    counter_saturated_total,
    identifiers_generated_total,
)
from message_ids.kernel.policy import IdentifierPolicy, default_policy
from message_ids.kernel.time import ClockSource, SystemClock, to_epoch_micros, to_epoch_millis
from message_ids.uuid.inspector import (
    GREGORIAN_OFFSET_TICKS,
    MAX_TIMESTAMP_TICKS,
    TICKS_PER_MICRO,
)
from message_ids.uuid.models import Flavor, Identifier, Variant

logger = get_logger(__name__)

RandomBits = Callable[[int], int]

_MULTICAST_BIT = 1 << 40


class GeneratorState(BaseModel):
    """
    Mutable counter state for the counter-based flavor

    Only ever read or written while the owning generator's lock is held,
    except tail_bits, which is fixed after construction.
    """

    last_millis: int = Field(default=0, ge=0)
    counter: int = Field(default=0, ge=0)
    tail_bits: int = Field(default=0, ge=0)


class IdentifierGenerator:
    """
    Produces identifiers of both flavors

    Construct one per process and share it; counter-based uniqueness only
    holds within a single generator. Tests construct their own with a
    FixedClock.
    """

    def __init__(
        self,
        clock: ClockSource | None = None,
        policy: IdentifierPolicy | None = None,
        random_bits: RandomBits | None = None,
    ) -> None:
        """
        Args:
            clock: Source of "now" when no instant is passed (wall clock by default)
            policy: Layout constants (default_policy by default)
            random_bits: Callable returning n random bits (secrets.randbits by default)
        """
        self._clock = clock or SystemClock()
        self._policy = policy or default_policy
        self._random_bits = random_bits or secrets.randbits
        self._lock = threading.Lock()
        self._state = GeneratorState(tail_bits=self._draw_tail())

    @property
    def clock(self) -> ClockSource:
        return self._clock

    @property
    def policy(self) -> IdentifierPolicy:
        return self._policy

    def snapshot(self) -> GeneratorState:
        """Copy of the current counter state"""
        with self._lock:
            return self._state.model_copy()

    def reset(self, *, redraw_tail: bool = False) -> None:
        """Zero the counter state (test hook). Optionally draw a new tail."""
        with self._lock:
            self._state.last_millis = 0
            self._state.counter = 0
            if redraw_tail:
                self._state.tail_bits = self._draw_tail()

    def _draw_tail(self) -> int:
        return self._random_bits(self._policy.tail_bits) & self._policy.tail_mask

    def _resolve(self, instant: datetime | None) -> datetime:
        return self._clock.now() if instant is None else instant

    def generate_time_ordered(self, instant: datetime | None = None) -> Identifier:
        """
        Build a version-6 identifier for `instant` (now if omitted)

        Raises:
            InstantOutOfRange: if the instant is before 1582-10-15 or beyond
                the 60-bit tick range
        """
        instant = self._resolve(instant)
        ticks = to_epoch_micros(instant) * TICKS_PER_MICRO + GREGORIAN_OFFSET_TICKS
        if ticks < 0 or ticks > MAX_TIMESTAMP_TICKS:
            raise InstantOutOfRange(
                Flavor.TIME_ORDERED.value, instant, "outside the 60-bit Gregorian tick range"
            )

        time_high = ticks >> 28
        time_mid = (ticks >> 12) & 0xFFFF
        time_low = ticks & 0x0FFF
        high = (
            (time_high << 32)
            | (time_mid << 16)
            | (self._policy.time_ordered_version << 12)
            | time_low
        )

        clock_seq = self._random_bits(14) & 0x3FFF
        node = (self._random_bits(48) & 0xFFFF_FFFF_FFFF) | _MULTICAST_BIT
        low = (Variant.RFC_4122 << 62) | (clock_seq << 48) | node

        identifiers_generated_total.labels(flavor=Flavor.TIME_ORDERED.value).inc()
        return Identifier(high=high, low=low)

    def generate_counter_based(self, instant: datetime | None = None) -> Identifier:
        """
        Build a counter-based identifier for `instant` (now if omitted)

        Within one millisecond the counter climbs by one per call and
        saturates at the policy maximum. Any change of millisecond, backward
        included, resets it to zero.

        Raises:
            InstantOutOfRange: if the instant is before the Unix epoch or
                beyond the 48-bit millisecond range
        """
        instant = self._resolve(instant)
        millis = to_epoch_millis(instant)
        policy = self._policy
        if millis < 0 or millis > policy.max_timestamp:
            raise InstantOutOfRange(
                Flavor.COUNTER_BASED.value, instant, "outside the 48-bit Unix millisecond range"
            )

        saturated = False
        reached_limit = False
        regressed_from: int | None = None
        with self._lock:
            state = self._state
            if millis == state.last_millis:
                if state.counter < policy.max_counter:
                    state.counter += 1
                    reached_limit = state.counter == policy.max_counter
                else:
                    saturated = True
            else:
                if millis < state.last_millis:
                    regressed_from = state.last_millis
                state.counter = 0
                state.last_millis = millis
            counter = state.counter
            tail = state.tail_bits

        if reached_limit:
            logger.debug("Counter reached its limit", millis=millis, counter=counter)
        if saturated:
            counter_saturated_total.inc()
        if regressed_from is not None:
            clock_regressions_total.inc()
            logger.warning(
                "Clock moved backward, counter reset",
                previous_millis=regressed_from,
                millis=millis,
                delta_ms=regressed_from - millis,
            )

        high = (millis << 16) | (policy.counter_version << 12) | counter
        low = tail | (1 << 63)
        identifiers_generated_total.labels(flavor=Flavor.COUNTER_BASED.value).inc()
        return Identifier(high=high, low=low)

    def generate(self, flavor: Flavor, instant: datetime | None = None) -> Identifier:
        """Generate an identifier of the requested flavor"""
        if flavor == Flavor.TIME_ORDERED:
            return self.generate_time_ordered(instant)
        if flavor == Flavor.COUNTER_BASED:
            return self.generate_counter_based(instant)
        raise ValueError(f"Cannot generate identifiers of flavor {flavor!r}")


# Process-wide default generator
default_generator = IdentifierGenerator()


def uuid6(instant: datetime | None = None) -> Identifier:
    """Time-ordered identifier from the process-wide generator"""
    return default_generator.generate_time_ordered(instant)


def uuid7(instant: datetime | None = None) -> Identifier:
    """Counter-based identifier from the process-wide generator"""
    return default_generator.generate_counter_based(instant)
