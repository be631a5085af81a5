"""
Identifier inspection - bit extraction and time arithmetic

Reads version, variant and creation time out of an existing identifier,
and answers the TTL questions the message layer asks: how long ago was this
created, how much lifetime is left, has it expired.

All durations are integer milliseconds. A `now` argument may be a datetime
or an integer millisecond timestamp; when omitted, the default clock is
read.
"""

from datetime import datetime

from message_ids.kernel import time as clock_module
from message_ids.kernel.time import to_epoch_millis
from message_ids.uuid.models import Flavor, Identifier, Variant, Version

# 100 ns ticks between 1582-10-15 (Gregorian reform) and 1970-01-01
GREGORIAN_OFFSET_TICKS = 0x01B21DD213814000
TICKS_PER_MILLI = 10_000
TICKS_PER_MICRO = 10
MAX_TIMESTAMP_TICKS = (1 << 60) - 1

Instant = datetime | int


def get_version(identifier: Identifier) -> Version:
    """Version nibble at bits 12-15 of the high half"""
    return Version.from_value((identifier.high >> 12) & 0xF)


def get_variant(identifier: Identifier) -> Variant:
    """
    Variant read from the top of the low half

    0xx -> NCS, 10x -> RFC 4122, 110 -> Microsoft, 111 -> future.
    """
    low = identifier.low
    if not low >> 63:
        return Variant.NCS
    if low >> 62 == 0b10:
        return Variant.RFC_4122
    return Variant(low >> 61)


def is_time_ordered(identifier: Identifier) -> bool:
    """Version 6 with the RFC 4122 variant"""
    return (
        get_version(identifier) == Version.TIME_ORDERED
        and get_variant(identifier) == Variant.RFC_4122
    )


def is_counter_based(identifier: Identifier) -> bool:
    return get_version(identifier) == Version.COUNTER_BASED


def is_known(identifier: Identifier) -> bool:
    """True for either flavor this package generates"""
    return is_counter_based(identifier) or is_time_ordered(identifier)


def get_flavor(identifier: Identifier) -> Flavor:
    if is_time_ordered(identifier):
        return Flavor.TIME_ORDERED
    if is_counter_based(identifier):
        return Flavor.COUNTER_BASED
    return Flavor.UNKNOWN


def get_gregorian_ticks(identifier: Identifier) -> int:
    """
    Reassemble the 60-bit v6 timestamp

    Layout of the high half: time_high(32) | time_mid(16) | version(4) |
    time_low(12).
    """
    high = identifier.high
    time_high = high >> 32
    time_mid = (high >> 16) & 0xFFFF
    time_low = high & 0x0FFF
    return (time_high << 28) | (time_mid << 12) | time_low


def get_timestamp_millis(identifier: Identifier) -> int | None:
    """
    Creation time in milliseconds since the Unix epoch

    Counter-based identifiers carry it in the top 48 bits. Time-ordered
    identifiers carry Gregorian 100 ns ticks; those are only decoded when the
    RFC 4122 variant is present. Anything else has no timestamp.
    """
    version = get_version(identifier)
    if version == Version.COUNTER_BASED:
        return identifier.high >> 16
    if version == Version.TIME_ORDERED:
        if get_variant(identifier) != Variant.RFC_4122:
            return None
        ticks = get_gregorian_ticks(identifier) - GREGORIAN_OFFSET_TICKS
        # truncate toward zero; pre-1970 values round toward the epoch
        if ticks < 0:
            return -(-ticks // TICKS_PER_MILLI)
        return ticks // TICKS_PER_MILLI
    return None


def _now_millis(now: Instant | None) -> int:
    if now is None:
        return to_epoch_millis(clock_module.default_clock.now())
    if isinstance(now, datetime):
        return to_epoch_millis(now)
    return int(now)


def elapsed(identifier: Identifier, now: Instant | None = None) -> int | None:
    """
    Milliseconds since the identifier was created

    None when the creation time is unknown, or when it lies in the future
    relative to `now` (clock skew is reported as unknown, never negative).
    """
    created = get_timestamp_millis(identifier)
    if created is None:
        return None
    current = _now_millis(now)
    if created > current:
        return None
    return current - created


def remaining(identifier: Identifier, ttl_ms: int, now: Instant | None = None) -> int | None:
    """
    Milliseconds of lifetime left under a TTL

    None when ttl_ms <= 0 (no TTL), when elapsed time is unknown, or when
    the identifier has already lived ttl_ms or longer.
    """
    if ttl_ms <= 0:
        return None
    age = elapsed(identifier, now)
    if age is None or age >= ttl_ms:
        return None
    return ttl_ms - age


def is_expired(identifier: Identifier, ttl_ms: int, now: Instant | None = None) -> bool:
    """
    Whether a message stamped with this identifier has outlived its TTL

    A TTL of zero or less means "never expires". With a positive TTL, an
    identifier whose age cannot be determined counts as expired.
    """
    return ttl_ms > 0 and remaining(identifier, ttl_ms, now) is None
