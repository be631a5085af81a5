"""
Identifier models - the 128-bit value and its classification enums

An Identifier is two unsigned 64-bit halves. It never changes after
construction, and two identifiers are equal exactly when both halves are.
The all-zero value is the nil sentinel: the generator never produces it,
and decoders return it when input is malformed.
"""

import uuid
from enum import Enum, IntEnum
from functools import total_ordering

from pydantic import BaseModel, Field

MAX_U64 = (1 << 64) - 1


class Version(IntEnum):
    """
    Version nibble, stored at bits 12-15 of the high half

    Nibbles not listed here (1, 2, 3, 5, 8, 9, ...) classify as UNKNOWN.
    """

    UNKNOWN = 0
    RANDOM_BASED = 4  # RFC 4122 v4, recognized but never produced here
    TIME_ORDERED = 6
    COUNTER_BASED = 7

    @classmethod
    def from_value(cls, value: int) -> "Version":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class Variant(IntEnum):
    """Variant field, read from the top bits of the low half"""

    NCS = 0  # 0xx
    RFC_4122 = 2  # 10x
    MICROSOFT = 6  # 110
    FUTURE = 7  # 111


class Flavor(str, Enum):
    """Which generator layout an identifier follows"""

    TIME_ORDERED = "time_ordered"
    COUNTER_BASED = "counter_based"
    UNKNOWN = "unknown"


@total_ordering
class Identifier(BaseModel):
    """
    A 128-bit message identifier

    Ordering follows the 128-bit integer value, so identifiers of the same
    flavor sort by creation time.
    """

    high: int = Field(
        default=0,
        ge=0,
        le=MAX_U64,
        description="Most-significant 64 bits",
    )

    low: int = Field(
        default=0,
        ge=0,
        le=MAX_U64,
        description="Least-significant 64 bits",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"high": 0x0190_8E9A_3B87_7000, "low": 0x8000_1234_5678_9ABC},
            ]
        },
    }

    @classmethod
    def from_int(cls, value: int) -> "Identifier":
        """Split a 128-bit integer into its halves"""
        return cls(high=value >> 64, low=value & MAX_U64)

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "Identifier":
        return cls.from_int(value.int)

    @property
    def value(self) -> int:
        """The identifier as a single 128-bit integer"""
        return (self.high << 64) | self.low

    @property
    def is_nil(self) -> bool:
        return self.high == 0 and self.low == 0

    def as_uuid(self) -> uuid.UUID:
        return uuid.UUID(int=self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return (self.high, self.low) < (other.high, other.low)

    def __str__(self) -> str:
        return str(self.as_uuid())


NIL_IDENTIFIER = Identifier()
