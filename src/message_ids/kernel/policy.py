"""
Identifier Policy - Layout constants for the counter-based flavor

The policy pins the numbers every peer must agree on: which version nibble
marks a counter-based identifier, how far the per-millisecond counter may
climb, and how wide the random tail is. It is frozen because mixing two
interpretations in one deployment makes identifiers from different peers
incomparable.
"""

from typing import Literal

from pydantic import BaseModel, Field


class IdentifierPolicy(BaseModel):
    """
    Counter-based identifier layout

    The version tag moved from 8 to 7 with RFC 9562; this deployment uses 7
    and treats 8-tagged values as unknown.
    """

    counter_version: Literal[7] = Field(
        default=7,
        description="Version nibble stamped into counter-based identifiers",
    )

    time_ordered_version: Literal[6] = Field(
        default=6,
        description="Version nibble of legacy time-ordered identifiers",
    )

    counter_bits: int = Field(
        default=12,
        ge=1,
        le=12,
        description="Width of the per-millisecond counter",
    )

    timestamp_bits: int = Field(
        default=48,
        ge=1,
        le=48,
        description="Width of the Unix-millisecond timestamp in the high half",
    )

    tail_bits: int = Field(
        default=62,
        ge=1,
        le=62,
        description="Width of the per-process random tail in the low half",
    )

    model_config = {
        "frozen": True,
    }

    @property
    def max_counter(self) -> int:
        """Largest counter value before saturation (4095 for 12 bits)"""
        return (1 << self.counter_bits) - 1

    @property
    def max_timestamp(self) -> int:
        """Largest encodable millisecond timestamp"""
        return (1 << self.timestamp_bits) - 1

    @property
    def tail_mask(self) -> int:
        return (1 << self.tail_bits) - 1


# Default global policy instance
default_policy = IdentifierPolicy()
