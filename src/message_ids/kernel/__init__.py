"""
Kernel - Ambient infrastructure shared by the identifier modules

Clock injection, the error hierarchy, validation results, layout policy,
structured logging and metrics. Nothing here knows about bit layouts.
"""

from message_ids.kernel.errors import (
    IdentifierError,
    InstantOutOfRange,
    MessageIdError,
)
from message_ids.kernel.policy import IdentifierPolicy, default_policy
from message_ids.kernel.time import ClockSource, FixedClock, SystemClock, default_clock
from message_ids.kernel.validation import Code, Status, ValidationResult

__all__ = [
    # Time
    "ClockSource",
    "SystemClock",
    "FixedClock",
    "default_clock",
    # Policy
    "IdentifierPolicy",
    "default_policy",
    # Validation
    "Code",
    "Status",
    "ValidationResult",
    # Errors
    "MessageIdError",
    "IdentifierError",
    "InstantOutOfRange",
]
