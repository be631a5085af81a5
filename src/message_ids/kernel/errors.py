"""
Custom exceptions for message_ids

Malformed wire or text input never raises - it degrades to the nil
identifier. The exceptions below are reserved for programming errors,
such as asking a generator to encode an instant its layout cannot represent.
"""


class MessageIdError(Exception):
    """Base exception for all message_ids errors"""

    pass


class IdentifierError(MessageIdError):
    """Base class for identifier construction errors"""

    pass


class InstantOutOfRange(IdentifierError, ValueError):
    """Raised when an instant cannot be encoded in the requested layout"""

    def __init__(self, flavor: str, instant: object, reason: str) -> None:
        self.flavor = flavor
        self.instant = instant
        self.reason = reason
        super().__init__(f"Cannot encode {instant!r} as a {flavor} identifier: {reason}")
