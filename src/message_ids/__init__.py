"""
message_ids - Time-ordered identifiers for protocol messages

Generates, encodes and validates the 128-bit identifiers that the
publish/request/response/notification layer stamps on every message.

Fun fact: a single process can mint 4,096 counter-based identifiers per
millisecond - over four million per second before the counter saturates!
"""

from message_ids.uuid import (
    NIL_IDENTIFIER,
    Identifier,
    IdentifierGenerator,
    from_bytes,
    from_text,
    to_bytes,
    to_text,
    uuid6,
    uuid7,
    validate_identifier,
)

__version__ = "0.1.0"
__all__ = [
    "Identifier",
    "NIL_IDENTIFIER",
    "IdentifierGenerator",
    "uuid6",
    "uuid7",
    "to_bytes",
    "from_bytes",
    "to_text",
    "from_text",
    "validate_identifier",
    "__version__",
]
