"""
UUID Module - generation, encoding and validation of message identifiers

Every message exchanged by the communication layer carries one of these
128-bit identifiers. Downstream code relies on them for deduplication,
causal ordering and TTL checks.
"""

from message_ids.uuid.factory import (
    GeneratorState,
    IdentifierGenerator,
    default_generator,
    uuid6,
    uuid7,
)
from message_ids.uuid.inspector import (
    elapsed,
    get_flavor,
    get_timestamp_millis,
    get_variant,
    get_version,
    is_counter_based,
    is_expired,
    is_known,
    is_time_ordered,
    remaining,
)
from message_ids.uuid.models import NIL_IDENTIFIER, Flavor, Identifier, Variant, Version
from message_ids.uuid.serializer import from_bytes, from_text, to_bytes, to_text
from message_ids.uuid.validator import (
    COUNTER_BASED_VALIDATOR,
    INVALID_VALIDATOR,
    TIME_ORDERED_VALIDATOR,
    IdentifierValidator,
    get_validator,
    validate_identifier,
    validator_for,
)

__all__ = [
    # Models
    "Identifier",
    "NIL_IDENTIFIER",
    "Version",
    "Variant",
    "Flavor",
    # Generation
    "IdentifierGenerator",
    "GeneratorState",
    "default_generator",
    "uuid6",
    "uuid7",
    # Codec
    "to_bytes",
    "from_bytes",
    "to_text",
    "from_text",
    # Inspection
    "get_version",
    "get_variant",
    "get_flavor",
    "get_timestamp_millis",
    "is_time_ordered",
    "is_counter_based",
    "is_known",
    "elapsed",
    "remaining",
    "is_expired",
    # Validation
    "IdentifierValidator",
    "TIME_ORDERED_VALIDATOR",
    "COUNTER_BASED_VALIDATOR",
    "INVALID_VALIDATOR",
    "get_validator",
    "validator_for",
    "validate_identifier",
]
