"""
Identifier validation

Each flavor is described by a small record - the version it expects, whether
the RFC 4122 variant is enforced, and the messages to report - and one
IdentifierValidator evaluates any descriptor. All three checks always run;
failure messages are joined with "," so the caller sees every problem at
once.

    >>> validate_identifier(Identifier()).message
    'Invalid UUID Version,Invalid UUID Variant,Invalid UUID Time'
"""

from pydantic import BaseModel

from message_ids.kernel.logging import get_logger
from message_ids.kernel.metrics import validation_failures_total
from message_ids.kernel.validation import ValidationResult, combine
from message_ids.uuid.inspector import get_flavor, get_timestamp_millis, get_variant, get_version
from message_ids.uuid.models import Flavor, Identifier, Variant, Version

logger = get_logger(__name__)

INVALID_TIME = "Invalid UUID Time"


class FlavorDescriptor(BaseModel):
    """
    What a flavor requires of an identifier

    expected_version None means no version is acceptable; enforce_variant
    False means any variant passes. always_fail marks the descriptor used
    for unclassifiable identifiers, which fails every check.
    """

    flavor: Flavor
    expected_version: Version | None
    version_failure: str
    enforce_variant: bool
    variant_failure: str
    always_fail: bool = False

    model_config = {"frozen": True}


TIME_ORDERED_DESCRIPTOR = FlavorDescriptor(
    flavor=Flavor.TIME_ORDERED,
    expected_version=Version.TIME_ORDERED,
    version_failure="Not a UUIDv6 Version",
    enforce_variant=True,
    variant_failure="Invalid UUIDv6 variant",
)

COUNTER_BASED_DESCRIPTOR = FlavorDescriptor(
    flavor=Flavor.COUNTER_BASED,
    expected_version=Version.COUNTER_BASED,
    version_failure="Invalid UUIDV7 Version",
    enforce_variant=False,
    variant_failure="",
)

UNKNOWN_DESCRIPTOR = FlavorDescriptor(
    flavor=Flavor.UNKNOWN,
    expected_version=None,
    version_failure="Invalid UUID Version",
    enforce_variant=True,
    variant_failure="Invalid UUID Variant",
    always_fail=True,
)


class IdentifierValidator:
    """Validates identifiers against one flavor descriptor"""

    def __init__(self, descriptor: FlavorDescriptor) -> None:
        self.descriptor = descriptor

    @property
    def flavor(self) -> Flavor:
        return self.descriptor.flavor

    def validate_version(self, identifier: Identifier) -> ValidationResult:
        d = self.descriptor
        if not d.always_fail and get_version(identifier) == d.expected_version:
            return ValidationResult.success()
        return ValidationResult.failure(d.version_failure)

    def validate_variant(self, identifier: Identifier) -> ValidationResult:
        d = self.descriptor
        if d.always_fail:
            return ValidationResult.failure(d.variant_failure)
        if not d.enforce_variant or get_variant(identifier) == Variant.RFC_4122:
            return ValidationResult.success()
        return ValidationResult.failure(d.variant_failure)

    def validate_time(self, identifier: Identifier) -> ValidationResult:
        if self.descriptor.always_fail:
            return ValidationResult.failure(INVALID_TIME)
        timestamp = get_timestamp_millis(identifier)
        if timestamp is not None and timestamp > 0:
            return ValidationResult.success()
        return ValidationResult.failure(INVALID_TIME)

    def validate(self, identifier: Identifier) -> ValidationResult:
        """Run every check and collect all failure messages"""
        result = combine(
            [
                self.validate_version(identifier),
                self.validate_variant(identifier),
                self.validate_time(identifier),
            ]
        )
        if result.is_failure:
            validation_failures_total.labels(flavor=self.flavor.value).inc()
            logger.debug(
                "Identifier failed validation",
                identifier=str(identifier),
                expected_flavor=self.flavor.value,
                reasons=result.message,
            )
        return result

    def __repr__(self) -> str:
        return f"IdentifierValidator({self.flavor.value})"


TIME_ORDERED_VALIDATOR = IdentifierValidator(TIME_ORDERED_DESCRIPTOR)
COUNTER_BASED_VALIDATOR = IdentifierValidator(COUNTER_BASED_DESCRIPTOR)
INVALID_VALIDATOR = IdentifierValidator(UNKNOWN_DESCRIPTOR)

_VALIDATORS = {
    Flavor.TIME_ORDERED: TIME_ORDERED_VALIDATOR,
    Flavor.COUNTER_BASED: COUNTER_BASED_VALIDATOR,
    Flavor.UNKNOWN: INVALID_VALIDATOR,
}


def validator_for(flavor: Flavor) -> IdentifierValidator:
    """Validator for a declared (expected) flavor"""
    return _VALIDATORS[flavor]


def get_validator(identifier: Identifier) -> IdentifierValidator:
    """Classify an identifier and return the validator for its flavor"""
    return _VALIDATORS[get_flavor(identifier)]


def validate_identifier(identifier: Identifier) -> ValidationResult:
    """Classify then validate in one step"""
    return get_validator(identifier).validate(identifier)
