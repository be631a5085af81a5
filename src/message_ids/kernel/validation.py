"""
Validation results and status codes

A ValidationResult is either a success or a failure carrying a
human-readable message. Validators collect several results and join the
failure messages, so callers get the full diagnostic set in one pass
instead of stopping at the first problem.
"""

from enum import IntEnum

from pydantic import BaseModel, Field


class Code(IntEnum):
    """
    Status codes (subset of google.rpc.Code)

    Only the two codes identifier validation can produce are listed.
    """

    OK = 0
    INVALID_ARGUMENT = 3


class Status(BaseModel):
    """Status of a validation, as reported to the RPC layer"""

    code: Code = Field(default=Code.OK)
    message: str = Field(default="")

    model_config = {"frozen": True}


STATUS_SUCCESS = Status(code=Code.OK, message="OK")


class ValidationResult(BaseModel):
    """Outcome of a single check - success, or failure with a message"""

    is_success: bool = Field(
        ...,
        description="True when the check passed",
    )
    message: str = Field(
        default="",
        description="Failure reason (empty on success)",
    )

    model_config = {"frozen": True}

    @classmethod
    def success(cls) -> "ValidationResult":
        return _SUCCESS

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(is_success=False, message=message)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def to_status(self) -> Status:
        """Convert to a Status: OK on success, INVALID_ARGUMENT on failure"""
        if self.is_success:
            return STATUS_SUCCESS
        return Status(code=Code.INVALID_ARGUMENT, message=self.message)

    def __str__(self) -> str:
        if self.is_success:
            return "ValidationResult.Success()"
        return f"ValidationResult.Failure(message='{self.message}')"


_SUCCESS = ValidationResult(is_success=True)


def combine(results: list[ValidationResult], separator: str = ",") -> ValidationResult:
    """
    Fold several results into one

    Returns success when every result succeeded, otherwise a failure whose
    message is the failure messages joined in order.
    """
    messages = [r.message for r in results if r.is_failure]
    if not messages:
        return ValidationResult.success()
    return ValidationResult.failure(separator.join(messages))
