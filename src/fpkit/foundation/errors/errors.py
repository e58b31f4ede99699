"""Standardized errors for programming mistakes caught by the containers.

Absence and failure are values (Maybe, Result) and never raise. The only
exceptions fpkit raises itself are invariant violations and the explicit
unsafe unwrap. Uses Pydantic for the structured error payload.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)


class ErrorCode(StrEnum):
    """Error codes for fpkit's own error signalling."""
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
    UNWRAP_FAILED = "UNWRAP_FAILED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNKNOWN = "UNKNOWN"


class ErrorInfo(BaseModel):
    """Structured diagnostic attached to an FpkitError.

    Attributes:
        operation: Name of the operation whose invariant was violated
        message: Human-readable description
        code: Machine-readable error code
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "Error Info",
            "description": "Diagnostic for a violated container invariant",
            "examples": [{
                "operation": "maybe.Just",
                "message": "cannot wrap None as a present value",
                "code": "INVARIANT_VIOLATION",
            }],
        },
    )

    operation: Annotated[str, Field(
        min_length=1,
        description="Operation that detected the violation",
    )]
    message: Annotated[str, Field(
        min_length=1,
        description="Human-readable error message",
    )]
    code: ErrorCode = Field(
        default=ErrorCode.UNKNOWN,
        description="Machine-readable error classification",
    )

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return str(v) if isinstance(v, Exception) else v

    @computed_field
    @property
    def is_invariant(self) -> bool:
        """Whether this signals a programming error rather than a runtime condition."""
        return self.code in (ErrorCode.INVARIANT_VIOLATION, ErrorCode.INVALID_ARGUMENT)

    def render(self) -> str:
        """Format as a single-line diagnostic."""
        return f"[{self.code}] {self.operation}: {self.message}"

    __str__ = render


class FpkitError(Exception):
    """Exception wrapping an ErrorInfo for raising."""

    __slots__ = ("info",)

    def __init__(self, info: ErrorInfo) -> None:
        self.info = info
        super().__init__(info.render())

    @classmethod
    def create(cls, operation: str, message: str, code: ErrorCode = ErrorCode.UNKNOWN) -> Self:
        """Create exception from its parts."""
        return cls(ErrorInfo(operation=operation, message=message, code=code))

    @property
    def code(self) -> ErrorCode:
        return self.info.code


class InvariantViolation(FpkitError):
    """Raised when a container is built in a state its type forbids.

    Examples: wrapping None in Just, or building Err from a non-exception.
    This is a bug in calling code and is never turned into Nothing/Err.
    """

    @classmethod
    def create(  # type: ignore[override]
        cls,
        operation: str,
        message: str,
        code: ErrorCode = ErrorCode.INVARIANT_VIOLATION,
    ) -> Self:
        return cls(ErrorInfo(operation=operation, message=message, code=code))
