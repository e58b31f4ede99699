"""Error handling for fpkit.

- ErrorCode: Codes for fpkit's own error signalling
- ErrorInfo/FpkitError: Structured diagnostics and the exception carrying them
- InvariantViolation: Raised for container states the types forbid
"""

from .errors import ErrorCode, ErrorInfo, FpkitError, InvariantViolation
from .types import JsonDict, JsonValue

__all__ = [
    "ErrorCode", "ErrorInfo", "FpkitError", "InvariantViolation",
    "JsonDict", "JsonValue",
]
