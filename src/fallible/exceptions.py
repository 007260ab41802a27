"""Custom exceptions for fallible.

These are programmer-error signals raised when a Result is used the wrong
way. Domain failures are never raised as these; they travel as ``Err``.
"""

from enum import Enum
from typing import Any, Optional


class ErrorType(Enum):
    """Types of misuse the library reports."""

    # Wrong variant
    EXPECTED_ERR = "expected_err"

    # Wrong input
    NOT_A_RESULT = "not_a_result"


class FallibleError(Exception):
    """Base exception for all fallible errors.

    Attributes:
        message: Human-readable error message
        error_type: Type of error from ErrorType enum
        details: Optional dict with additional error context
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


def _preview(value: Any) -> str:
    try:
        text = repr(value)
    except Exception:
        return f"<{type(value).__name__}>"
    return text[:50] + "..." if len(text) > 50 else text


class ExpectedErrError(FallibleError):
    """Raised when an Err was required but an Ok was found."""

    def __init__(self, value: Any, message: str = "Expected Err, got Ok"):
        super().__init__(message, ErrorType.EXPECTED_ERR, {"value": _preview(value)})


class NotAResultError(FallibleError, TypeError):
    """Raised when a combinator is handed something that is not a Result."""

    def __init__(self, obj: Any):
        super().__init__(
            "Expected Ok or Err",
            ErrorType.NOT_A_RESULT,
            {"type": type(obj).__name__},
        )
