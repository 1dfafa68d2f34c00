"""
Journey Graph Custom Exceptions

Structured exception hierarchy with error codes, context,
and proper error response formatting.

The graph operations themselves never raise for well-formed journeys;
these exceptions guard the boundaries where raw payloads come in.
"""

from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes."""

    # General errors (1xxx)
    INTERNAL_ERROR = "E1000"
    VALIDATION_ERROR = "E1001"
    BAD_REQUEST = "E1002"
    PAYLOAD_TOO_LARGE = "E1003"

    # Journey input errors (2xxx)
    JOURNEY_INPUT_INVALID = "E2000"
    JOURNEY_PAYLOAD_NOT_A_LIST = "E2001"
    DETECTED_JOURNEY_INVALID = "E2002"


class JourneyGraphError(Exception):
    """Base exception for all journey graph errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recoverable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.cause = cause
        self.recoverable = recoverable

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response format."""
        response = {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }
        if self.details:
            response["error"]["details"] = self.details
        return response

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationError(JourneyGraphError):
    """Input validation error."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 400,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        super().__init__(
            message,
            code=code,
            status_code=status_code,
            details=details,
            **kwargs
        )


class PayloadTooLargeError(ValidationError):
    """Too many journeys submitted in one request."""

    def __init__(self, received: int, limit: int, **kwargs):
        super().__init__(
            f"Received {received} journeys, limit is {limit}",
            field="journeys",
            code=ErrorCode.PAYLOAD_TOO_LARGE,
            status_code=413,
            details={"received": received, "limit": limit},
            **kwargs
        )


# =============================================================================
# Journey Input Exceptions
# =============================================================================


class JourneyInputError(ValidationError):
    """Raw journey payload could not be turned into Journey models."""

    def __init__(
        self,
        message: str = "Invalid journey payload",
        errors: Optional[List[Dict[str, Any]]] = None,
        index: Optional[int] = None,
        code: ErrorCode = ErrorCode.JOURNEY_INPUT_INVALID,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        if index is not None:
            details["index"] = index
        super().__init__(
            message,
            code=code,
            status_code=422,
            details=details,
            **kwargs
        )
