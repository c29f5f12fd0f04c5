"""
Core Errors Module

Standardized error classes for the contract boundary of the engine.
The scoring functions themselves never raise on odd data; these errors are
raised only when raw input cannot be turned into the typed models at all.

Usage:
    from meeting_scorer.core.errors import ValidationError, error_payload

    raise ValidationError("Invalid time slot", details={"errors": [...]})

    payload = error_payload("validation_error", "Bad input", trace_id="event-42")
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


# ==================== Base Error Class ====================

class AppError(Exception):
    """
    Base error class for the package.

    Attributes:
        code: Error code (e.g., "validation_error")
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._default_code()
        self.details = details or {}

    def _default_code(self) -> str:
        """
        Generate default error code from class name.

        Returns:
            snake_case version of class name without the "Error" suffix
        """
        name = self.__class__.__name__
        if name.endswith("Error"):
            name = name[:-5]

        result = []
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                result.append("_")
            result.append(char.lower())

        return "".join(result)

    def to_dict(self, trace_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON responses.

        Args:
            trace_id: Optional trace ID

        Returns:
            Error dict with code, message, details, trace_id
        """
        return error_payload(self.code, self.message, self.details, trace_id)


# ==================== Specific Error Classes ====================

class ValidationError(AppError):
    """
    Raised when raw participant, slot or availability data does not
    match the inbound data contract.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="validation_error",
            details=details
        )


# ==================== Helper Functions ====================

def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    trace_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized error payload dict.

    Args:
        code: Error code
        message: Error message
        details: Optional error details
        trace_id: Optional trace ID

    Returns:
        Error dict suitable for a JSON response

    Example:
        >>> payload = error_payload("validation_error", "Invalid input", trace_id="abc123")
        >>> payload["code"]
        'validation_error'
    """
    result = {
        "code": code,
        "message": message,
    }

    if details:
        result["details"] = details

    if trace_id:
        result["trace_id"] = trace_id

    return result
