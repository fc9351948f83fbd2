"""Base exceptions for neo-pagination.

All exceptions inherit from PaginationError and carry an error code,
details, and an HTTP status code mapping for API responses.
"""

from typing import Any, Dict, Optional


class PaginationError(Exception):
    """Base exception for all neo-pagination errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ParseError(PaginationError):
    """Raised when a supplied page or size value is not a valid integer."""

    def __init__(self, field: str, value: str, message: Optional[str] = None):
        super().__init__(
            message or f"Invalid {field} value: {value!r} is not an integer",
            details={"field": field, "value": value},
        )
        self.field = field
        self.value = value


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: PaginationError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-pagination exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
