"""Exceptions module for neo-pagination."""

from .base import (
    PaginationError,
    ParseError,
    get_http_status_code,
    create_error_response,
)

from .http_mapping import (
    HTTP_STATUS_MAP,
    HttpStatusMapper,
    get_mapper,
    set_status_overrides,
)

__all__ = [
    "PaginationError",
    "ParseError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",
    "HttpStatusMapper",
    "get_mapper",
    "set_status_overrides",
]
