"""
Neo Pagination Models Package

Pydantic models for pagination requests and paginated responses.

Components:
- Base: Shared schema configuration
- Query: Normalized pagination query built from raw request values
- Response: Generic paginated response envelope and its derivations
"""

from .base import BaseSchema

from .query import (
    PaginationQuery,
    parse_int,
)

from .response import (
    PaginationResponse,
    paginated_response,
    default_pagination_response,
    get_total_pages,
    get_has_more,
)

__all__ = [
    "BaseSchema",

    # Query
    "PaginationQuery",
    "parse_int",

    # Response
    "PaginationResponse",
    "paginated_response",
    "default_pagination_response",
    "get_total_pages",
    "get_has_more",
]
