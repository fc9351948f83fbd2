"""Neo-Pagination - pagination extraction and response helpers.

Collects pagination parameters (page, size, orderBy, orderDir) from an
inbound request into a consistent PaginationQuery, and wraps result lists
in a generic PaginationResponse envelope with derived page metadata.
"""

from .__version__ import __version__

from .config import (
    DEFAULT_SIZE,
    DEFAULT_PAGE,
    DEFAULT_ORDER_FIELD,
    SortDirection,
    PaginationSettings,
    get_settings,
    setup_logging,
    get_logger,
)

from .core.exceptions import (
    PaginationError,
    ParseError,
    get_http_status_code,
    create_error_response,
)

from .models import (
    PaginationQuery,
    PaginationResponse,
    paginated_response,
    default_pagination_response,
    get_total_pages,
    get_has_more,
)

from .extraction import (
    get_pagination_from_params,
    get_pagination_from_request,
)

__all__ = [
    "__version__",

    # Configuration
    "DEFAULT_SIZE",
    "DEFAULT_PAGE",
    "DEFAULT_ORDER_FIELD",
    "SortDirection",
    "PaginationSettings",
    "get_settings",
    "setup_logging",
    "get_logger",

    # Exceptions
    "PaginationError",
    "ParseError",
    "get_http_status_code",
    "create_error_response",

    # Query extraction
    "PaginationQuery",
    "get_pagination_from_params",
    "get_pagination_from_request",

    # Response building
    "PaginationResponse",
    "paginated_response",
    "default_pagination_response",
    "get_total_pages",
    "get_has_more",
]
