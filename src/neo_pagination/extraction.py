"""Extraction of pagination parameters from inbound requests.

Works with anything that exposes query parameters as a mapping, which
covers Starlette/FastAPI requests directly.
"""

from typing import Any, Mapping, Optional

from .config.constants import QueryParams
from .config.settings import PaginationSettings, get_settings
from .models.query import PaginationQuery


def get_first(params: Mapping[str, str], key: str) -> str:
    """Get the first value for key, or "" when absent.

    Multi-value mappings such as starlette's QueryParams return the last
    value from plain lookup, so the first is read through getlist.
    """
    getlist = getattr(params, "getlist", None)
    if getlist is not None:
        values = getlist(key)
        return values[0] if values else ""
    return params.get(key, "")


def get_pagination_from_params(
    params: Mapping[str, str],
    settings: Optional[PaginationSettings] = None
) -> PaginationQuery:
    """Build a PaginationQuery from raw query parameters.

    Missing keys are treated as empty values and repeated keys resolve to
    their first value. Page is parsed before size, and the first invalid
    value aborts extraction.

    Args:
        params: Query parameters keyed by name
        settings: Defaults to apply; the cached settings when omitted

    Returns:
        Populated pagination query

    Raises:
        ParseError: If page or size is non-empty and not an integer
    """
    settings = settings or get_settings()

    query = PaginationQuery()
    query.set_page(get_first(params, QueryParams.PAGE), default=settings.default_page)
    query.set_size(get_first(params, QueryParams.SIZE), default=settings.default_size)
    query.set_order_by(
        get_first(params, QueryParams.ORDER_BY),
        get_first(params, QueryParams.ORDER_DIR),
        default_field=settings.default_order_field
    )
    return query


def get_pagination_from_request(
    request: Any,
    settings: Optional[PaginationSettings] = None
) -> PaginationQuery:
    """Build a PaginationQuery from a request's query parameters.

    Args:
        request: Object exposing a ``query_params`` mapping, such as a
            starlette.requests.Request

    Raises:
        ParseError: If page or size is non-empty and not an integer
    """
    return get_pagination_from_params(request.query_params, settings)
