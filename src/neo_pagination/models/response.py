"""
Paginated response envelope and the derivations behind its metadata.
"""
import logging
from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from .base import BaseSchema
from .query import PaginationQuery

logger = logging.getLogger(__name__)

T = TypeVar('T')


def get_total_pages(total_count: int, page_size: int) -> int:
    """Get the number of pages needed to hold total_count rows.

    Returns 0 when page_size is zero or negative.
    """
    if page_size <= 0:
        logger.debug("Non-positive page size %s, reporting 0 total pages", page_size)
        return 0
    return (total_count + page_size - 1) // page_size


def get_has_more(current_page: int, total_count: int, page_size: int) -> bool:
    """Check whether pages exist beyond current_page.

    Compares against total_count / page_size truncated toward zero, so a
    trailing partial page does not count. Returns False when page_size is
    zero or negative.
    """
    if page_size <= 0:
        logger.debug("Non-positive page size %s, reporting no more pages", page_size)
        return False
    full_pages = abs(total_count) // page_size
    if total_count < 0:
        full_pages = -full_pages
    return current_page < full_pages


class PaginationResponse(BaseSchema, Generic[T]):
    """Generic paginated response model."""
    total_count: int = Field(description="Total matching rows across all pages")
    total_pages: int = Field(description="Total number of pages")
    page: int = Field(description="Current page number")
    size: int = Field(description="Rows per page")
    has_more: bool = Field(description="Whether pages exist beyond the current one")
    values: List[T] = Field(default_factory=list, description="Rows for the current page")

    @classmethod
    def create(
        cls,
        count: int,
        query: PaginationQuery,
        items: Optional[List[T]] = None
    ) -> "PaginationResponse[T]":
        """Create a paginated response with items and derived metadata."""
        return cls(
            total_count=count,
            total_pages=get_total_pages(count, query.get_size()),
            page=query.get_page(),
            size=query.get_size(),
            has_more=get_has_more(query.get_page(), count, query.get_size()),
            values=items if items is not None else []
        )

    @classmethod
    def empty(cls, query: PaginationQuery) -> "PaginationResponse[T]":
        """Create a response with no rows, for "nothing found" paths."""
        return cls.create(0, query, [])


def paginated_response(
    count: int,
    query: PaginationQuery,
    items: Optional[List[T]]
) -> PaginationResponse[T]:
    """Wrap items with pagination metadata."""
    return PaginationResponse.create(count, query, items)


def default_pagination_response(query: PaginationQuery) -> PaginationResponse[T]:
    """Get an empty pagination response for the given query."""
    return PaginationResponse.empty(query)
