"""
Pagination query model.

A PaginationQuery is built from raw query-string values through its
setter methods, then handed to the data layer as offset, limit and an
order clause.
"""
import logging
import re
from typing import Optional

from pydantic import Field

from .base import BaseSchema
from ..config.constants import (
    DEFAULT_SIZE,
    DEFAULT_PAGE,
    DEFAULT_ORDER_FIELD,
    QueryParams,
    SortDirection,
)
from ..core.exceptions import ParseError

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits, nothing else.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit bounds.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def parse_int(field: str, raw: str) -> int:
    """Parse a raw query value as an integer.

    Raises:
        ParseError: If raw is not a plain base-10 integer or falls outside
            the signed 64-bit range
    """
    if not INTEGER_PATTERN.fullmatch(raw):
        logger.debug("Rejected %s parameter: %r", field, raw)
        raise ParseError(field, raw)
    # More than 19 significant digits cannot fit; skip int() on huge inputs.
    significant = raw.lstrip("+-").lstrip("0")
    if len(significant) > 19 or not INT_MIN <= int(raw) <= INT_MAX:
        logger.debug("Rejected %s parameter out of range: %r", field, raw)
        raise ParseError(field, raw, f"Invalid {field} value: {raw!r} is out of range")
    return int(raw)


class PaginationQuery(BaseSchema):
    """Normalized request for a page of data."""
    size: int = Field(0, description="Rows requested per page")
    page: int = Field(0, description="1-based page number, 0 means no offset")
    order_by: str = Field("", alias="orderBy", description="Field to sort by")
    order_dir: str = Field("", alias="orderDir", description="Sort direction, ASC or DESC")

    def set_size(self, raw: Optional[str], default: int = DEFAULT_SIZE) -> None:
        """Set size from a raw query value, falling back to default when empty.

        No lower bound is enforced; zero and negative sizes are kept as-is.

        Raises:
            ParseError: If raw is non-empty and not an integer
        """
        if not raw:
            self.size = default
            return
        self.size = parse_int(QueryParams.SIZE, raw)

    def set_page(self, raw: Optional[str], default: int = DEFAULT_PAGE) -> None:
        """Set page from a raw query value, falling back to default when empty.

        Raises:
            ParseError: If raw is non-empty and not an integer
        """
        if not raw:
            self.page = default
            return
        self.page = parse_int(QueryParams.PAGE, raw)

    def set_order_by(
        self,
        order_by_raw: Optional[str],
        order_dir_raw: Optional[str],
        default_field: str = DEFAULT_ORDER_FIELD
    ) -> None:
        """Set the sort field and direction. Never fails.

        An empty field uses default_field. The direction is ASC when empty
        or ``asc`` in any case, DESC otherwise.
        """
        self.order_by = order_by_raw or default_field
        self.order_dir = SortDirection.from_raw(order_dir_raw or "").value

    def get_offset(self) -> int:
        """Get the 0-based row offset for the current page."""
        if self.page == 0:
            return 0
        return (self.page - 1) * self.size

    def get_limit(self) -> int:
        """Get the number of rows to fetch."""
        return self.size

    def get_order_by(self) -> str:
        """Get the combined order clause, e.g. ``first_name DESC``."""
        if not self.order_by:
            return ""
        if not self.order_dir:
            return self.order_by
        return f"{self.order_by} {self.order_dir}"

    def get_page(self) -> int:
        return self.page

    def get_size(self) -> int:
        return self.size

    def get_query_string(self) -> str:
        """Get an example query string for this query (not URL-encoded)."""
        return (
            f"{QueryParams.PAGE}={self.get_page()}"
            f"&{QueryParams.SIZE}={self.get_size()}"
            f"&{QueryParams.ORDER_BY}={self.get_order_by()}"
        )
