"""Constants and enums for neo-pagination.

Default values applied when a client omits a pagination parameter, plus
the query-string keys the extractor reads.
"""

from enum import Enum
from typing import Final


DEFAULT_SIZE: Final[int] = 10
DEFAULT_PAGE: Final[int] = 0  # no offset
DEFAULT_ORDER_FIELD: Final[str] = "id"


class QueryParams:
    """Query-string keys read from the inbound request."""

    PAGE: Final[str] = "page"
    SIZE: Final[str] = "size"
    ORDER_BY: Final[str] = "orderBy"
    ORDER_DIR: Final[str] = "orderDir"


class SortDirection(str, Enum):
    """Normalized sort direction used in order clauses."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_raw(cls, raw: str) -> "SortDirection":
        """Resolve a client-supplied direction.

        Empty input or ``asc`` in any case resolves to ASC. Anything else,
        including typos, resolves to DESC.
        """
        if not raw or raw.lower() == "asc":
            return cls.ASC
        return cls.DESC
