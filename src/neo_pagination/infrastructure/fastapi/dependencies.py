"""FastAPI dependencies for pagination.

Usage:
    @router.get("/users", response_model=PaginationResponse[User])
    async def list_users(
        pagination: PaginationQuery = Depends(get_pagination)
    ):
        rows = await repo.list(
            offset=pagination.get_offset(),
            limit=pagination.get_limit(),
            order_by=pagination.get_order_by(),
        )
        return paginated_response(await repo.count(), pagination, rows)
"""

from fastapi import Request

from ...extraction import get_pagination_from_request
from ...models.query import PaginationQuery


def get_pagination(request: Request) -> PaginationQuery:
    """Get the pagination query for the current request.

    Reads page, size, orderBy and orderDir straight from the query string,
    so malformed values surface as ParseError rather than FastAPI's own
    validation error, and repeated keys resolve to their first value.
    """
    return get_pagination_from_request(request)
