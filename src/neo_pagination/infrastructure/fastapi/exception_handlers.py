"""Exception handlers translating pagination errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...core.exceptions import (
    PaginationError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)


async def pagination_error_handler(request: Request, exc: PaginationError) -> JSONResponse:
    """Render a PaginationError as a structured JSON error body."""
    status_code = get_http_status_code(exc)
    logger.debug(
        "Pagination error on %s: %s",
        request.url.path,
        exc.message,
        extra={"error_code": exc.error_code, "status_code": status_code}
    )
    return JSONResponse(status_code=status_code, content=create_error_response(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register pagination exception handlers on a FastAPI app."""
    app.add_exception_handler(PaginationError, pagination_error_handler)
