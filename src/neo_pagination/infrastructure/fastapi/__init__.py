"""FastAPI integration for neo-pagination."""

from .dependencies import get_pagination
from .exception_handlers import (
    pagination_error_handler,
    register_exception_handlers,
)

__all__ = [
    "get_pagination",
    "pagination_error_handler",
    "register_exception_handlers",
]
