"""HTTP status code mapping for exceptions.

Maps neo-pagination exceptions to HTTP status codes. Subclasses without
their own entry inherit the status of their nearest mapped base class.
"""

from typing import Any, Dict, Optional, Type

from .base import PaginationError, ParseError


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ParseError: 400,

    # Default for PaginationError
    PaginationError: 500,
}


class HttpStatusMapper:
    """HTTP status code mapper with per-type caching and optional overrides."""

    def __init__(self, overrides: Optional[Dict[Type[Exception], int]] = None):
        """Initialize with optional status code overrides.

        Args:
            overrides: Exception types mapped to status codes, checked before
                the default mapping
        """
        self._overrides = dict(overrides or {})
        self._cache: Dict[Type[Exception], int] = {}

    def get_status_code(self, exception: Exception) -> int:
        """Get HTTP status code for exception.

        Args:
            exception: The exception instance

        Returns:
            HTTP status code (cached per exception type)
        """
        exception_type = type(exception)

        if exception_type in self._cache:
            return self._cache[exception_type]

        status_code = 500
        for klass in exception_type.__mro__:
            if klass in self._overrides:
                status_code = self._overrides[klass]
                break
            if klass in HTTP_STATUS_MAP:
                status_code = HTTP_STATUS_MAP[klass]
                break

        self._cache[exception_type] = status_code
        return status_code

    def clear_cache(self) -> None:
        """Clear the status code cache."""
        self._cache.clear()

    def get_mapping_stats(self) -> Dict[str, Any]:
        """Get statistics about current mappings."""
        return {
            "cached_mappings": len(self._cache),
            "default_mappings": len(HTTP_STATUS_MAP),
            "overrides": len(self._overrides),
            "cache_entries": {
                exc_type.__name__: status_code
                for exc_type, status_code in self._cache.items()
            }
        }


# Global mapper instance
_global_mapper: Optional[HttpStatusMapper] = None


def get_mapper() -> HttpStatusMapper:
    """Get or create the global HTTP status mapper."""
    global _global_mapper
    if _global_mapper is None:
        _global_mapper = HttpStatusMapper()
    return _global_mapper


def set_status_overrides(overrides: Dict[Type[Exception], int]) -> None:
    """Replace the global mapper with one using the given overrides."""
    global _global_mapper
    _global_mapper = HttpStatusMapper(overrides)


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the global mapper."""
    return get_mapper().get_status_code(exception)
