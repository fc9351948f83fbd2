"""Configuration module for neo-pagination.

Defaults, environment-driven settings, and logging setup.
"""

from .constants import (
    DEFAULT_SIZE,
    DEFAULT_PAGE,
    DEFAULT_ORDER_FIELD,
    QueryParams,
    SortDirection,
)

from .settings import (
    PaginationSettings,
    get_settings,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "DEFAULT_SIZE",
    "DEFAULT_PAGE",
    "DEFAULT_ORDER_FIELD",
    "QueryParams",
    "SortDirection",

    # Settings
    "PaginationSettings",
    "get_settings",

    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
