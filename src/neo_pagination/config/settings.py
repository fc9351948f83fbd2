"""
Settings for pagination defaults.

Hosts can override the defaults through environment variables prefixed
with ``PAGINATION_`` (or a ``.env`` file), e.g. ``PAGINATION_DEFAULT_SIZE=25``.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_SIZE, DEFAULT_PAGE, DEFAULT_ORDER_FIELD


class PaginationSettings(BaseSettings):
    """Defaults used when a request omits pagination parameters."""

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    default_size: int = Field(default=DEFAULT_SIZE, description="Rows per page when size is absent")
    default_page: int = Field(default=DEFAULT_PAGE, description="Page when page is absent (0 means no offset)")
    default_order_field: str = Field(default=DEFAULT_ORDER_FIELD, description="Sort field when orderBy is absent")


@lru_cache()
def get_settings() -> PaginationSettings:
    """Get cached pagination settings."""
    return PaginationSettings()
