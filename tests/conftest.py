"""Pytest configuration and fixtures for neo-pagination tests."""

import logging

import pytest
from pydantic import BaseModel

from neo_pagination.config.settings import get_settings
from neo_pagination.core.exceptions import http_mapping
from neo_pagination.models import PaginationQuery


class SampleUser(BaseModel):
    """Row type used as the generic parameter in response tests."""
    first_name: str
    last_name: str


@pytest.fixture(autouse=True)
def reset_cached_state(monkeypatch):
    """Clear cached settings and status mappings between tests."""
    for var in ("PAGINATION_DEFAULT_SIZE", "PAGINATION_DEFAULT_PAGE", "PAGINATION_DEFAULT_ORDER_FIELD"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    monkeypatch.setattr(http_mapping, "_global_mapper", None)
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_library_logger():
    """Undo logging configuration applied during a test."""
    logger = logging.getLogger("neo_pagination")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    disabled = logger.disabled
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    logger.disabled = disabled


@pytest.fixture
def first_page_query():
    """Query for page 1 with 10 rows, ordered by first_name descending."""
    return PaginationQuery(page=1, size=10, order_by="first_name", order_dir="DESC")


@pytest.fixture
def sample_users():
    """A single-row result list."""
    return [SampleUser(first_name="John", last_name="Wick")]
