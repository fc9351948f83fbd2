"""Tests for PaginationQuery parsing and derivations."""

import logging

import pytest

from neo_pagination.core.exceptions import ParseError
from neo_pagination.models import PaginationQuery, parse_int


class TestSetSize:
    """Test cases for PaginationQuery.set_size."""

    @pytest.mark.parametrize("raw, expected", [
        ("1", 1),
        ("10", 10),
        ("250", 250),
        ("+5", 5),
        ("0", 0),
        ("-3", -3),
    ])
    def test_numeric_string_is_parsed(self, raw, expected):
        """Test numeric strings set size to their integer value."""
        query = PaginationQuery()
        query.set_size(raw)
        assert query.size == expected

    def test_empty_string_uses_default(self):
        """Test empty size falls back to 10."""
        query = PaginationQuery()
        query.set_size("")
        assert query.size == 10

    def test_none_uses_default(self):
        """Test missing size falls back to 10."""
        query = PaginationQuery()
        query.set_size(None)
        assert query.size == 10

    def test_custom_default(self):
        """Test an explicit default is applied for empty size."""
        query = PaginationQuery()
        query.set_size("", default=25)
        assert query.size == 25

    @pytest.mark.parametrize("raw", ["abc", "1.5", "10a", " 10", "10 ", "1_000", "--1", "+", "٣"])
    def test_non_integer_raises_parse_error(self, raw):
        """Test non-integer size values are rejected."""
        query = PaginationQuery()
        with pytest.raises(ParseError) as exc_info:
            query.set_size(raw)

        assert exc_info.value.field == "size"
        assert exc_info.value.value == raw
        assert exc_info.value.details == {"field": "size", "value": raw}

    def test_failed_parse_leaves_size_untouched(self):
        """Test a rejected value does not modify the current size."""
        query = PaginationQuery(size=20)
        with pytest.raises(ParseError):
            query.set_size("twenty")
        assert query.size == 20


class TestSetPage:
    """Test cases for PaginationQuery.set_page."""

    def test_numeric_string_is_parsed(self):
        """Test numeric page strings are parsed."""
        query = PaginationQuery()
        query.set_page("3")
        assert query.page == 3

    def test_empty_page_sets_page_not_size(self):
        """Test an absent page resets page to 0 and leaves size untouched."""
        query = PaginationQuery(page=4, size=25)
        query.set_page("")

        assert query.page == 0
        assert query.size == 25

    def test_custom_default(self):
        """Test an explicit default is applied for empty page."""
        query = PaginationQuery()
        query.set_page("", default=1)
        assert query.page == 1

    @pytest.mark.parametrize("raw", ["one", "2.0", "1e3", "0x10"])
    def test_non_integer_raises_parse_error(self, raw):
        """Test non-integer page values are rejected."""
        query = PaginationQuery()
        with pytest.raises(ParseError) as exc_info:
            query.set_page(raw)

        assert exc_info.value.field == "page"
        assert "page" in exc_info.value.message


class TestSetOrderBy:
    """Test cases for PaginationQuery.set_order_by."""

    @pytest.mark.parametrize("field, direction, expected", [
        ("", "", "id ASC"),
        ("first_name", "desc", "first_name DESC"),
        ("first_name", "DESC", "first_name DESC"),
        ("first_name", "asc", "first_name ASC"),
        ("first_name", "AsC", "first_name ASC"),
        ("first_name", "", "first_name ASC"),
        ("", "desc", "id DESC"),
        ("first_name", "descending", "first_name DESC"),
        ("first_name", "upward", "first_name DESC"),
    ])
    def test_order_clause(self, field, direction, expected):
        """Test field and direction normalization into the order clause."""
        query = PaginationQuery()
        query.set_order_by(field, direction)
        assert query.get_order_by() == expected

    def test_field_and_direction_stored_separately(self):
        """Test the field and direction remain individually accessible."""
        query = PaginationQuery()
        query.set_order_by("created_at", "desc")

        assert query.order_by == "created_at"
        assert query.order_dir == "DESC"

    def test_none_values_use_defaults(self):
        """Test missing field and direction resolve to id ASC."""
        query = PaginationQuery()
        query.set_order_by(None, None)
        assert query.get_order_by() == "id ASC"

    def test_custom_default_field(self):
        """Test an explicit default field is applied for empty orderBy."""
        query = PaginationQuery()
        query.set_order_by("", "", default_field="created_at")
        assert query.get_order_by() == "created_at ASC"

    def test_order_by_empty_before_set(self):
        """Test a fresh query has no order clause."""
        assert PaginationQuery().get_order_by() == ""


class TestOffsetAndLimit:
    """Test cases for offset and limit derivation."""

    @pytest.mark.parametrize("page, size, expected", [
        (1, 10, 0),
        (2, 10, 10),
        (3, 10, 20),
        (5, 25, 100),
        (0, 10, 0),
        (0, 500, 0),
    ])
    def test_get_offset(self, page, size, expected):
        """Test 1-based page to 0-based row offset conversion."""
        query = PaginationQuery(page=page, size=size)
        assert query.get_offset() == expected

    def test_get_limit_returns_size(self):
        """Test limit echoes size unchanged."""
        assert PaginationQuery(size=42).get_limit() == 42
        assert PaginationQuery(size=0).get_limit() == 0

    def test_accessors(self):
        """Test page and size accessors."""
        query = PaginationQuery(page=7, size=15)
        assert query.get_page() == 7
        assert query.get_size() == 15


class TestQueryString:
    """Test cases for the debug query string."""

    def test_get_query_string(self, first_page_query):
        """Test query string reconstruction."""
        assert first_page_query.get_query_string() == "page=1&size=10&orderBy=first_name DESC"

    def test_get_query_string_unset_order(self):
        """Test query string with no order clause."""
        query = PaginationQuery(page=2, size=5)
        assert query.get_query_string() == "page=2&size=5&orderBy="


class TestSerialization:
    """Test cases for PaginationQuery serialization."""

    def test_dump_by_alias(self, first_page_query):
        """Test camelCase aliases are used for order fields."""
        assert first_page_query.model_dump(by_alias=True) == {
            "size": 10,
            "page": 1,
            "orderBy": "first_name",
            "orderDir": "DESC",
        }

    def test_construct_from_aliases(self):
        """Test the query can be built from aliased keys."""
        query = PaginationQuery.model_validate({"page": 2, "size": 5, "orderBy": "email", "orderDir": "ASC"})
        assert query.get_order_by() == "email ASC"


class TestParseIntRange:
    """Test cases for the signed 64-bit bounds on parsed values."""

    @pytest.mark.parametrize("raw, expected", [
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
        ("0000000000000000000000042", 42),
    ])
    def test_values_within_range(self, raw, expected):
        """Test boundary values and leading zeros are accepted."""
        assert parse_int("size", raw) == expected

    @pytest.mark.parametrize("raw", [
        "9223372036854775808",
        "-9223372036854775809",
        "99999999999999999999",
        "1" * 5000,
    ])
    def test_values_out_of_range(self, raw):
        """Test values beyond 64 bits are rejected as ParseError."""
        query = PaginationQuery()
        with pytest.raises(ParseError) as exc_info:
            query.set_size(raw)

        assert exc_info.value.field == "size"
        assert "out of range" in exc_info.value.message
        assert query.size == 0


class TestParseLogging:
    """Test cases for debug records on rejected parameters."""

    def test_rejected_value_is_logged(self, caplog):
        """Test a rejected page value emits a DEBUG record."""
        caplog.set_level(logging.DEBUG, logger="neo_pagination")
        with pytest.raises(ParseError):
            PaginationQuery().set_page("abc")

        records = [r for r in caplog.records if r.name == "neo_pagination.models.query"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "page" in records[0].getMessage()
        assert "'abc'" in records[0].getMessage()

    def test_accepted_value_is_not_logged(self, caplog):
        """Test valid values produce no records."""
        caplog.set_level(logging.DEBUG, logger="neo_pagination")
        PaginationQuery().set_page("3")

        assert not [r for r in caplog.records if r.name.startswith("neo_pagination")]
