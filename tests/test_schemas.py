"""Tests for request parsing and logging context defaults."""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from catalog_api.core.logging import ContextDefaultsFilter
from catalog_api.models.order import OrderCategory
from catalog_api.models.product import ProductCategory

from conftest import make_order_request, make_product_request


class TestCategoryCoercion:
    """Category values arrive as enum members, integers or names."""

    def test_by_value(self):
        """Test integer category values."""
        assert make_order_request(category=3).category is OrderCategory.Children

    def test_by_digit_string(self):
        """Test digit strings are read as values."""
        assert make_order_request(category="1").category is OrderCategory.NonFiction

    def test_by_name_case_insensitive(self):
        """Test category names ignore case."""
        assert make_order_request(category="technical").category is OrderCategory.Technical

    def test_unknown_value_is_preserved(self):
        """Test unknown categories reach the validator unchanged."""
        assert make_order_request(category=42).category == 42
        assert make_order_request(category="Poetry").category == "Poetry"

    def test_product_categories(self):
        """Test product category coercion."""
        assert ProductCategory.coerce("home") is ProductCategory.Home
        assert ProductCategory.coerce(True) is True


def test_timezone_aware_dates_become_naive_utc():
    """Test offsets are converted to naive UTC."""
    request = make_order_request(published_date="2024-01-01T05:00:00+05:00")

    assert request.published_date.tzinfo is None
    assert request.published_date.hour == 0


def test_context_filter_fills_defaults():
    """Test log records get placeholder context fields."""
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert ContextDefaultsFilter().filter(record)
    assert record.correlation_id == "-"
    assert record.operation_id == "-"


class TestColumnLimits:
    """Values that could not be stored are rejected while parsing."""

    def test_isbn_longer_than_column(self):
        """Test ISBNs over 32 characters are rejected."""
        with pytest.raises(PydanticValidationError):
            make_order_request(isbn="9 - 7 - 8 - 1 - 2 - 3 - 4 - 5 - 6 - 7 - 8 - 9 - 7")

    def test_cover_image_url_longer_than_column(self):
        """Test cover URLs over 500 characters are rejected."""
        url = "https://example.com/" + "c" * 600 + ".png"

        with pytest.raises(PydanticValidationError):
            make_order_request(cover_image_url=url)

    def test_product_image_url_longer_than_column(self):
        """Test product image URLs over 500 characters are rejected."""
        url = "https://example.com/" + "i" * 600 + ".jpg"

        with pytest.raises(PydanticValidationError):
            make_product_request(image_url=url)

    def test_date_outside_utc_range(self):
        """Test an offset that pushes the date before year 1 is a validation error."""
        with pytest.raises(PydanticValidationError) as exc_info:
            make_order_request(published_date="0001-01-01T00:00:00+05:00")

        assert "out of range in UTC" in str(exc_info.value)
