"""Tests for order creation rules.

Every rule is evaluated; the result lists each failed rule's message in
declaration order.
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from catalog_api.models.order import OrderCategory
from catalog_api.validators.order_validator import OrderValidator

from conftest import NOW, fixed_clock, make_order_request

BUSINESS_RULES = "Order violates business rules. Check logs for details."


@pytest.fixture
def validator(mock_order_repository) -> OrderValidator:
    return OrderValidator(mock_order_repository, clock=fixed_clock)


class TestOrderFieldRules:
    """Format and range checks."""

    @pytest.mark.asyncio
    async def test_valid_technical_order(self, validator):
        """Test a well-formed technical order passes every rule."""
        result = await validator.validate(make_order_request())

        assert result.is_valid
        assert result.errors == []

    @pytest.mark.asyncio
    async def test_collects_every_failure_in_order(self, validator):
        """A request with several problems reports all of them, not just the first."""
        request = make_order_request(
            category=OrderCategory.NonFiction,
            title="   ",
            isbn="abc",
            price=Decimal("0"),
        )

        result = await validator.validate(request)

        assert result.errors == [
            "Title is required.",
            "ISBN must be 10 or 13 digits (hyphens optional).",
            "Price must be greater than 0.",
        ]

    @pytest.mark.asyncio
    async def test_title_too_long(self, validator):
        """Test a title over 200 characters is rejected."""
        result = await validator.validate(make_order_request(title="Cloud " + "x" * 200))

        assert result.errors == ["Title must be between 1 and 200 characters."]

    @pytest.mark.asyncio
    async def test_inappropriate_title(self, validator):
        """Test titles containing blocked words are rejected."""
        request = make_order_request(
            category=OrderCategory.NonFiction,
            title="The Forbidden Archive",
        )

        result = await validator.validate(request)

        assert result.errors == ["Title contains inappropriate content."]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("author", ["A", "A" * 101])
    async def test_author_length_bounds(self, validator, author):
        """Test author names outside 2 to 100 characters are rejected."""
        result = await validator.validate(make_order_request(author=author))

        assert result.errors == ["Author must be between 2 and 100 characters."]

    @pytest.mark.asyncio
    async def test_author_with_digits_is_rejected(self, validator):
        """Test author names may only hold letters, spaces and punctuation."""
        result = await validator.validate(make_order_request(author="R2 D2"))

        assert "Author contains invalid characters." in result.errors

    @pytest.mark.asyncio
    async def test_hyphenated_isbn_is_accepted(self, validator, mock_order_repository):
        """Test hyphens are stripped for the format check but kept for lookups."""
        result = await validator.validate(make_order_request(isbn="978-1-234-56789-7"))

        assert result.is_valid
        mock_order_repository.exists_by_isbn.assert_awaited_once_with("978-1-234-56789-7")

    @pytest.mark.asyncio
    async def test_unknown_category(self, validator):
        """Test an out-of-range category is reported by the rules."""
        result = await validator.validate(make_order_request(category=9))

        assert result.errors == ["Category must be a valid value."]

    @pytest.mark.asyncio
    async def test_price_upper_bound(self, validator):
        """Test a price of $10,000 is rejected."""
        result = await validator.validate(
            make_order_request(price=Decimal("10000"), stock_quantity=5)
        )

        assert "Price must be less than $10,000." in result.errors

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["20.004", "9999.995"])
    async def test_price_with_more_than_two_decimals(self, validator, price):
        """Test sub-cent prices are rejected instead of being rounded on save."""
        result = await validator.validate(make_order_request(price=Decimal(price)))

        assert result.errors == ["Price cannot have more than 2 decimal places."]

    @pytest.mark.asyncio
    async def test_trailing_zero_decimals_are_accepted(self, validator):
        """Test 45.000 counts as a whole-cent price."""
        result = await validator.validate(make_order_request(price=Decimal("45.000")))

        assert result.is_valid

    @pytest.mark.asyncio
    async def test_future_published_date(self, validator):
        """Test publication dates after now are rejected."""
        result = await validator.validate(
            make_order_request(published_date=NOW + timedelta(days=1))
        )

        assert "Published date cannot be in the future." in result.errors

    @pytest.mark.asyncio
    async def test_published_before_1400(self, validator):
        """Test publication dates before 1400-01-01 are rejected."""
        request = make_order_request(
            title="History of Rome",
            category=OrderCategory.NonFiction,
            published_date=datetime(1399, 12, 31),
        )

        result = await validator.validate(request)

        assert result.errors == ["Published date cannot be before year 1400."]

    @pytest.mark.asyncio
    async def test_published_on_1400_floor(self, validator):
        """Test the 1400-01-01 floor itself is allowed."""
        request = make_order_request(
            title="History of Rome",
            category=OrderCategory.NonFiction,
            published_date=datetime(1400, 1, 1),
        )

        result = await validator.validate(request)

        assert result.is_valid

    @pytest.mark.asyncio
    async def test_negative_stock(self, validator):
        """Test negative stock quantities are rejected."""
        result = await validator.validate(make_order_request(stock_quantity=-1))

        assert result.errors == ["Stock quantity cannot be negative."]

    @pytest.mark.asyncio
    async def test_stock_upper_bound(self, validator):
        """Test stock quantities over 100,000 are rejected."""
        result = await validator.validate(make_order_request(stock_quantity=100_001))

        assert result.errors == ["Stock quantity cannot exceed 100,000."]

    @pytest.mark.asyncio
    async def test_cover_image_url_must_be_http_image(self, validator):
        """Test cover URLs need an http(s) scheme."""
        result = await validator.validate(
            make_order_request(cover_image_url="ftp://example.com/cover.png")
        )

        assert result.errors == [
            "Cover image URL must be a valid HTTP/HTTPS image URL "
            "(.jpg, .jpeg, .png, .gif, .webp)."
        ]

    @pytest.mark.asyncio
    async def test_upper_case_image_extension_is_accepted(self, validator):
        """Test the image extension check ignores case."""
        result = await validator.validate(
            make_order_request(cover_image_url="https://example.com/covers/CLOUD.PNG")
        )

        assert result.is_valid

    @pytest.mark.asyncio
    async def test_missing_cover_image_is_allowed(self, validator):
        """Test the cover URL is optional."""
        result = await validator.validate(make_order_request(cover_image_url=None))

        assert result.is_valid


class TestOrderUniquenessRules:
    """Checks backed by the repository."""

    @pytest.mark.asyncio
    async def test_duplicate_isbn(self, validator, mock_order_repository):
        """Test an ISBN already in the store is rejected."""
        mock_order_repository.exists_by_isbn.return_value = True

        result = await validator.validate(make_order_request())

        assert result.errors == ["An order with this ISBN already exists."]

    @pytest.mark.asyncio
    async def test_duplicate_title_and_author(self, validator, mock_order_repository):
        """Test a repeated title for the same author is rejected."""
        mock_order_repository.exists_by_title_and_author.return_value = True

        result = await validator.validate(make_order_request())

        assert result.errors == ["An order with the same title and author already exists."]
        mock_order_repository.exists_by_title_and_author.assert_awaited_once_with(
            "Cloud Architecture Essentials", "Ada Lovelace"
        )


class TestOrderCategoryRules:
    """Category-specific and business rules."""

    @pytest.mark.asyncio
    async def test_cheap_technical_order_fails_twice(self, validator):
        """The business rule aggregate and the technical rule both report."""
        result = await validator.validate(make_order_request(price=Decimal("15")))

        assert result.errors == [
            BUSINESS_RULES,
            "Technical orders must cost at least $20.00.",
        ]

    @pytest.mark.asyncio
    async def test_technical_order_needs_keywords(self, validator):
        """Test technical titles must mention a technical keyword."""
        result = await validator.validate(make_order_request(title="Gardening Basics"))

        assert result.errors == ["Technical orders must contain technical keywords in the title."]

    @pytest.mark.asyncio
    async def test_technical_order_must_be_recent(self, validator):
        """Test technical orders older than five years are rejected."""
        result = await validator.validate(
            make_order_request(published_date=NOW - timedelta(days=6 * 365))
        )

        assert result.errors == ["Technical orders must be published within the last 5 years."]

    @pytest.mark.asyncio
    async def test_children_order_price_cap(self, validator):
        """Test children's orders cost at most $50."""
        request = make_order_request(
            title="Friendly Forest Adventures",
            category=OrderCategory.Children,
            price=Decimal("60"),
        )

        result = await validator.validate(request)

        assert result.errors == ["Children's orders cannot exceed $50.00."]

    @pytest.mark.asyncio
    async def test_children_order_restricted_title(self, validator):
        """Test restricted words fail both the aggregate and the children rule."""
        request = make_order_request(
            title="Horror Night",
            category=OrderCategory.Children,
            price=Decimal("20"),
        )

        result = await validator.validate(request)

        assert result.errors == [
            BUSINESS_RULES,
            "Children's orders must have child-appropriate titles.",
        ]

    @pytest.mark.asyncio
    async def test_fiction_author_minimum_length(self, validator):
        """Test fiction author names need at least five characters."""
        request = make_order_request(
            title="Quiet Harbour",
            author="Al B",
            category=OrderCategory.Fiction,
        )

        result = await validator.validate(request)

        assert result.errors == ["Fiction orders require author names of at least 5 characters."]

    @pytest.mark.asyncio
    async def test_high_value_stock_limits(self, validator):
        """Over $500 allows at most 10 units; over $100 at most 20."""
        request = make_order_request(
            title="History of Rome",
            category=OrderCategory.NonFiction,
            price=Decimal("600"),
            stock_quantity=25,
        )

        result = await validator.validate(request)

        assert result.errors == [
            BUSINESS_RULES,
            "Orders over $100 must have stock quantity of 20 or less.",
        ]

    @pytest.mark.asyncio
    async def test_daily_limit(self, validator, mock_order_repository):
        """Test the 500-per-day cap counts the current UTC day."""
        mock_order_repository.count_created_between.return_value = 500

        result = await validator.validate(make_order_request())

        assert result.errors == [BUSINESS_RULES]
        start, end = mock_order_repository.count_created_between.await_args.args
        assert start == NOW.replace(hour=0, minute=0, second=0, microsecond=0)
        assert end - start == timedelta(days=1)
