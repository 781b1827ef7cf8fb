"""Validation rules for order creation."""

import logging
import re
from datetime import datetime
from decimal import Decimal

from catalog_api.core.timeutils import Clock, day_bounds, utcnow, years_ago
from catalog_api.models.order import OrderCategory
from catalog_api.repositories.order_repository import OrderRepository
from catalog_api.schemas.order import OrderCreate
from catalog_api.validators.rules import (
    Rule,
    RuleSetValidator,
    contains_any,
    has_max_decimal_places,
    is_blank,
    is_image_url,
    length_between,
)

logger = logging.getLogger(__name__)

INAPPROPRIATE_WORDS = ("banned", "explicit", "forbidden", "violent")

TECHNICAL_KEYWORDS = (
    "cloud", "data", "ai", "machine", "network", "programming", "security",
    "database", "architecture", "algorithm", "software", "hardware",
)

CHILDREN_RESTRICTED_WORDS = ("violence", "horror", "adult", "war", "blood")

AUTHOR_PATTERN = re.compile(r"^[A-Za-z\s\-.'’]+$")
ISBN_PATTERN = re.compile(r"^(?:[0-9]{10}|[0-9]{13})$")

MAX_PRICE = Decimal("10000")
PRICE_DECIMAL_PLACES = 2
MAX_STOCK = 100_000
EARLIEST_PUBLISHED_DATE = datetime(1400, 1, 1)
DAILY_ORDER_LIMIT = 500

TECHNICAL_MIN_PRICE = Decimal("20")
TECHNICAL_MAX_AGE_YEARS = 5
CHILDREN_MAX_PRICE = Decimal("50")
FICTION_MIN_AUTHOR_LENGTH = 5
HIGH_VALUE_PRICE = Decimal("500")
HIGH_VALUE_MAX_STOCK = 10
PREMIUM_PRICE = Decimal("100")
PREMIUM_MAX_STOCK = 20


def normalize_isbn(isbn: str) -> str:
    return isbn.replace("-", "").replace(" ", "")


def _category_is(category: OrderCategory):
    return lambda request: request.category == category


class OrderValidator(RuleSetValidator[OrderCreate]):
    """Checks an OrderCreate request against format, uniqueness and business rules."""

    def __init__(self, repository: OrderRepository, clock: Clock = utcnow):
        self.repository = repository
        self.clock = clock

        is_technical = _category_is(OrderCategory.Technical)
        is_children = _category_is(OrderCategory.Children)
        is_fiction = _category_is(OrderCategory.Fiction)

        self.rules = [
            # Title
            Rule("Title is required.", lambda r: not is_blank(r.title)),
            Rule(
                "Title must be between 1 and 200 characters.",
                lambda r: length_between(r.title, 1, 200),
            ),
            Rule("Title contains inappropriate content.", self._has_appropriate_title),
            Rule(
                "An order with the same title and author already exists.",
                self._has_unique_title,
            ),
            # Author
            Rule("Author is required.", lambda r: not is_blank(r.author)),
            Rule(
                "Author must be between 2 and 100 characters.",
                lambda r: length_between(r.author, 2, 100),
            ),
            Rule("Author contains invalid characters.", self._has_valid_author_name),
            # ISBN
            Rule("ISBN is required.", lambda r: not is_blank(r.isbn)),
            Rule("ISBN must be 10 or 13 digits (hyphens optional).", self._has_valid_isbn),
            Rule("An order with this ISBN already exists.", self._has_unique_isbn),
            # Category
            Rule(
                "Category must be a valid value.",
                lambda r: isinstance(r.category, OrderCategory),
            ),
            # Price
            Rule("Price must be greater than 0.", lambda r: r.price > 0),
            Rule("Price must be less than $10,000.", lambda r: r.price < MAX_PRICE),
            Rule(
                "Price cannot have more than 2 decimal places.",
                lambda r: has_max_decimal_places(r.price, PRICE_DECIMAL_PLACES),
            ),
            # Published date
            Rule(
                "Published date cannot be in the future.",
                lambda r: r.published_date <= self.clock(),
            ),
            Rule(
                "Published date cannot be before year 1400.",
                lambda r: r.published_date >= EARLIEST_PUBLISHED_DATE,
            ),
            # Stock
            Rule("Stock quantity cannot be negative.", lambda r: r.stock_quantity >= 0),
            Rule(
                "Stock quantity cannot exceed 100,000.",
                lambda r: r.stock_quantity <= MAX_STOCK,
            ),
            # Cover image
            Rule(
                "Cover image URL must be a valid HTTP/HTTPS image URL "
                "(.jpg, .jpeg, .png, .gif, .webp).",
                self._has_valid_cover_image_url,
                when=lambda r: not is_blank(r.cover_image_url),
            ),
            Rule(
                "Order violates business rules. Check logs for details.",
                self._passes_business_rules,
            ),
            # Technical
            Rule(
                "Technical orders must cost at least $20.00.",
                lambda r: r.price >= TECHNICAL_MIN_PRICE,
                when=is_technical,
            ),
            Rule(
                "Technical orders must contain technical keywords in the title.",
                self._has_technical_keywords,
                when=is_technical,
            ),
            Rule(
                "Technical orders must be published within the last 5 years.",
                lambda r: r.published_date >= years_ago(self.clock(), TECHNICAL_MAX_AGE_YEARS),
                when=is_technical,
            ),
            # Children
            Rule(
                "Children's orders cannot exceed $50.00.",
                lambda r: r.price <= CHILDREN_MAX_PRICE,
                when=is_children,
            ),
            Rule(
                "Children's orders must have child-appropriate titles.",
                self._is_appropriate_for_children,
                when=is_children,
            ),
            # Fiction
            Rule(
                "Fiction orders require author names of at least 5 characters.",
                lambda r: len(r.author) >= FICTION_MIN_AUTHOR_LENGTH,
                when=is_fiction,
            ),
            Rule(
                "Orders over $100 must have stock quantity of 20 or less.",
                lambda r: r.price <= PREMIUM_PRICE or r.stock_quantity <= PREMIUM_MAX_STOCK,
            ),
        ]

    def _has_appropriate_title(self, request: OrderCreate) -> bool:
        if contains_any(request.title, INAPPROPRIATE_WORDS):
            logger.warning(f"Title validation failed due to inappropriate content: {request.title}")
            return False
        return True

    async def _has_unique_title(self, request: OrderCreate) -> bool:
        exists = await self.repository.exists_by_title_and_author(request.title, request.author)
        if exists:
            logger.warning(f"Duplicate title detected for author {request.author}")
        return not exists

    def _has_valid_author_name(self, request: OrderCreate) -> bool:
        if not AUTHOR_PATTERN.fullmatch(request.author):
            logger.warning(f"Author validation failed: {request.author}")
            return False
        return True

    def _has_valid_isbn(self, request: OrderCreate) -> bool:
        if not ISBN_PATTERN.fullmatch(normalize_isbn(request.isbn)):
            logger.warning(f"ISBN format invalid: {request.isbn}")
            return False
        return True

    async def _has_unique_isbn(self, request: OrderCreate) -> bool:
        exists = await self.repository.exists_by_isbn(request.isbn)
        if exists:
            logger.warning(f"Duplicate ISBN detected: {request.isbn}")
        return not exists

    def _has_valid_cover_image_url(self, request: OrderCreate) -> bool:
        if not is_image_url(request.cover_image_url):
            logger.warning(f"Invalid cover image URL: {request.cover_image_url}")
            return False
        return True

    def _has_technical_keywords(self, request: OrderCreate) -> bool:
        if not contains_any(request.title, TECHNICAL_KEYWORDS):
            logger.warning(f"Technical order missing keywords: {request.title}")
            return False
        return True

    def _is_appropriate_for_children(self, request: OrderCreate) -> bool:
        if contains_any(request.title, CHILDREN_RESTRICTED_WORDS):
            logger.warning(f"Children's order title contains restricted word: {request.title}")
            return False
        return True

    # ==================== Business Rules ====================

    async def _passes_business_rules(self, request: OrderCreate) -> bool:
        """Every sub-rule runs so each one logs its own outcome."""
        daily_limit_passed = await self._within_daily_limit()
        technical_price_passed = self._meets_technical_minimum_price(request)
        children_content_passed = self._meets_children_content_restriction(request)
        high_value_stock_passed = self._meets_high_value_stock_limit(request)

        return (
            daily_limit_passed
            and technical_price_passed
            and children_content_passed
            and high_value_stock_passed
        )

    async def _within_daily_limit(self) -> bool:
        start, end = day_bounds(self.clock())
        count_today = await self.repository.count_created_between(start, end)
        if count_today >= DAILY_ORDER_LIMIT:
            logger.warning(f"Daily order limit exceeded. Count: {count_today}")
            return False
        logger.info(f"Daily order limit check passed. Count: {count_today}")
        return True

    def _meets_technical_minimum_price(self, request: OrderCreate) -> bool:
        if request.category != OrderCategory.Technical:
            return True
        if request.price < TECHNICAL_MIN_PRICE:
            logger.warning(f"Technical order price below minimum: {request.price}")
            return False
        return True

    def _meets_children_content_restriction(self, request: OrderCreate) -> bool:
        if request.category != OrderCategory.Children:
            return True
        if not self._is_appropriate_for_children(request):
            logger.warning(f"Children order content restriction violated: {request.title}")
            return False
        return True

    def _meets_high_value_stock_limit(self, request: OrderCreate) -> bool:
        if request.price <= HIGH_VALUE_PRICE:
            return True
        if request.stock_quantity > HIGH_VALUE_MAX_STOCK:
            logger.warning(
                f"High value order stock limit exceeded. "
                f"Price: {request.price} Stock: {request.stock_quantity}"
            )
            return False
        return True
