"""Validation rules for product creation."""

import logging
import re
from datetime import datetime
from decimal import Decimal

from catalog_api.core.timeutils import Clock, day_bounds, utcnow
from catalog_api.models.product import ProductCategory
from catalog_api.repositories.product_repository import ProductRepository
from catalog_api.schemas.product import ProductCreate
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

INAPPROPRIATE_WORDS = ("spam", "scam", "fake", "illegal")
HOME_RESTRICTED_WORDS = ("weapon", "dangerous", "hazardous")

BRAND_PATTERN = re.compile(r"[a-zA-Z0-9\s\-'.]+")
SKU_PATTERN = re.compile(r"[a-zA-Z0-9\-]{5,20}")

MAX_PRICE = Decimal("10000")
PRICE_DECIMAL_PLACES = 2
MAX_STOCK = 100_000
EARLIEST_RELEASE_DATE = datetime(1900, 1, 1)
DAILY_PRODUCT_LIMIT = 500

ELECTRONICS_MIN_PRICE = Decimal("50.00")
HIGH_VALUE_PRICE = Decimal("500")
HIGH_VALUE_MAX_STOCK = 10


class ProductValidator(RuleSetValidator[ProductCreate]):
    """Checks a ProductCreate request against format, uniqueness and business rules."""

    def __init__(self, repository: ProductRepository, clock: Clock = utcnow):
        self.repository = repository
        self.clock = clock

        self.rules = [
            Rule("Product name is required", lambda r: not is_blank(r.name)),
            Rule(
                "Product name must be between 1 and 200 characters",
                lambda r: length_between(r.name, 1, 200),
            ),
            Rule(
                "Product name contains inappropriate content",
                lambda r: not contains_any(r.name, INAPPROPRIATE_WORDS),
            ),
            Rule("Product name must be unique for the same brand", self._has_unique_name),
            Rule("Brand is required", lambda r: not is_blank(r.brand)),
            Rule(
                "Brand must be between 2 and 100 characters",
                lambda r: length_between(r.brand, 2, 100),
            ),
            Rule(
                "Brand contains invalid characters",
                lambda r: BRAND_PATTERN.fullmatch(r.brand) is not None,
            ),
            Rule("SKU is required", lambda r: not is_blank(r.sku)),
            Rule(
                "SKU must be alphanumeric with hyphens, 5-20 characters",
                lambda r: SKU_PATTERN.fullmatch(r.sku) is not None,
            ),
            Rule("SKU already exists in system", self._has_unique_sku),
            Rule(
                "Category must be a valid enum value",
                lambda r: isinstance(r.category, ProductCategory),
            ),
            Rule("Price must be greater than 0", lambda r: r.price > 0),
            Rule("Price must be less than $10,000", lambda r: r.price < MAX_PRICE),
            Rule(
                "Price cannot have more than 2 decimal places",
                lambda r: has_max_decimal_places(r.price, PRICE_DECIMAL_PLACES),
            ),
            Rule(
                "Release date cannot be in the future",
                lambda r: r.release_date <= self.clock(),
            ),
            Rule(
                "Release date cannot be before year 1900",
                lambda r: r.release_date >= EARLIEST_RELEASE_DATE,
            ),
            Rule("Stock quantity cannot be negative", lambda r: r.stock_quantity >= 0),
            Rule(
                "Stock quantity cannot exceed 100,000",
                lambda r: r.stock_quantity <= MAX_STOCK,
            ),
            Rule(
                "Image URL must be valid and end with .jpg, .jpeg, .png, .gif, or .webp",
                lambda r: is_image_url(r.image_url),
                when=lambda r: not is_blank(r.image_url),
            ),
            Rule("Product does not meet business rules", self._passes_business_rules),
        ]

    async def _has_unique_name(self, request: ProductCreate) -> bool:
        exists = await self.repository.exists_by_name_and_brand(request.name, request.brand)
        return not exists

    async def _has_unique_sku(self, request: ProductCreate) -> bool:
        exists = await self.repository.exists_by_sku(request.sku)
        return not exists

    async def _passes_business_rules(self, request: ProductCreate) -> bool:
        # Rule 1: daily product limit
        start, end = day_bounds(self.clock())
        today_count = await self.repository.count_created_between(start, end)
        if today_count >= DAILY_PRODUCT_LIMIT:
            logger.warning(f"Daily product limit exceeded: {today_count}")
            return False

        # Rule 2: electronics minimum price
        if request.category == ProductCategory.Electronics and request.price < ELECTRONICS_MIN_PRICE:
            logger.warning(f"Electronics product price too low: {request.price}")
            return False

        # Rule 3: home products content restrictions
        if request.category == ProductCategory.Home and contains_any(request.name, HOME_RESTRICTED_WORDS):
            logger.warning(f"Home product contains restricted content: {request.name}")
            return False

        # Rule 4: high-value products stock limit
        if request.price > HIGH_VALUE_PRICE and request.stock_quantity > HIGH_VALUE_MAX_STOCK:
            logger.warning(
                f"High-value product stock too high: {request.price}, {request.stock_quantity}"
            )
            return False

        return True
