"""Order entity → OrderProfileResponse.

One function per derived field. All of them are pure over ``(order, now)``
and nothing here touches the database or mutates the entity.
"""

import math
from datetime import datetime
from decimal import Decimal

from catalog_api.core.config import settings
from catalog_api.mapping.formatting import availability_status, format_currency, name_initials
from catalog_api.models.order import Order, OrderCategory
from catalog_api.schemas.order import OrderProfileResponse

CHILDREN_DISCOUNT_FACTOR = Decimal("0.9")

CATEGORY_DISPLAY_NAMES = {
    OrderCategory.Fiction: "Fiction & Literature",
    OrderCategory.NonFiction: "Non-Fiction",
    OrderCategory.Technical: "Technical & Professional",
    OrderCategory.Children: "Children's Orders",
}


def category_display_name(order: Order) -> str:
    return CATEGORY_DISPLAY_NAMES.get(order.category, "Uncategorized")


def effective_price(order: Order) -> Decimal:
    """Children's orders are discounted by 10%. The stored price is left untouched."""
    if order.category == OrderCategory.Children:
        return order.price * CHILDREN_DISCOUNT_FACTOR
    return order.price


def formatted_price(order: Order, currency_symbol: str | None = None) -> str:
    symbol = settings.CURRENCY_SYMBOL if currency_symbol is None else currency_symbol
    return format_currency(effective_price(order), symbol)


def published_age(order: Order, now: datetime) -> str:
    days = (now - order.published_date).total_seconds() / 86400

    if days < 0:
        return "Releases Soon"
    if days < 30:
        return "New Release"
    if days < 365:
        months = max(1, math.floor(days / 30))
        return f"{months} months old"
    if days < 1825:
        years = max(1, math.floor(days / 365))
        return f"{years} years old"
    return "Classic"


def author_initials(order: Order) -> str:
    return name_initials(order.author)


def order_availability_status(order: Order) -> str:
    return availability_status(order.is_available, order.stock_quantity, "Last Copy")


def cover_image_url(order: Order) -> str | None:
    if order.category == OrderCategory.Children:
        return None
    return order.cover_image_url


def to_order_profile(
    order: Order,
    now: datetime,
    currency_symbol: str | None = None,
) -> OrderProfileResponse:
    return OrderProfileResponse(
        id=order.id,
        title=order.title,
        author=order.author,
        isbn=order.isbn,
        category_display_name=category_display_name(order),
        price=effective_price(order),
        formatted_price=formatted_price(order, currency_symbol),
        published_date=order.published_date,
        created_at=order.created_at,
        cover_image_url=cover_image_url(order),
        is_available=order.is_available,
        stock_quantity=order.stock_quantity,
        published_age=published_age(order, now),
        author_initials=author_initials(order),
        availability_status=order_availability_status(order),
    )
