"""Product entity → ProductProfileResponse."""

from datetime import datetime

from catalog_api.core.config import settings
from catalog_api.mapping.formatting import availability_status, format_currency, name_initials
from catalog_api.models.product import Product, ProductCategory
from catalog_api.schemas.product import ProductProfileResponse

CATEGORY_DISPLAY_NAMES = {
    ProductCategory.Electronics: "Electronics & Technology",
    ProductCategory.Clothing: "Clothing & Fashion",
    ProductCategory.Books: "Books & Media",
    ProductCategory.Home: "Home & Garden",
}


def category_display_name(product: Product) -> str:
    return CATEGORY_DISPLAY_NAMES.get(product.category, "Uncategorized")


def formatted_price(product: Product, currency_symbol: str | None = None) -> str:
    symbol = settings.CURRENCY_SYMBOL if currency_symbol is None else currency_symbol
    return format_currency(product.price, symbol)


def product_age(product: Product, now: datetime) -> str:
    """Age bucket for products.

    Unlike orders there is no "Releases Soon" bucket, and past five years the
    label falls back to a year count; only exactly 1825.0 days reads "Classic".
    """
    days = (now - product.release_date).total_seconds() / 86400

    if days < 30:
        return "New Release"
    if days < 365:
        return f"{int(days / 30)} months old"
    if days < 1825:
        return f"{int(days / 365)} years old"
    if days == 1825:
        return "Classic"
    return f"{int(days / 365)} years old"


def brand_initials(product: Product) -> str:
    return name_initials(product.brand)


def product_availability_status(product: Product) -> str:
    return availability_status(product.is_available, product.stock_quantity, "Last Item")


def to_product_profile(
    product: Product,
    now: datetime,
    currency_symbol: str | None = None,
) -> ProductProfileResponse:
    return ProductProfileResponse(
        id=product.id,
        name=product.name,
        brand=product.brand,
        sku=product.sku,
        category_display_name=category_display_name(product),
        price=product.price,
        formatted_price=formatted_price(product, currency_symbol),
        release_date=product.release_date,
        created_at=product.created_at,
        image_url=product.image_url,
        is_available=product.is_available,
        stock_quantity=product.stock_quantity,
        product_age=product_age(product, now),
        brand_initials=brand_initials(product),
        availability_status=product_availability_status(product),
    )
