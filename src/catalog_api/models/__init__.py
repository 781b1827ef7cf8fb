"""SQLAlchemy ORM models."""

from catalog_api.models.base import CategoryEnum, TimestampMixin
from catalog_api.models.book import Book
from catalog_api.models.order import Order, OrderCategory
from catalog_api.models.product import Product, ProductCategory

__all__ = [
    "CategoryEnum",
    "TimestampMixin",
    "Book",
    "Order",
    "OrderCategory",
    "Product",
    "ProductCategory",
]
