"""Data access layer over the async SQLAlchemy session."""

from catalog_api.repositories.book_repository import BookRepository
from catalog_api.repositories.order_repository import OrderRepository
from catalog_api.repositories.product_repository import ProductRepository

__all__ = [
    "BookRepository",
    "OrderRepository",
    "ProductRepository",
]
