"""Business logic services."""

from catalog_api.services.book_service import BookService
from catalog_api.services.cache_service import (
    LocalResponseCache,
    RedisResponseCache,
    ResponseCache,
    get_response_cache,
)
from catalog_api.services.order_service import OrderService
from catalog_api.services.product_service import ProductService

__all__ = [
    "BookService",
    "LocalResponseCache",
    "OrderService",
    "ProductService",
    "RedisResponseCache",
    "ResponseCache",
    "get_response_cache",
]
