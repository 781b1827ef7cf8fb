"""API v1 routers."""

from catalog_api.api.v1 import books, orders, products

__all__ = ["books", "orders", "products"]
