"""Pydantic schemas for request/response validation."""

from catalog_api.schemas.book import BookCreate, BookPageResponse, BookResponse, BookUpdate
from catalog_api.schemas.common import CamelModel, ErrorResponse
from catalog_api.schemas.order import OrderCreate, OrderProfileResponse
from catalog_api.schemas.product import ProductCreate, ProductProfileResponse

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "OrderCreate",
    "OrderProfileResponse",
    "ProductCreate",
    "ProductProfileResponse",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookPageResponse",
]
