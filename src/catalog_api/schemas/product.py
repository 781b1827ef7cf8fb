"""Product schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Union
from uuid import UUID

from pydantic import BeforeValidator, Field, field_validator

from catalog_api.core.timeutils import to_naive_utc
from catalog_api.models.product import ProductCategory
from catalog_api.schemas.common import CamelModel


class ProductCreate(CamelModel):
    """Schema for product creation request."""

    model_config = {"frozen": True}

    name: str
    brand: str
    sku: str
    category: Annotated[
        Union[ProductCategory, int, str],
        Field(union_mode="left_to_right"),
        BeforeValidator(ProductCategory.coerce),
    ]
    price: Decimal
    release_date: datetime
    image_url: str | None = Field(None, max_length=500)
    stock_quantity: int = 1

    @field_validator("release_date")
    @classmethod
    def _normalize_release_date(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class ProductProfileResponse(CamelModel):
    """Schema for product response."""

    id: UUID
    name: str
    brand: str
    sku: str
    category_display_name: str
    price: Decimal
    formatted_price: str
    release_date: datetime
    created_at: datetime
    image_url: str | None
    is_available: bool
    stock_quantity: int
    product_age: str
    brand_initials: str
    availability_status: str
