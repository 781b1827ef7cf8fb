"""Order schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Union
from uuid import UUID

from pydantic import BeforeValidator, Field, field_validator

from catalog_api.core.timeutils import to_naive_utc
from catalog_api.models.order import OrderCategory
from catalog_api.schemas.common import CamelModel


class OrderCreate(CamelModel):
    """Schema for order creation request.

    Only types and column lengths are enforced here; business rules live in
    OrderValidator so that every violation is reported together.
    """

    model_config = {"frozen": True}

    title: str
    author: str
    isbn: str = Field(max_length=32)
    category: Annotated[
        Union[OrderCategory, int, str],
        Field(union_mode="left_to_right"),
        BeforeValidator(OrderCategory.coerce),
    ]
    price: Decimal
    published_date: datetime
    cover_image_url: str | None = Field(None, max_length=500)
    stock_quantity: int = 1

    @field_validator("published_date")
    @classmethod
    def _normalize_published_date(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class OrderProfileResponse(CamelModel):
    """Schema for order response with derived display fields."""

    id: UUID
    title: str
    author: str
    isbn: str
    category_display_name: str
    price: Decimal
    formatted_price: str
    published_date: datetime
    created_at: datetime
    cover_image_url: str | None
    is_available: bool
    stock_quantity: int
    published_age: str
    author_initials: str
    availability_status: str
