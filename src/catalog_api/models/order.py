"""Order model for catalogued book orders."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Enum, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.core.database import Base
from catalog_api.models.base import CategoryEnum, TimestampMixin


class OrderCategory(CategoryEnum):
    Fiction = 0
    NonFiction = 1
    Technical = 2
    Children = 3


class Order(Base, TimestampMixin):
    """Order model. Created once after validation, never mutated by the create path."""

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    author: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    isbn: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
    )
    category: Mapped[OrderCategory] = mapped_column(
        Enum(OrderCategory, name="order_category"),
        nullable=False,
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
    )
    published_date: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
    )
    cover_image_url: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
    )
    is_available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    stock_quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
    )

    __table_args__ = (
        UniqueConstraint("isbn", name="uq_orders_isbn"),
        UniqueConstraint("title", "author", name="uq_orders_title_author"),
    )
