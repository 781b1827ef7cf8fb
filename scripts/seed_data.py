"""Seed data script for development and testing.

Creates:
- The twelve classic books (only when the books table is empty)
- A handful of sample orders and products, created through the same
  services the API uses so every validation rule applies

Environment Variables:
    RESET_DATA: Set to "true" to clear orders/products before seeding (default: false)

Usage:
    uv run python -m scripts.seed_data
    RESET_DATA=true uv run python -m scripts.seed_data
"""

import asyncio
import os
from datetime import timedelta
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.database import Base, async_session_maker, engine
from catalog_api.core.exceptions import ValidationError
from catalog_api.core.timeutils import utcnow
from catalog_api.models import OrderCategory, ProductCategory
from catalog_api.repositories import BookRepository, OrderRepository, ProductRepository
from catalog_api.schemas import OrderCreate, ProductCreate
from catalog_api.services import LocalResponseCache, OrderService, ProductService

RESET_DATA = os.getenv("RESET_DATA", "false").lower() == "true"


def sample_orders() -> list[OrderCreate]:
    now = utcnow()
    return [
        OrderCreate(
            title="Cloud Architecture Essentials",
            author="Ada Lovelace",
            isbn="9780306406157",
            category=OrderCategory.Technical,
            price=Decimal("45.00"),
            published_date=now - timedelta(days=183),
            cover_image_url="https://example.com/covers/cloud-architecture.png",
            stock_quantity=8,
        ),
        OrderCreate(
            title="Friendly Forest Adventures",
            author="Mary Hill",
            isbn="9781861972712",
            category=OrderCategory.Children,
            price=Decimal("30.00"),
            published_date=now - timedelta(days=10),
            stock_quantity=3,
        ),
        OrderCreate(
            title="The Quiet Harbour",
            author="Eleanor Vance",
            isbn="0306406152",
            category=OrderCategory.Fiction,
            price=Decimal("18.50"),
            published_date=now - timedelta(days=2400),
            stock_quantity=1,
        ),
    ]


def sample_products() -> list[ProductCreate]:
    now = utcnow()
    return [
        ProductCreate(
            name="Noise Cancelling Headphones",
            brand="Acme Audio",
            sku="ACM-HP-001",
            category=ProductCategory.Electronics,
            price=Decimal("199.99"),
            release_date=now - timedelta(days=90),
            image_url="https://example.com/images/headphones.jpg",
            stock_quantity=12,
        ),
        ProductCreate(
            name="Linen Throw Pillow",
            brand="Northwind Home",
            sku="NWH-PIL-42",
            category=ProductCategory.Home,
            price=Decimal("24.00"),
            release_date=now - timedelta(days=400),
            stock_quantity=4,
        ),
    ]


async def reset_catalog_data(session: AsyncSession) -> None:
    """Clear orders and products."""
    print("Resetting catalog data...")
    await session.execute(text("DELETE FROM orders"))
    await session.execute(text("DELETE FROM products"))
    await session.commit()
    print("  Cleared orders, products")


async def seed_books(session: AsyncSession) -> None:
    print("Seeding books...")
    added = await BookRepository(session).seed_if_empty()
    if added:
        print(f"  Created {added} books")
    else:
        print("  Books already exist, skipping...")


async def seed_orders(session: AsyncSession) -> None:
    print("Seeding orders...")
    service = OrderService(OrderRepository(session), LocalResponseCache())
    for request in sample_orders():
        try:
            order = await service.create(request)
            print(f"  Created order: {order.title} ({order.availability_status})")
        except ValidationError as e:
            print(f"  Skipped {request.title}: {e}")


async def seed_products(session: AsyncSession) -> None:
    print("Seeding products...")
    service = ProductService(ProductRepository(session), LocalResponseCache())
    for request in sample_products():
        try:
            product = await service.create(request)
            print(f"  Created product: {product.name} ({product.formatted_price})")
        except ValidationError as e:
            print(f"  Skipped {request.name}: {e}")


async def main():
    print("=" * 60)
    print("Starting data seeding...")
    print("=" * 60)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        if RESET_DATA:
            await reset_catalog_data(session)
        await seed_books(session)
        await seed_orders(session)
        await seed_products(session)

    print("\n" + "=" * 60)
    print("Seeding complete!")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
