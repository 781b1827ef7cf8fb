"""Pytest configuration and fixtures for testing."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Generator
from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from catalog_api.models.book import Book
from catalog_api.models.order import Order, OrderCategory
from catalog_api.models.product import Product, ProductCategory
from catalog_api.schemas.order import OrderCreate
from catalog_api.schemas.product import ProductCreate

# Fixed instant used by validator, mapping and service tests
NOW = datetime(2025, 6, 15, 12, 0, 0)


def fixed_clock() -> datetime:
    return NOW


# =============================================================================
# Request / entity builders
# =============================================================================

def make_order_request(**overrides: Any) -> OrderCreate:
    data = {
        "title": "Cloud Architecture Essentials",
        "author": "Ada Lovelace",
        "isbn": "9781234567897",
        "category": OrderCategory.Technical,
        "price": Decimal("45.00"),
        "published_date": NOW - timedelta(days=180),
        "cover_image_url": "https://example.com/covers/cloud.png",
        "stock_quantity": 8,
    }
    data.update(overrides)
    return OrderCreate(**data)


def make_product_request(**overrides: Any) -> ProductCreate:
    data = {
        "name": "Noise Cancelling Headphones",
        "brand": "Acme Audio",
        "sku": "ACM-HP-001",
        "category": ProductCategory.Electronics,
        "price": Decimal("199.99"),
        "release_date": NOW - timedelta(days=90),
        "image_url": "https://example.com/images/headphones.jpg",
        "stock_quantity": 8,
    }
    data.update(overrides)
    return ProductCreate(**data)


def make_order(**overrides: Any) -> Order:
    data = {
        "id": UUID("11111111-1111-4111-8111-111111111111"),
        "title": "Cloud Architecture Essentials",
        "author": "Ada Lovelace",
        "isbn": "9781234567897",
        "category": OrderCategory.Technical,
        "price": Decimal("45.00"),
        "published_date": NOW - timedelta(days=180),
        "cover_image_url": "https://example.com/covers/cloud.png",
        "is_available": True,
        "stock_quantity": 8,
        "created_at": NOW,
    }
    data.update(overrides)
    return Order(**data)


def make_product(**overrides: Any) -> Product:
    data = {
        "id": UUID("22222222-2222-4222-8222-222222222222"),
        "name": "Noise Cancelling Headphones",
        "brand": "Acme Audio",
        "sku": "ACM-HP-001",
        "category": ProductCategory.Electronics,
        "price": Decimal("199.99"),
        "release_date": NOW - timedelta(days=90),
        "image_url": "https://example.com/images/headphones.jpg",
        "is_available": True,
        "stock_quantity": 8,
        "created_at": NOW,
    }
    data.update(overrides)
    return Product(**data)


# =============================================================================
# Mock fixtures
# =============================================================================

@pytest.fixture
def mock_redis() -> AsyncMock:
    """Create a mock Redis client."""
    redis = AsyncMock()

    # Mock common Redis operations
    redis.get = AsyncMock(return_value=None)
    redis.setex = AsyncMock(return_value=True)
    redis.delete = AsyncMock(return_value=1)

    return redis


@pytest.fixture
def mock_order_repository() -> AsyncMock:
    """Order repository with an empty store."""
    repository = AsyncMock()
    repository.exists_by_title_and_author = AsyncMock(return_value=False)
    repository.exists_by_isbn = AsyncMock(return_value=False)
    repository.count_created_between = AsyncMock(return_value=0)
    repository.add = AsyncMock(side_effect=lambda entity: entity)
    repository.list_all = AsyncMock(return_value=[])
    repository.get_by_id = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def mock_product_repository() -> AsyncMock:
    """Product repository with an empty store."""
    repository = AsyncMock()
    repository.exists_by_name_and_brand = AsyncMock(return_value=False)
    repository.exists_by_sku = AsyncMock(return_value=False)
    repository.count_created_between = AsyncMock(return_value=0)
    repository.add = AsyncMock(side_effect=lambda entity: entity)
    repository.list_all = AsyncMock(return_value=[])
    repository.get_by_id = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def mock_cache() -> AsyncMock:
    cache = AsyncMock()
    cache.get = AsyncMock(return_value=None)
    cache.set = AsyncMock(return_value=None)
    cache.invalidate = AsyncMock(return_value=True)
    return cache


# =============================================================================
# In-memory repositories for endpoint tests
# =============================================================================

class FakeEntityRepository:
    def __init__(self) -> None:
        self.items: list = []

    async def count_created_between(self, start: datetime, end: datetime) -> int:
        return sum(1 for o in self.items if start <= o.created_at < end)

    async def add(self, entity):
        self.items.append(entity)
        return entity

    async def list_all(self) -> list:
        return sorted(self.items, key=lambda o: o.created_at, reverse=True)

    async def get_by_id(self, entity_id: UUID):
        return next((o for o in self.items if o.id == entity_id), None)


class FakeOrderRepository(FakeEntityRepository):
    async def exists_by_title_and_author(self, title: str, author: str) -> bool:
        return any(o.title == title and o.author == author for o in self.items)

    async def exists_by_isbn(self, isbn: str) -> bool:
        return any(o.isbn == isbn for o in self.items)


class FakeProductRepository(FakeEntityRepository):
    async def exists_by_name_and_brand(self, name: str, brand: str) -> bool:
        return any(p.name == name and p.brand == brand for p in self.items)

    async def exists_by_sku(self, sku: str) -> bool:
        return any(p.sku == sku for p in self.items)


class FakeBookRepository:
    def __init__(self, books: list[Book] | None = None) -> None:
        self.items: list[Book] = list(books or [])

    async def list_all(self) -> list[Book]:
        return sorted(self.items, key=lambda b: b.id)

    async def count(self) -> int:
        return len(self.items)

    async def list_page(self, skip: int, limit: int) -> list[Book]:
        return (await self.list_all())[skip:skip + limit]

    async def get_by_id(self, book_id: int) -> Book | None:
        return next((b for b in self.items if b.id == book_id), None)

    async def add(self, book: Book) -> Book:
        book.id = max((b.id for b in self.items), default=0) + 1
        self.items.append(book)
        return book

    async def save(self, book: Book) -> Book:
        return book

    async def delete(self, book: Book) -> None:
        self.items.remove(book)


@pytest.fixture
def order_store() -> FakeOrderRepository:
    return FakeOrderRepository()


@pytest.fixture
def product_store() -> FakeProductRepository:
    return FakeProductRepository()


@pytest.fixture
def book_store() -> FakeBookRepository:
    return FakeBookRepository(
        [
            Book(id=i, title=f"Book {i}", author=f"Author {i}", year=1900 + i)
            for i in range(1, 13)
        ]
    )


@pytest.fixture
def client(
    order_store: FakeOrderRepository,
    product_store: FakeProductRepository,
    book_store: FakeBookRepository,
) -> Generator[TestClient, None, None]:
    """TestClient over the real app with stores and cache swapped out.

    The lifespan is not entered, so no database or Redis connection is made.
    """
    from catalog_api.api import deps
    from catalog_api.main import app
    from catalog_api.services.cache_service import LocalResponseCache

    cache = LocalResponseCache()
    app.dependency_overrides[deps.get_order_repository] = lambda: order_store
    app.dependency_overrides[deps.get_product_repository] = lambda: product_store
    app.dependency_overrides[deps.get_book_repository] = lambda: book_store
    app.dependency_overrides[deps.get_response_cache] = lambda: cache

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()
