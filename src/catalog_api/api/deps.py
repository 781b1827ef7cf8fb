"""API dependencies for database access, caching and services."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.context import OperationContext
from catalog_api.core.database import get_db
from catalog_api.middleware.correlation import get_correlation_id
from catalog_api.repositories.book_repository import BookRepository
from catalog_api.repositories.order_repository import OrderRepository
from catalog_api.repositories.product_repository import ProductRepository
from catalog_api.services.book_service import BookService
from catalog_api.services.cache_service import ResponseCache, get_response_cache
from catalog_api.services.order_service import OrderService
from catalog_api.services.product_service import ProductService

DbSession = Annotated[AsyncSession, Depends(get_db)]
ResponseCacheDep = Annotated[ResponseCache, Depends(get_response_cache)]


def get_operation_context(request: Request) -> OperationContext:
    """Fresh operation id per call, correlation id from the request."""
    return OperationContext(correlation_id=get_correlation_id(request))


# =============================================================================
# Repositories
# =============================================================================

def get_order_repository(db: DbSession) -> OrderRepository:
    return OrderRepository(db)


def get_product_repository(db: DbSession) -> ProductRepository:
    return ProductRepository(db)


def get_book_repository(db: DbSession) -> BookRepository:
    return BookRepository(db)


# =============================================================================
# Services
# =============================================================================

def get_order_service(
    repository: Annotated[OrderRepository, Depends(get_order_repository)],
    cache: ResponseCacheDep,
) -> OrderService:
    """Get OrderService instance with injected dependencies."""
    return OrderService(repository, cache)


def get_product_service(
    repository: Annotated[ProductRepository, Depends(get_product_repository)],
    cache: ResponseCacheDep,
) -> ProductService:
    """Get ProductService instance with injected dependencies."""
    return ProductService(repository, cache)


def get_book_service(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookService:
    return BookService(repository)


# Type aliases for cleaner dependency injection
OperationContextDep = Annotated[OperationContext, Depends(get_operation_context)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
