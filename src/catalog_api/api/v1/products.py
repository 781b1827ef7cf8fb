"""Product API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Response, status

from catalog_api.api.deps import OperationContextDep, ProductServiceDep
from catalog_api.schemas.product import ProductCreate, ProductProfileResponse

router = APIRouter()


@router.post("", response_model=ProductProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreate,
    response: Response,
    service: ProductServiceDep,
    ctx: OperationContextDep,
):
    """Validate and create a product."""
    product = await service.create(request, ctx)
    response.headers["Location"] = f"/products/{product.id}"
    return product


@router.get("", response_model=list[ProductProfileResponse])
async def list_products(service: ProductServiceDep):
    """Get all products, newest first."""
    return await service.get_all()


@router.get("/{product_id}", response_model=ProductProfileResponse)
async def get_product(product_id: UUID, service: ProductServiceDep):
    """Get product by ID."""
    return await service.get_by_id(product_id)
