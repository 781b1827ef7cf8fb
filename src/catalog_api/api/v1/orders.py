"""Order API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Response, status

from catalog_api.api.deps import OperationContextDep, OrderServiceDep
from catalog_api.schemas.order import OrderCreate, OrderProfileResponse

router = APIRouter()


@router.post("", response_model=OrderProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: OrderCreate,
    response: Response,
    service: OrderServiceDep,
    ctx: OperationContextDep,
):
    """Validate and create an order.

    Every violated rule is reported in the 400 response details.
    """
    order = await service.create(request, ctx)
    response.headers["Location"] = f"/orders/{order.id}"
    return order


@router.get("", response_model=list[OrderProfileResponse])
async def list_orders(service: OrderServiceDep):
    """Get all orders, newest first."""
    return await service.get_all()


@router.get("/{order_id}", response_model=OrderProfileResponse)
async def get_order(order_id: UUID, service: OrderServiceDep):
    """Get order by ID."""
    return await service.get_by_id(order_id)
