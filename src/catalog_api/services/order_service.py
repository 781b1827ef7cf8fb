"""Order service: create pipeline and profile reads."""

from datetime import datetime
from uuid import UUID

from catalog_api.core.timeutils import Clock, utcnow
from catalog_api.mapping.order_mapping import to_order_profile
from catalog_api.models.order import Order
from catalog_api.repositories.order_repository import OrderRepository
from catalog_api.schemas.order import OrderCreate, OrderProfileResponse
from catalog_api.services.cache_service import ALL_ORDERS_CACHE_KEY, ResponseCache
from catalog_api.services.catalog_service import CatalogService, category_label
from catalog_api.validators.order_validator import OrderValidator


class OrderService(CatalogService[OrderCreate, Order, OrderProfileResponse]):
    """Service class for order operations."""

    entity_name = "order"
    not_found_label = "Order"
    cache_key = ALL_ORDERS_CACHE_KEY
    duplicate_message = "An order with this ISBN or title and author already exists."
    unique_constraints = ("uq_orders_isbn", "uq_orders_title_author")
    response_model = OrderProfileResponse

    def __init__(
        self,
        repository: OrderRepository,
        cache: ResponseCache,
        validator: OrderValidator | None = None,
        clock: Clock = utcnow,
    ):
        super().__init__(
            repository,
            cache,
            validator or OrderValidator(repository, clock=clock),
            clock=clock,
        )

    def build_entity(self, request: OrderCreate, entity_id: UUID, created_at: datetime) -> Order:
        return Order(
            id=entity_id,
            title=request.title,
            author=request.author,
            isbn=request.isbn,
            category=request.category,
            price=request.price,
            published_date=request.published_date,
            cover_image_url=request.cover_image_url,
            is_available=request.stock_quantity > 0,
            stock_quantity=request.stock_quantity,
            created_at=created_at,
        )

    def to_response(self, entity: Order, now: datetime) -> OrderProfileResponse:
        return to_order_profile(entity, now)

    def describe(self, request: OrderCreate) -> tuple[str, str, str]:
        return request.title, request.isbn, category_label(request.category)
