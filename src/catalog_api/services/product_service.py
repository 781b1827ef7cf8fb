"""Product service: create pipeline and profile reads."""

from datetime import datetime
from uuid import UUID

from catalog_api.core.timeutils import Clock, utcnow
from catalog_api.mapping.product_mapping import to_product_profile
from catalog_api.models.product import Product
from catalog_api.repositories.product_repository import ProductRepository
from catalog_api.schemas.product import ProductCreate, ProductProfileResponse
from catalog_api.services.cache_service import ALL_PRODUCTS_CACHE_KEY, ResponseCache
from catalog_api.services.catalog_service import CatalogService, category_label
from catalog_api.validators.product_validator import ProductValidator


class ProductService(CatalogService[ProductCreate, Product, ProductProfileResponse]):
    """Service class for product operations."""

    entity_name = "product"
    not_found_label = "Product"
    cache_key = ALL_PRODUCTS_CACHE_KEY
    duplicate_message = "A product with this SKU or name and brand already exists."
    unique_constraints = ("uq_products_sku", "uq_products_name_brand")
    response_model = ProductProfileResponse

    def __init__(
        self,
        repository: ProductRepository,
        cache: ResponseCache,
        validator: ProductValidator | None = None,
        clock: Clock = utcnow,
    ):
        super().__init__(
            repository,
            cache,
            validator or ProductValidator(repository, clock=clock),
            clock=clock,
        )

    def build_entity(self, request: ProductCreate, entity_id: UUID, created_at: datetime) -> Product:
        return Product(
            id=entity_id,
            name=request.name,
            brand=request.brand,
            sku=request.sku,
            category=request.category,
            price=request.price,
            release_date=request.release_date,
            image_url=request.image_url,
            is_available=request.stock_quantity > 0,
            stock_quantity=request.stock_quantity,
            created_at=created_at,
        )

    def to_response(self, entity: Product, now: datetime) -> ProductProfileResponse:
        return to_product_profile(entity, now)

    def describe(self, request: ProductCreate) -> tuple[str, str, str]:
        return request.name, request.sku, category_label(request.category)
