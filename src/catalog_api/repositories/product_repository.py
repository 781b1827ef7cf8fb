"""Product data access."""

from catalog_api.models.product import Product
from catalog_api.repositories.base import EntityRepository


class ProductRepository(EntityRepository[Product]):
    model = Product

    async def exists_by_name_and_brand(self, name: str, brand: str) -> bool:
        return await self._exists(Product.name == name, Product.brand == brand)

    async def exists_by_sku(self, sku: str) -> bool:
        return await self._exists(Product.sku == sku)
