"""Order data access."""

from catalog_api.models.order import Order
from catalog_api.repositories.base import EntityRepository


class OrderRepository(EntityRepository[Order]):
    model = Order

    async def exists_by_title_and_author(self, title: str, author: str) -> bool:
        """Exact, case-sensitive match on the (title, author) pair."""
        return await self._exists(Order.title == title, Order.author == author)

    async def exists_by_isbn(self, isbn: str) -> bool:
        return await self._exists(Order.isbn == isbn)
