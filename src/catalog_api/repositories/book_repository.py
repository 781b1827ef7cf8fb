"""Book data access."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.book import SEED_BOOKS, Book


class BookRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Book]:
        result = await self.db.execute(select(Book).order_by(Book.id))
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(Book.id)))
        return result.scalar_one()

    async def list_page(self, skip: int, limit: int) -> list[Book]:
        """Pagination happens in the database, not in memory."""
        result = await self.db.execute(
            select(Book).order_by(Book.id).offset(skip).limit(limit)
        )
        return list(result.scalars().all())

    async def get_by_id(self, book_id: int) -> Book | None:
        return await self.db.get(Book, book_id)

    async def add(self, book: Book) -> Book:
        self.db.add(book)
        await self.db.commit()
        await self.db.refresh(book)
        return book

    async def save(self, book: Book) -> Book:
        await self.db.commit()
        await self.db.refresh(book)
        return book

    async def delete(self, book: Book) -> None:
        await self.db.delete(book)
        await self.db.commit()

    async def seed_if_empty(self) -> int:
        """Insert the classic titles when the table has no rows. Returns rows added."""
        if await self.count() > 0:
            return 0
        self.db.add_all(Book(**data) for data in SEED_BOOKS)
        await self.db.commit()
        return len(SEED_BOOKS)
