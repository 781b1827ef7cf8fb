"""Book service for the simple CRUD API."""

import logging
import math

from catalog_api.core.exceptions import BadRequestError, NotFoundError, ValidationError
from catalog_api.models.book import Book
from catalog_api.repositories.book_repository import BookRepository
from catalog_api.schemas.book import BookCreate, BookPageResponse, BookResponse, BookUpdate
from catalog_api.validators.book_validator import BookValidator

logger = logging.getLogger(__name__)


class BookService:
    """Service class for book operations."""

    def __init__(self, repository: BookRepository, validator: BookValidator | None = None):
        self.repository = repository
        self.validator = validator or BookValidator()

    async def list_books(self) -> list[Book]:
        return await self.repository.list_all()

    async def list_page(self, page: int, page_size: int) -> BookPageResponse:
        """Get one page of books.

        Args:
            page: 1-based page number
            page_size: Books per page

        Raises:
            BadRequestError: If page or page_size is below 1
        """
        if page < 1 or page_size < 1:
            raise BadRequestError("Page and pageSize must be greater than 0.")

        total = await self.repository.count()
        books = await self.repository.list_page(skip=(page - 1) * page_size, limit=page_size)

        return BookPageResponse(
            total_count=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
            data=[BookResponse.model_validate(book) for book in books],
        )

    async def get_book(self, book_id: int) -> Book:
        book = await self.repository.get_by_id(book_id)
        if book is None:
            raise NotFoundError(f"Book with ID {book_id} not found.")
        return book

    async def create_book(self, request: BookCreate) -> Book:
        await self._validate(request)
        book = await self.repository.add(
            Book(title=request.title, author=request.author, year=request.year)
        )
        logger.info(f"Book created: {book.id}")
        return book

    async def update_book(self, book_id: int, request: BookUpdate) -> Book:
        """Replace title, author and year of an existing book.

        Raises:
            BadRequestError: If the path id and body id differ
            ValidationError: If the new values break a rule
            NotFoundError: If the book does not exist
        """
        if book_id != request.id:
            raise BadRequestError("ID mismatch.")
        await self._validate(request)

        book = await self.get_book(book_id)
        book.title = request.title
        book.author = request.author
        book.year = request.year
        book = await self.repository.save(book)
        logger.info(f"Book updated: {book.id}")
        return book

    async def delete_book(self, book_id: int) -> None:
        book = await self.get_book(book_id)
        await self.repository.delete(book)
        logger.info(f"Book deleted: {book_id}")

    async def _validate(self, request: BookCreate) -> None:
        result = await self.validator.validate(request)
        if not result.is_valid:
            raise ValidationError(result.errors)
