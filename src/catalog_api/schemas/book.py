"""Book schemas."""

from catalog_api.schemas.common import CamelModel


class BookCreate(CamelModel):
    title: str
    author: str
    year: int


class BookUpdate(BookCreate):
    id: int


class BookResponse(CamelModel):
    id: int
    title: str
    author: str
    year: int


class BookPageResponse(CamelModel):
    """Schema for paginated book list response."""

    total_count: int
    page: int
    page_size: int
    total_pages: int
    data: list[BookResponse]
