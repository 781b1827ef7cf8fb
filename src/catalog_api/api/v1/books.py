"""Book API endpoints."""

from fastapi import APIRouter, Query, Response, status

from catalog_api.api.deps import BookServiceDep
from catalog_api.schemas.book import BookCreate, BookPageResponse, BookResponse, BookUpdate

router = APIRouter()


@router.get("", response_model=list[BookResponse])
async def list_books(service: BookServiceDep):
    """Get all books."""
    return await service.list_books()


@router.get("/paginated", response_model=BookPageResponse)
async def list_books_paginated(
    service: BookServiceDep,
    page: int = Query(1),
    page_size: int = Query(10, alias="pageSize"),
):
    """Get one page of books. Out-of-range values are rejected by the service."""
    return await service.list_page(page, page_size)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: int, service: BookServiceDep):
    return await service.get_book(book_id)


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(request: BookCreate, response: Response, service: BookServiceDep):
    book = await service.create_book(request)
    response.headers["Location"] = f"/api/books/{book.id}"
    return book


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_book(book_id: int, request: BookUpdate, service: BookServiceDep):
    await service.update_book(book_id, request)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(book_id: int, service: BookServiceDep):
    await service.delete_book(book_id)
