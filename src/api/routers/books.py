"""Book catalog endpoints.

Endpoints under /books:
- GET    /books          : list books, optionally filtered by field equality
- GET    /books/{isbn}   : get one book
- POST   /books          : create a book (all fields required)
- PUT    /books/{isbn}   : replace a book's mutable fields (isbn not allowed in body)
- DELETE /books/{isbn}   : delete a book

Mutating bodies go through the validation gate before the repository is
called; domain errors are turned into responses by src.api.errors.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status

from src.api.dependencies import get_book_repository
from src.domain.repositories.books import BookRepository
from src.domain.services.validation import (
    validate_create,
    validate_filter,
    validate_update,
)

router = APIRouter(prefix="/books", tags=["books"])


@router.get("")
async def list_books(
    request: Request, books: BookRepository = Depends(get_book_repository)
) -> dict[str, Any]:
    filters = validate_filter(dict(request.query_params))
    found = await books.find_all(filters)
    return {"books": [book.model_dump() for book in found]}


@router.get("/{isbn}")
async def get_book(
    isbn: str, books: BookRepository = Depends(get_book_repository)
) -> dict[str, Any]:
    book = await books.find_one(isbn)
    return {"book": book.model_dump()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_book(
    payload: Any = Body(...), books: BookRepository = Depends(get_book_repository)
) -> dict[str, Any]:
    data = validate_create(payload)
    book = await books.create(data.model_dump())
    return {"book": book.model_dump()}


@router.put("/{isbn}")
async def update_book(
    isbn: str,
    payload: Any = Body(...),
    books: BookRepository = Depends(get_book_repository),
) -> dict[str, Any]:
    data = validate_update(payload)
    book = await books.update(isbn, data.model_dump())
    return {"book": book.model_dump()}


@router.delete("/{isbn}")
async def delete_book(
    isbn: str, books: BookRepository = Depends(get_book_repository)
) -> dict[str, str]:
    await books.remove(isbn)
    return {"message": "Book deleted"}
