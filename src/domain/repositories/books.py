"""Book repository interface."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any

from src.domain.models.books import Book

from .base import Repository


class BookRepository(Repository[Book, str]):
    """Read/write interface for Book entities keyed by isbn.

    find_one, update and remove raise BookNotFoundError for an unknown isbn;
    a second remove of the same isbn is therefore an error, not a no-op.
    create raises BookConflictError when the isbn already exists.
    update never changes the isbn.
    """

    @abstractmethod
    async def find_all(self, filters: Mapping[str, Any] | None = None) -> list[Book]:
        """Return all books, optionally filtered by equality on known fields."""

    @abstractmethod
    async def find_one(self, isbn: str) -> Book:
        """Return the book with the given isbn."""

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Book:
        """Insert a book with all of its fields.  Raises on duplicate isbn (CONFLICT)."""

    @abstractmethod
    async def update(self, isbn: str, data: Mapping[str, Any]) -> Book:
        """Overwrite the mutable fields of the book with the given isbn."""

    @abstractmethod
    async def remove(self, isbn: str) -> None:
        """Delete the book with the given isbn."""
