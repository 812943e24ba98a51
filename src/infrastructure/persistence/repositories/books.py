"""SQLAlchemy implementation of BookRepository."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.exceptions import (
    BookConflictError,
    BookNotFoundError,
    BookValidationError,
    StorageError,
)
from src.domain.models.books import BOOK_FIELDS, MUTABLE_FIELDS
from src.domain.models.books import Book as DomainBook
from src.domain.repositories.books import BookRepository
from src.infrastructure.persistence.models.catalog import Book as OrmBook

logger = logging.getLogger(__name__)


class SqlBookRepository(BookRepository):
    """Stateless apart from the session; each call is one storage round trip.

    update and remove rely on RETURNING to tell "matched" from "no match":
    an empty result means the statement touched zero rows.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: OrmBook) -> DomainBook:
        return DomainBook(
            isbn=row.isbn,
            amazon_url=row.amazon_url,
            author=row.author,
            language=row.language,
            pages=row.pages,
            publisher=row.publisher,
            title=row.title,
            year=row.year,
        )

    async def find_all(self, filters: Mapping[str, Any] | None = None) -> list[DomainBook]:
        stmt = select(OrmBook).order_by(OrmBook.isbn)
        for field, value in (filters or {}).items():
            if field not in BOOK_FIELDS:
                raise BookValidationError([f"{field}: Unknown filter field"])
            stmt = stmt.where(getattr(OrmBook, field) == value)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Error listing books: %s", e)
            raise StorageError("find_all", str(e)) from e
        return [self._to_domain(row) for row in result.scalars()]

    async def find_one(self, isbn: str) -> DomainBook:
        stmt = select(OrmBook).where(OrmBook.isbn == isbn)
        try:
            result = await self._session.execute(stmt)
            # raises MultipleResultsFound rather than picking one
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error fetching book %s: %s", isbn, e)
            raise StorageError("find_one", str(e)) from e
        if row is None:
            raise BookNotFoundError(isbn)
        return self._to_domain(row)

    async def create(self, data: Mapping[str, Any]) -> DomainBook:
        isbn = data["isbn"]
        row = OrmBook(**{field: data[field] for field in BOOK_FIELDS})
        self._session.add(row)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.info("Rejected duplicate book %s", isbn)
            raise BookConflictError(isbn) from e
        except SQLAlchemyError as e:
            logger.error("Error creating book %s: %s", isbn, e)
            raise StorageError("create", str(e)) from e
        return self._to_domain(row)

    async def update(self, isbn: str, data: Mapping[str, Any]) -> DomainBook:
        stmt = (
            update(OrmBook)
            .where(OrmBook.isbn == isbn)
            .values({field: data[field] for field in MUTABLE_FIELDS})
            .returning(OrmBook)
        )
        try:
            result = await self._session.execute(stmt)
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error updating book %s: %s", isbn, e)
            raise StorageError("update", str(e)) from e
        if row is None:
            raise BookNotFoundError(isbn)
        return self._to_domain(row)

    async def remove(self, isbn: str) -> None:
        stmt = delete(OrmBook).where(OrmBook.isbn == isbn).returning(OrmBook.isbn)
        try:
            result = await self._session.execute(stmt)
            deleted = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error deleting book %s: %s", isbn, e)
            raise StorageError("remove", str(e)) from e
        if deleted is None:
            raise BookNotFoundError(isbn)
