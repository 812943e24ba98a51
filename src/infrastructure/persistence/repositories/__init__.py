"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary (FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .books import SqlBookRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    books: SqlBookRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use inside a FastAPI dependency:

        async def get_book_repository(
            session: AsyncSession = Depends(get_session),
        ) -> BookRepository:
            return get_repositories(session).books
    """
    return Repositories(books=SqlBookRepository(session))


__all__ = [
    "SqlBookRepository",
    "Repositories",
    "get_repositories",
]
