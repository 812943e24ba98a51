"""FastAPI dependencies wiring repositories to the per-request session."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.repositories.books import BookRepository
from src.infrastructure.database import get_session
from src.infrastructure.persistence.repositories import get_repositories


async def get_book_repository(
    session: AsyncSession = Depends(get_session),
) -> BookRepository:
    return get_repositories(session).books
