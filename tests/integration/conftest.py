"""Fixtures for API tests: an in-memory SQLite store seeded with one book,
and an httpx client driving the ASGI app directly.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from src.api.app import create_app
from src.infrastructure.database import Base, Settings, build_session_factory
from src.infrastructure.persistence.models import Book as OrmBook

TEST_BOOK = {
    "isbn": "1234567890",
    "amazon_url": "https://a.co/test",
    "author": "Carl Diggler",
    "language": "english",
    "pages": 413,
    "publisher": "Scholastic Books",
    "title": "On the Origin of Fake Test Data",
    "year": 2015,
}


@pytest.fixture
async def session_factory():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = build_session_factory(engine)
    async with factory() as session, session.begin():
        session.add(OrmBook(**TEST_BOOK))
    yield factory
    await engine.dispose()


@pytest.fixture
async def client(session_factory):
    app = create_app(Settings(database_url="sqlite+aiosqlite://"), session_factory=session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def test_book():
    return dict(TEST_BOOK)
