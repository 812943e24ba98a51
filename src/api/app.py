"""FastAPI application factory.

Wires settings, the async session factory, the book routes and the error
handlers together. The storage handle is built here (or passed in) and kept
on app.state; nothing else in the service holds a global engine.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.api.errors import register_error_handlers
from src.api.routers import books_router
from src.infrastructure.database import Settings, build_engine, build_session_factory

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = None
    if session_factory is None:
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Book catalog API starting")
        yield
        if engine is not None:
            await engine.dispose()
        logger.info("Book catalog API stopped")

    app = FastAPI(title="Book Catalog API", lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = session_factory

    register_error_handlers(app)
    app.include_router(books_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.api.app:create_app", factory=True, host="0.0.0.0", port=8000)
