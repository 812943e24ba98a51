"""ORM model registry: imports every mapper class so it is registered with
Base.metadata before Alembic or SQLAlchemy runs.
"""

from src.infrastructure.persistence.models.catalog import Book

__all__ = [
    "Book",
]
