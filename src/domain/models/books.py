"""Book domain model and its field sets.

Pure domain object; the ORM row lives in src/infrastructure/persistence/.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# isbn is the primary key and is supplied by the client on create.
BOOK_FIELDS: tuple[str, ...] = (
    "isbn",
    "amazon_url",
    "author",
    "language",
    "pages",
    "publisher",
    "title",
    "year",
)
MUTABLE_FIELDS: tuple[str, ...] = tuple(f for f in BOOK_FIELDS if f != "isbn")
INTEGER_FIELDS: frozenset[str] = frozenset({"pages", "year"})


class Book(BaseModel):
    """A catalog entry keyed by its ISBN.

    isbn never changes after creation; updates resupply every other field.
    """

    model_config = ConfigDict(frozen=True)

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int
