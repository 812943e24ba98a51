"""Domain model package.

Domain objects are pure Pydantic models with no ORM or infrastructure
dependencies.
"""

from .books import BOOK_FIELDS, INTEGER_FIELDS, MUTABLE_FIELDS, Book

__all__ = [
    "Book",
    "BOOK_FIELDS",
    "MUTABLE_FIELDS",
    "INTEGER_FIELDS",
]
