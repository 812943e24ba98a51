"""Declarative payload schemas checked by the validation gate.

Create and update bodies are strict and closed: every field is required,
numbers must arrive as JSON numbers, and unknown keys are rejected.
The list filter is open to coercion because its values come from the
query string.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BookUpdate(BaseModel):
    """Full replacement of the mutable fields (no isbn)."""

    model_config = ConfigDict(extra="forbid", strict=True)

    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookCreate(BookUpdate):
    """A complete new book, isbn included."""

    isbn: str


class BookFilter(BaseModel):
    """Equality filter for listing; any subset of the book's fields."""

    model_config = ConfigDict(extra="forbid")

    isbn: str | None = None
    amazon_url: str | None = None
    author: str | None = None
    language: str | None = None
    pages: int | None = None
    publisher: str | None = None
    title: str | None = None
    year: int | None = None
