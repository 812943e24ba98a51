"""Generic repository base interface.

Repository[T, K] is the root abstraction for all data-access interfaces in
this domain layer. Concrete implementations live in
src/infrastructure/persistence/ and are wired at the application boundary via
dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO); K is its key type.
  - Missing keys are errors, not None: find_one, update and remove raise the
    domain's not-found error when no row matches.
  - find_all() returns an empty list, never an error, when nothing matches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class Repository(ABC, Generic[T, K]):
    """Abstract CRUD interface for a keyed domain entity."""

    @abstractmethod
    async def find_all(self, filters: Mapping[str, Any] | None = None) -> list[T]:
        """Return every entity, optionally narrowed by field equality."""

    @abstractmethod
    async def find_one(self, key: K) -> T:
        """Return the entity with the given key; raise if absent."""

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> T:
        """Persist a new entity and return it as stored."""

    @abstractmethod
    async def update(self, key: K, data: Mapping[str, Any]) -> T:
        """Replace the mutable fields of an existing entity and return the result."""

    @abstractmethod
    async def remove(self, key: K) -> None:
        """Delete the entity with the given key; raise if absent."""
