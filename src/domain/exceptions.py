"""Domain-level errors for the book catalog.

These are raised by the validation gate and the repositories and carry no
HTTP concerns. The API layer maps each class to a status code.
"""

from __future__ import annotations

from typing import Any


class BookServiceError(Exception):
    """Base class for all catalog errors."""

    def __init__(self, message: Any, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(str(message))


class BookValidationError(BookServiceError):
    """Raised when a payload or filter fails its schema.

    messages holds one human-readable entry per violated constraint.
    """

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__(self.messages, details={"violations": len(self.messages)})


class BookNotFoundError(BookServiceError):
    """Raised when no row matches the requested isbn."""

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"There is no book with an isbn '{isbn}'", details={"isbn": isbn})


class BookConflictError(BookServiceError):
    """Raised when an insert collides with an existing isbn."""

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"A book with isbn '{isbn}' already exists", details={"isbn": isbn})


class StorageError(BookServiceError):
    """Raised for any storage failure not classified above."""

    def __init__(self, operation: str, reason: str | None = None):
        message = f"Storage {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message, details={"operation": operation, "reason": reason})


__all__ = [
    "BookServiceError",
    "BookValidationError",
    "BookNotFoundError",
    "BookConflictError",
    "StorageError",
]
