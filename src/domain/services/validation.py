"""Validation gate for inbound book payloads.

Every function here is pure: it either returns the validated shape or raises
BookValidationError with one message per violated constraint. Nothing is
read from or written to storage, so mutating requests can be rejected before
a session is ever touched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.domain.exceptions import BookValidationError
from src.domain.schemas import BookCreate, BookFilter, BookUpdate

ISBN_IN_BODY_MESSAGE = "Bad request: ISBN in request body"


def format_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Render Pydantic error dicts as ``"<field>: <reason>"`` strings."""
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location or 'body'}: {error['msg']}")
    return messages


def _validate(schema: type[BaseModel], payload: Any) -> BaseModel:
    if not isinstance(payload, Mapping):
        raise BookValidationError(["body: Input should be a JSON object"])
    try:
        return schema.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise BookValidationError(format_errors(exc.errors())) from exc


def validate_create(payload: Any) -> BookCreate:
    return _validate(BookCreate, payload)  # type: ignore[return-value]


def validate_update(payload: Any) -> BookUpdate:
    """Validate a full-replacement update body.

    isbn identifies the row through the path, so its presence in the body is
    rejected outright, before (and regardless of) schema conformance.
    """
    if isinstance(payload, Mapping) and "isbn" in payload:
        raise BookValidationError([ISBN_IN_BODY_MESSAGE])
    return _validate(BookUpdate, payload)  # type: ignore[return-value]


def validate_filter(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return only the filter fields that were actually supplied."""
    if not params:
        return {}
    book_filter = _validate(BookFilter, params)
    return book_filter.model_dump(exclude_unset=True)
