"""Translate domain errors into HTTP responses.

Every failure leaves as ``{"error": {"message": ..., "status": ...}}``.
Validation failures carry the list of violations as the message; storage
and unhandled failures carry a fixed message so internals never leak.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    BookConflictError,
    BookNotFoundError,
    BookServiceError,
    BookValidationError,
    StorageError,
)
from src.domain.services.validation import format_errors

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[BookServiceError], int] = {
    BookValidationError: status.HTTP_400_BAD_REQUEST,
    BookNotFoundError: status.HTTP_404_NOT_FOUND,
    BookConflictError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(message, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


async def book_error_handler(request: Request, exc: BookServiceError) -> JSONResponse:
    status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(
            "Storage failure on %s %s: %s", request.method, request.url.path, exc.message
        )
        return error_response("A storage error occurred", status_code)
    return error_response(exc.message, status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(format_errors(list(exc.errors())), status.HTTP_400_BAD_REQUEST)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return error_response(
        "An unexpected error occurred", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookServiceError, book_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
