"""Exception handlers for the FastAPI application.

Domain exceptions become JSON error bodies of the form
``{"error": true, "message": ..., "status_code": ...}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from shop.domain.exceptions import (
    DomainException,
    DuplicateMemberError,
    EntityNotFoundError,
    IllegalOrderStateError,
    NotEnoughStockError,
)

logger = logging.getLogger(__name__)

# First match wins; subclasses before their bases.
_STATUS_BY_EXCEPTION: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateMemberError, status.HTTP_409_CONFLICT),
    (IllegalOrderStateError, status.HTTP_409_CONFLICT),
    (NotEnoughStockError, status.HTTP_409_CONFLICT),
]


def status_for(exc: DomainException) -> int:
    for exc_type, code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": True, "message": message, "status_code": status_code},
    )


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map a DomainException to its HTTP status."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = status_for(exc)
    logger.info(
        "%s on %s %s -> %d: %s",
        type(exc).__name__, request.method, request.url.path, status_code, exc,
    )
    return _error_response(status_code, str(exc))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with the same response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return _error_response(http_exc.status_code, str(http_exc.detail))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions with traceback and return a safe 500."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method, request.url.path, exc,
        exc_info=True,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
