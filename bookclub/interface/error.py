"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from bookclub.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

# Most specific first; anything else deriving from DomainError is a 400
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (PersistenceError, status.HTTP_409_CONFLICT),
]


def status_for(exc: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI) -> None:
    """Turn domain errors raised by use cases into JSON error responses.

    The body matches FastAPI's own ``HTTPException`` shape so clients see
    one error format.
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        logfire.warn(
            "Request failed",
            error_type=type(exc).__name__,
            error=str(exc),
            status_code=status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "error": type(exc).__name__},
        )
