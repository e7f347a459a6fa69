"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from forum.domain.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    TransactionFailure,
    ValidationError,
)

ERROR_STATUS: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    TransactionFailure: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: DomainError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS:
            return ERROR_STATUS[error_type]  # type: ignore[index]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"detail": message}`` with its status code."""
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, error=str(exc), status=status_code
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            error=type(exc).__name__,
            status=status_code,
        )

    headers = {"Retry-After": "1"} if isinstance(exc, TransactionFailure) else None
    return JSONResponse(
        status_code=status_code, content={"detail": str(exc)}, headers=headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
