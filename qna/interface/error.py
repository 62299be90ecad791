"""Interface layer errors."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from qna.domain.error import (
    ConflictError,
    DomainError,
    InvalidArgumentError,
    NotAuthorizedError,
    NotFoundError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """Raised when a route requires a valid bearer token."""

    pass


def http_status_for(error: DomainError) -> int:
    """Map a domain error onto an HTTP status code.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTP status code
    """
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(error, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, InvalidArgumentError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_400_BAD_REQUEST


def install_error_handlers(app: FastAPI) -> None:
    """Register JSON handlers for errors raised out of routes.

    Domain errors map through ``http_status_for``; a missing or invalid
    bearer token is 401. Malformed input is 400 wherever it is caught:
    FastAPI request parsing (path, query, body) or value-object validation
    inside a route (e.g. a malformed username in a path).
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        status_code = http_status_for(exc)
        if isinstance(exc, ConflictError):
            logfire.error("Unresolved conflict", path=request.url.path, error=str(exc))
        else:
            logfire.info(
                "Domain error", path=request.url.path, status=status_code, error=str(exc)
            )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.exception_handler(AuthenticationRequiredError)
    async def handle_authentication_required(
        request: Request, exc: AuthenticationRequiredError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc) or "Authentication required"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.errors(include_url=False, include_context=False)},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logfire.info("Invalid request", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )
