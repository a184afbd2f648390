"""Error handling middleware and exception handlers."""

from datetime import datetime, timezone
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
import structlog

from src.domain.exceptions import (
    DomainException,
    CreditNotFoundException,
    CreditOwnershipException,
    CustomerAlreadyExistsException,
    CustomerNotFoundException,
    RequestValidationException,
)
from src.presentation.schemas import ErrorResponseSchema
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

BAD_REQUEST_TITLE = "Bad Request! Consult the documentation"
NOT_FOUND_TITLE = "Not Found! Consult the documentation"
CONFLICT_TITLE = "Conflict! Consult the documentation"
INTERNAL_ERROR_TITLE = "Internal Server Error"

# Location prefixes FastAPI puts in front of the offending field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def error_response(
    status_code: int,
    title: str,
    exception: str,
    details: Iterable[str] = (),
) -> JSONResponse:
    """Build the JSON error body shared by every error response."""
    body = ErrorResponseSchema(
        title=title,
        timestamp=datetime.now(timezone.utc).isoformat(),
        status=status_code,
        exception=exception,
        details=list(details),
        request_id=get_request_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
    )


def _format_validation_error(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
    field = ".".join(location) or "body"
    return f"{field}: {error.get('msg', 'invalid value')}"


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(RequestValidationException)
    async def invalid_request_handler(
        request: Request,
        exc: RequestValidationException,
    ) -> JSONResponse:
        """Handle field validation failures raised by the services."""
        return error_response(
            400,
            BAD_REQUEST_TITLE,
            type(exc).__name__,
            exc.details,
        )

    @app.exception_handler(RequestValidationError)
    async def malformed_request_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle bodies or parameters FastAPI could not parse."""
        return error_response(
            400,
            BAD_REQUEST_TITLE,
            "RequestValidationException",
            [_format_validation_error(error) for error in exc.errors()],
        )

    @app.exception_handler(CreditOwnershipException)
    async def credit_ownership_handler(
        request: Request,
        exc: CreditOwnershipException,
    ) -> JSONResponse:
        """Handle a credit requested by a customer who does not own it."""
        return error_response(
            400,
            BAD_REQUEST_TITLE,
            type(exc).__name__,
            [exc.message],
        )

    @app.exception_handler(CustomerNotFoundException)
    async def customer_not_found_handler(
        request: Request,
        exc: CustomerNotFoundException,
    ) -> JSONResponse:
        """Handle customer not found errors."""
        return error_response(
            404,
            NOT_FOUND_TITLE,
            type(exc).__name__,
            [exc.message],
        )

    @app.exception_handler(CreditNotFoundException)
    async def credit_not_found_handler(
        request: Request,
        exc: CreditNotFoundException,
    ) -> JSONResponse:
        """Handle credit not found errors."""
        return error_response(
            404,
            NOT_FOUND_TITLE,
            type(exc).__name__,
            [exc.message],
        )

    @app.exception_handler(CustomerAlreadyExistsException)
    async def customer_exists_handler(
        request: Request,
        exc: CustomerAlreadyExistsException,
    ) -> JSONResponse:
        """Handle duplicate CPF or email registrations."""
        return error_response(
            409,
            CONFLICT_TITLE,
            type(exc).__name__,
            [exc.message],
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        """Handle constraint violations reported by the database."""
        logger.warning(
            "integrity_error",
            request_id=get_request_id(),
            error=str(exc.orig),
        )
        return error_response(
            409,
            CONFLICT_TITLE,
            "DataIntegrityViolation",
            ["The request conflicts with an existing record"],
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return error_response(
            400,
            BAD_REQUEST_TITLE,
            type(exc).__name__,
            [exc.message],
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(
            500,
            INTERNAL_ERROR_TITLE,
            "InternalServerError",
            ["An unexpected error occurred."],
        )
