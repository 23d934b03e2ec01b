"""Error Handlers - global exception handlers for the billing API.

Invariants:
    - BillingError → structured JSON, status chosen by ErrorCategory
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Authentication failures answer with WWW-Authenticate: Bearer

Design Decisions:
    - Three-layer handler: domain (BillingError), validation (Pydantic), catch-all (Exception)
    - Category → status table lives here only; core errors know nothing of HTTP
"""

import logging
from typing import assert_never

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from billing.core.errors import BillingError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def status_for_category(category: ErrorCategory) -> int:
    match category:
        case ErrorCategory.VALIDATION:
            return status.HTTP_400_BAD_REQUEST
        case ErrorCategory.AUTHENTICATION:
            return status.HTTP_401_UNAUTHORIZED
        case ErrorCategory.RESOURCE_NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        case ErrorCategory.CONFLICT:
            return status.HTTP_409_CONFLICT
        case ErrorCategory.INTERNAL:
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        case ErrorCategory.DEPENDENCY:
            return status.HTTP_503_SERVICE_UNAVAILABLE
        case _:
            assert_never(category)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_billing_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_billing_error_handler(app: FastAPI) -> None:
    """Register billing domain/infrastructure error handler."""

    @app.exception_handler(BillingError)
    async def billing_error_handler(request: Request, exc: BillingError):
        """Handle all billing domain/infrastructure errors."""
        status_code = status_for_category(exc.category)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
                "resource_id": exc.context.resource_id,
            },
        )
        headers = None
        if exc.category is ErrorCategory.AUTHENTICATION:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=status_code, content=exc.to_response(), headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
