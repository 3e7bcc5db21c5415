"""Error Handlers: global exception handlers for the BizTime API.

Invariants:
    - BizTimeError → status_for(category) with the structured error envelope
    - RequestValidationError → 400 with a readable message and field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BizTimeError), validation (Pydantic), catch-all (Exception)
    - Handlers never pick status codes themselves; the error kind decides
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from biztime.core.errors import BizTimeError, ErrorCategory, ErrorSeverity, status_for

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_biztime_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_biztime_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BizTimeError)
    async def biztime_error_handler(request: Request, exc: BizTimeError):
        """Handle all BizTime domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        }
        if exc.category == ErrorCategory.DATABASE:
            logger.error(f"BizTimeError: {exc.message}", extra=extra)
        else:
            logger.warning(f"BizTimeError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=status_for(exc.category), content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status_for(ErrorCategory.VALIDATION),
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
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


def _field_name(loc: tuple) -> str:
    """Drop the 'body'/'path' prefix FastAPI puts on error locations."""
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def summarize_validation_errors(errors: list[dict]) -> str:
    """One readable line, e.g. 'missing code, name' or 'missing request body'."""
    missing = [e for e in errors if e["type"] == "missing"]
    if any(tuple(e["loc"]) == ("body",) for e in missing):
        return "missing request body"
    parts = []
    if missing:
        parts.append("missing " + ", ".join(_field_name(e["loc"]) for e in missing))
    for e in errors:
        if e["type"] != "missing":
            parts.append(f"{_field_name(e['loc'])}: {e['msg']}")
    return "; ".join(parts) or "Invalid request data"


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    errors = exc.errors()
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": summarize_validation_errors(errors),
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.WARNING.value,
            "details": [
                {
                    "field": _field_name(tuple(e["loc"])),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        },
    }
