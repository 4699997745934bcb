"""Error Handlers - turn every failure into a success=false envelope.

Invariants:
    - PickstreamError keeps its own status and to_response() body
    - A malformed request (missing/ill-typed query or path value) is a 400
      listing each offending field
    - Any other exception becomes a 500 INTERNAL_ERROR envelope; the
      exception text only goes to the log
    - Internal failures are converted inside the middleware stack, so the
      500 still passes through CORSMiddleware

Design Decisions:
    - Internal failures caught by an http middleware, not an Exception
      handler: Starlette runs Exception handlers in ServerErrorMiddleware,
      outside CORS. register_error_handlers must run before CORS is added
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from pickstream.core.errors import ErrorCategory, ErrorSeverity, PickstreamError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PickstreamError, _on_domain_error)
    app.add_exception_handler(RequestValidationError, _on_invalid_request)
    app.middleware("http")(_convert_internal_errors)


def error_envelope(
    message: str,
    code: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **details,
) -> dict:
    """Envelope shared by the handlers below (domain errors build their own)."""
    return {
        "success": False,
        "message": message,
        "error": {
            "code": code,
            "category": category.value,
            "severity": severity.value,
            **details,
        },
    }


async def _on_domain_error(request: Request, exc: PickstreamError):
    logger.warning(
        f"{request.method} {request.url.path} rejected: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _on_invalid_request(request: Request, exc: RequestValidationError):
    fields = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"{request.method} {request.url.path} malformed: {fields}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(
            "Invalid request data", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=fields,
        ),
    )


async def _convert_internal_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception(
            f"{request.method} {request.url.path} failed",
            extra={
                "error_code": "INTERNAL_ERROR",
                "method": request.method,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                "An unexpected error occurred", "INTERNAL_ERROR",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )
