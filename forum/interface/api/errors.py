"""Exception handlers rendering errors as JSON envelopes.

Client errors render as ``{"status": "fail", "message": ...}``. Server errors
render as ``{"status": "error", "message": ...}`` with a generic message.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum.domain.error import DomainError
from forum.interface.error import DomainErrorTranslator, TranslatedError
from forum.util.logging import get_logger

logger = get_logger(__name__)


def _render(translated: TranslatedError) -> JSONResponse:
    return JSONResponse(
        status_code=translated.status_code,
        content={"status": translated.status, "message": translated.message},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error by its code."""
    translated = DomainErrorTranslator.translate(exc)
    if translated.status == "error":
        logfire.error(
            "Domain error", code=exc.code, error=str(exc), path=request.url.path
        )
    else:
        logfire.warn("Request failed", code=exc.code, path=request.url.path)
    return _render(translated)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap HTTP errors raised by routes in the fail envelope."""
    envelope = "fail" if exc.status_code < 500 else "error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": envelope, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed requests, e.g. a body that is not a JSON object."""
    logfire.warn("Malformed request", path=request.url.path, errors=str(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"status": "fail", "message": "request body must be a JSON object"},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Hide unexpected failures behind an opaque server error."""
    logger.exception("Unhandled error on %s", request.url.path)
    logfire.error("Unhandled error", error=str(exc), path=request.url.path)
    return _render(DomainErrorTranslator.translate(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register the JSON envelope exception handlers on an app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
