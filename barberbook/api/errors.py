"""
Error Envelope
==============

Maps every failure to ``{"error": <message>}`` with the right status code.

- BookingBackendError subclasses carry their own status and public message
- Request parsing errors (malformed JSON, body not an object) become 400
- Framework HTTP errors (unknown route, wrong method) keep their status
- Anything else is logged and reported as a generic 500
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from barberbook.domain.exceptions import BookingBackendError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_domain_error(request: Request, exc: BookingBackendError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def catch_all_errors(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """Last line of defence: no exception reaches the server as a transport failure."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_error_handlers(application: FastAPI) -> None:
    """Install the exception handlers and the catch-all middleware."""
    application.add_exception_handler(BookingBackendError, handle_domain_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_middleware(BaseHTTPMiddleware, dispatch=catch_all_errors)
