"""
Application error types and their HTTP translation.

Every error the API reports uses the same body shape:

    {"error": "<human readable message>"}

Services raise their own exception hierarchies; routes translate those into
one of the error kinds below, and the handlers registered by
``register_exception_handlers`` turn them into JSON responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MemeAppError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(MemeAppError):
    """Raised when the request itself is invalid (missing topic, bad body)."""

    status_code = status.HTTP_400_BAD_REQUEST


class MethodNotAllowedError(ClientInputError):
    """Raised when an endpoint is called with the wrong HTTP method."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class ConfigurationError(MemeAppError):
    """Raised when a required credential is not configured."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamError(MemeAppError):
    """Raised when an external service call fails. The message must not leak details."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def meme_app_error_handler(request: Request, exc: MemeAppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body validation failures as 400 with the common error shape."""
    errors = exc.errors()
    logger.info(f"Rejected invalid request to {request.url.path}: {errors}")

    # A missing or non-object body means there is no topic either
    if any("topic" in error.get("loc", ()) or tuple(error.get("loc", ())) == ("body",) for error in errors):
        message = "Topic is required"
    else:
        message = "Invalid request body"

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(MemeAppError, meme_app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
