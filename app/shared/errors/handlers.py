"""
Centralized error handlers for FastAPI.

The use-case routers already translate domain errors into responses;
these handlers cover what never reaches a router (malformed bodies)
and anything unexpected, with the same response shape.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.interfaces.http_response import HTTP_400, HttpBaseResponse, HttpResponse

logger = logging.getLogger(__name__)

MALFORMED_BODY_MESSAGE = "Malformed request body"


def _json(response: HttpBaseResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status, content=response.to_body())


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies that are not JSON objects of strings."""
        logger.warning("Malformed request body: %d error(s)", len(exc.errors()))
        return _json(HttpBaseResponse(status=HTTP_400, message=MALFORMED_BODY_MESSAGE))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _json(HttpResponse.server_error())
