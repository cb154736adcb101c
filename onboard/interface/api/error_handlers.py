"""Error handlers - global exception handlers for the API.

- APIError -> JSON body with error code and description
- 405 from routing -> the same body as an unsupported-method APIError
- Exception (catch-all) -> never leaks internal details
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exception_handlers import http_exception_handler

from onboard.interface.error import APIError, method_not_allowed


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _api_error_response(exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


def _register_api_error_handler(app: FastAPI) -> None:
    """Register API error handler."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        logfire.debug(
            "API error", path=request.url.path, error=exc.error, status=exc.status_code
        )
        return _api_error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Translate routing's 405 into an APIError body."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            logfire.debug(
                "Method not allowed", path=request.url.path, method=request.method
            )
            return _api_error_response(method_not_allowed())
        return await http_exception_handler(request, exc)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "server_error", "error_description": "internal error"},
        )
