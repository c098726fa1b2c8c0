from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ProxyError(Exception):
    """Base error rendered to callers as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequest(ProxyError):
    """Raised when the request body is malformed or incomplete."""

    status_code = status.HTTP_400_BAD_REQUEST


class Misconfigured(ProxyError):
    """Raised when the upstream credential is missing from the environment."""


class UpstreamFailure(ProxyError):
    """Raised when the upstream API rejects the call or cannot be reached."""


async def _handle_proxy_error(request: Request, exc: ProxyError) -> JSONResponse:
    logger.debug("%s %s failed with %s", request.method, request.url.path, exc.status_code)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        # Bare 405: keep the Allow header, drop the body.
        return Response(status_code=exc.status_code, headers=exc.headers)
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=exc.headers,
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    # Runs outside the app middleware stack, so the origin header is set here.
    return JSONResponse(
        {"error": str(exc) or "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers={"Access-Control-Allow-Origin": request.app.state.cors_allow_origin},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render proxy errors and HTTP errors in the service's JSON error shape."""
    app.add_exception_handler(ProxyError, _handle_proxy_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _handle_unexpected_error)
