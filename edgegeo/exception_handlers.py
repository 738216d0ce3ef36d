from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from edgegeo.cors import CORS_HEADERS, CORS_PATH_PREFIX
from edgegeo.logger import logger

# Stable machine-readable codes for framework-level HTTP errors.
HTTP_ERROR_CODES: dict[int, str] = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def _error_headers(request: Request, extra: dict[str, str] | None = None) -> dict[str, str]:
    """Error responses under /api/ keep the CORS headers so browsers can read them."""
    headers = dict(extra or {})
    if request.url.path.startswith(CORS_PATH_PREFIX):
        headers.update(CORS_HEADERS)
    return headers


def _allowed_methods(request: Request) -> str:
    """Methods served at the request path across all routes registered for it."""
    methods: set[str] = set()
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match is not Match.NONE:
            methods.update(getattr(route, "methods", None) or ())
    return ", ".join(sorted(methods))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, unsupported method) as structured JSON."""
    logger.info(
        "HTTP error during request handling "
        f"path={request.url.path} method={request.method} status_code={exc.status_code}"
    )
    content: dict[str, Any] = {
        "code": HTTP_ERROR_CODES.get(exc.status_code, "http_error"),
        "message": str(exc.detail),
    }
    headers = _error_headers(request, exc.headers)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        # Each route only reports its own methods; GET and OPTIONS on /api/geo are separate routes.
        headers["Allow"] = _allowed_methods(request)
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        f"Unhandled exception while processing request: {repr(exc)} path={request.url.path} method={request.method}"
    )
    content: dict[str, Any] = {
        "code": "internal_error",
        "message": "An unexpected error occurred while processing the request.",
    }
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
        headers=_error_headers(request),
    )
