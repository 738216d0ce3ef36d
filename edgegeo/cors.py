from starlette.datastructures import MutableHeaders

# Any origin may read /api/geo; preflight results are cached for a day.
CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",
}

CORS_PATH_PREFIX = "/api/"


def apply_cors_headers(headers: MutableHeaders) -> None:
    """Attach the CORS header set to an outgoing response."""
    headers.update(CORS_HEADERS)
