from typing import Annotated

from fastapi import Depends, FastAPI, Request, Response, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from edgegeo.config import Settings, get_settings
from edgegeo.cors import apply_cors_headers
from edgegeo.edge.base import BaseEdgeSource
from edgegeo.edge.factory import EdgeSourceFactory
from edgegeo.exception_handlers import http_exception_handler, unhandled_exception_handler
from edgegeo.logger import logger
from edgegeo.models.response_models import GeolocationResult, HealthResponse

app = FastAPI(
    title="Edge Geolocation Service",
    version="0.1.0",
    description="Visitor geolocation as resolved by the hosting edge network.",
)
logger.info(f"Started Edge Geolocation Service edge_platform={get_settings().edge_platform.value}")


def get_edge_source(settings: Annotated[Settings, Depends(get_settings)]) -> BaseEdgeSource:
    """Dependency to provide the edge metadata source for the configured platform."""
    return EdgeSourceFactory()(settings.edge_platform)


app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok")


@app.options(
    "/api/geo",
    tags=["geo"],
    status_code=status.HTTP_200_OK,
    summary="CORS preflight for the geolocation endpoint.",
)
async def geo_preflight(response: Response) -> dict:
    """Answer browser preflight requests with an empty payload and the CORS header set."""
    apply_cors_headers(response.headers)
    return {}


@app.get(
    "/api/geo",
    response_model=GeolocationResult,
    status_code=status.HTTP_200_OK,
    tags=["geo"],
    summary="Geolocation of the caller as reported by the edge network.",
)
async def geo(
    request: Request,
    response: Response,
    source: Annotated[BaseEdgeSource, Depends(get_edge_source)],
) -> GeolocationResult:
    """Return where the caller appears to be, according to the edge network.

    - city, country, countryRegion, latitude, longitude and region come from
      the platform's geolocation helper.
    - continent, timezone and postalCode are read from raw headers.
    - ip is the caller address reported by the edge network.

    Values are passed through untouched. Fields the edge network did not
    resolve (always the case outside it, e.g. local development) are null.
    """
    headers = request.headers
    location = source.geolocation(headers)

    result = GeolocationResult(
        ip=source.ip_address(headers),
        city=location.city,
        country=location.country,
        country_region=location.country_region,
        continent=source.continent(headers),
        latitude=location.latitude,
        longitude=location.longitude,
        timezone=source.timezone(headers),
        postal_code=source.postal_code(headers),
        region=location.region,
    )
    logger.debug(
        "Resolved edge geolocation "
        f"path={request.url.path} method={request.method} platform={source.platform.value} "
        f"resolved_fields={sorted(result.model_dump(by_alias=True, exclude_none=True))}"
    )

    apply_cors_headers(response.headers)
    return result
