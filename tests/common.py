from starlette.datastructures import Headers

from edgegeo.edge.base import BaseEdgeSource
from edgegeo.models.common import EdgeGeolocation, EdgePlatform

GEO_RESULT_KEYS = {
    "ip",
    "city",
    "country",
    "countryRegion",
    "continent",
    "latitude",
    "longitude",
    "timezone",
    "postalCode",
    "region",
}

AUSTIN_VERCEL_HEADERS = {
    "x-real-ip": "198.51.100.7",
    "x-vercel-ip-city": "Austin",
    "x-vercel-ip-country": "US",
    "x-vercel-ip-country-region": "TX",
    "x-vercel-ip-continent": "NA",
    "x-vercel-ip-latitude": "30.2672",
    "x-vercel-ip-longitude": "-97.7431",
    "x-vercel-ip-timezone": "America/Chicago",
    "x-vercel-ip-postal-code": "78701",
    "x-vercel-id": "iad1::iad1::8x2kq-1760800000000-5b1f0c9e2a4d",
}

AUSTIN_RESULT = {
    "ip": "198.51.100.7",
    "city": "Austin",
    "country": "US",
    "countryRegion": "TX",
    "continent": "NA",
    "latitude": "30.2672",
    "longitude": "-97.7431",
    "timezone": "America/Chicago",
    "postalCode": "78701",
    "region": "iad1",
}


class StaticEdgeSource(BaseEdgeSource):
    """Test double that simulates edge metadata regardless of request headers."""

    platform = EdgePlatform.vercel

    continent_header = "x-test-continent"
    timezone_header = "x-test-timezone"
    postal_code_header = "x-test-postal-code"

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = values or {}

    def geolocation(self, headers: Headers) -> EdgeGeolocation:
        return EdgeGeolocation(
            city=self._values.get("city"),
            country=self._values.get("country"),
            country_region=self._values.get("countryRegion"),
            latitude=self._values.get("latitude"),
            longitude=self._values.get("longitude"),
            region=self._values.get("region"),
        )

    def ip_address(self, headers: Headers) -> str | None:
        return self._values.get("ip")

    def continent(self, headers: Headers) -> str | None:
        return self._values.get("continent")

    def timezone(self, headers: Headers) -> str | None:
        return self._values.get("timezone")

    def postal_code(self, headers: Headers) -> str | None:
        return self._values.get("postalCode")


class ErrorRaisingEdgeSource(StaticEdgeSource):
    """Test double whose geolocation helper always raises a configured exception."""

    def __init__(self, exc: Exception) -> None:
        super().__init__()
        self._exc = exc

    def geolocation(self, headers: Headers) -> EdgeGeolocation:
        raise self._exc
