from urllib.parse import unquote

from starlette.datastructures import Headers

from edgegeo.edge.base import BaseEdgeSource
from edgegeo.models.common import EdgeGeolocation, EdgePlatform

IP_HEADER = "x-real-ip"
CITY_HEADER = "x-vercel-ip-city"
COUNTRY_HEADER = "x-vercel-ip-country"
COUNTRY_REGION_HEADER = "x-vercel-ip-country-region"
LATITUDE_HEADER = "x-vercel-ip-latitude"
LONGITUDE_HEADER = "x-vercel-ip-longitude"
REQUEST_ID_HEADER = "x-vercel-id"


class VercelEdgeSource(BaseEdgeSource):
    """Reads the geolocation headers injected by the Vercel edge network.

    See https://vercel.com/docs/headers/request-headers for the header contract.
    """

    platform = EdgePlatform.vercel

    continent_header = "x-vercel-ip-continent"
    timezone_header = "x-vercel-ip-timezone"
    postal_code_header = "x-vercel-ip-postal-code"

    def geolocation(self, headers: Headers) -> EdgeGeolocation:
        return EdgeGeolocation(
            city=self._city(headers),
            country=headers.get(COUNTRY_HEADER),
            country_region=headers.get(COUNTRY_REGION_HEADER),
            latitude=headers.get(LATITUDE_HEADER),
            longitude=headers.get(LONGITUDE_HEADER),
            region=self._region(headers),
        )

    def ip_address(self, headers: Headers) -> str | None:
        return headers.get(IP_HEADER)

    @staticmethod
    def _city(headers: Headers) -> str | None:
        # Vercel percent-encodes city names, e.g. "S%C3%A3o%20Paulo".
        raw = headers.get(CITY_HEADER)
        if not raw:
            return None
        return unquote(raw)

    @staticmethod
    def _region(headers: Headers) -> str | None:
        """Extract the serving node from the request id.

        The request id looks like "sfo1::iad1::abcde-1700000000000-0123456789ab";
        its first segment is the edge node that accepted the connection.
        """
        request_id = headers.get(REQUEST_ID_HEADER)
        if not request_id:
            return None
        return request_id.split(":")[0]
