from starlette.datastructures import Headers

from edgegeo.edge.base import BaseEdgeSource
from edgegeo.models.common import EdgeGeolocation, EdgePlatform

IP_HEADER = "cf-connecting-ip"
CITY_HEADER = "cf-ipcity"
COUNTRY_HEADER = "cf-ipcountry"
COUNTRY_REGION_HEADER = "cf-region-code"
LATITUDE_HEADER = "cf-iplatitude"
LONGITUDE_HEADER = "cf-iplongitude"
RAY_HEADER = "cf-ray"


class CloudflareEdgeSource(BaseEdgeSource):
    """Reads Cloudflare's visitor location headers.

    Apart from cf-ipcountry and cf-ray these are only present when the
    "Add visitor location headers" managed transform is enabled for the zone.
    """

    platform = EdgePlatform.cloudflare

    continent_header = "cf-ipcontinent"
    timezone_header = "cf-timezone"
    postal_code_header = "cf-postal-code"

    def geolocation(self, headers: Headers) -> EdgeGeolocation:
        return EdgeGeolocation(
            city=headers.get(CITY_HEADER),
            country=headers.get(COUNTRY_HEADER),
            country_region=headers.get(COUNTRY_REGION_HEADER),
            latitude=headers.get(LATITUDE_HEADER),
            longitude=headers.get(LONGITUDE_HEADER),
            region=self._region(headers),
        )

    def ip_address(self, headers: Headers) -> str | None:
        return headers.get(IP_HEADER)

    @staticmethod
    def _region(headers: Headers) -> str | None:
        # Ray ids end with the data center code: "8a1b2c3d4e5f6789-SJC".
        ray = headers.get(RAY_HEADER)
        if not ray or "-" not in ray:
            return None
        return ray.rsplit("-", 1)[1]
