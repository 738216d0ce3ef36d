from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EdgePlatform(str, Enum):
    """Supported edge networks that annotate requests with geolocation."""

    vercel = "vercel"
    cloudflare = "cloudflare"


class EdgeGeolocation(BaseModel):
    """Geolocation as exposed by an edge platform's helper.

    Values are kept exactly as the edge network reported them; latitude and
    longitude stay strings so no precision is lost or invented.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    city: str | None = None
    country: str | None = None
    country_region: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    # Serving edge node, not a geographic region.
    region: str | None = None
