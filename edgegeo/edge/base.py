from abc import ABC, abstractmethod

from starlette.datastructures import Headers

from edgegeo.models.common import EdgeGeolocation, EdgePlatform


class BaseEdgeSource(ABC):
    """Abstract base for edge network metadata sources.

    The edge network resolves the caller's location before the request reaches
    us and exposes it as request headers. Concrete implementations know one
    platform's header contract and expose it through three accessors: a
    geolocation helper (six fields), raw header lookups for the fields the
    helper does not cover, and the caller's IP.
    """

    platform: EdgePlatform

    # Raw headers for the fields the platform helper does not expose.
    continent_header: str
    timezone_header: str
    postal_code_header: str

    @abstractmethod
    def geolocation(self, headers: Headers) -> EdgeGeolocation:
        """Return the platform helper's view of the request's geolocation."""
        raise NotImplementedError

    @abstractmethod
    def ip_address(self, headers: Headers) -> str | None:
        """Return the caller's public IP as reported by the edge network."""
        raise NotImplementedError

    def continent(self, headers: Headers) -> str | None:
        return headers.get(self.continent_header)

    def timezone(self, headers: Headers) -> str | None:
        return headers.get(self.timezone_header)

    def postal_code(self, headers: Headers) -> str | None:
        return headers.get(self.postal_code_header)
