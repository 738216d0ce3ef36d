from edgegeo.edge.base import BaseEdgeSource
from edgegeo.edge.cloudflare import CloudflareEdgeSource
from edgegeo.edge.vercel import VercelEdgeSource
from edgegeo.models.common import EdgePlatform


class EdgeSourceFactory:
    """Factory for edge metadata sources.

    Given an EdgePlatform enum, returns a concrete source instance.
    """

    SOURCES_MAP: dict[EdgePlatform, type[BaseEdgeSource]] = {
        EdgePlatform.vercel: VercelEdgeSource,
        EdgePlatform.cloudflare: CloudflareEdgeSource,
    }

    def __call__(self, platform: EdgePlatform) -> BaseEdgeSource:
        source_cls = self.SOURCES_MAP[platform]
        return source_cls()
