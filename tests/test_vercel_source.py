from starlette.datastructures import Headers

from edgegeo.edge.vercel import VercelEdgeSource
from edgegeo.models.common import EdgeGeolocation, EdgePlatform
from tests.common import AUSTIN_VERCEL_HEADERS


def test_geolocation_reads_helper_fields() -> None:
    geo = VercelEdgeSource().geolocation(Headers(AUSTIN_VERCEL_HEADERS))

    assert geo == EdgeGeolocation(
        city="Austin",
        country="US",
        country_region="TX",
        latitude="30.2672",
        longitude="-97.7431",
        region="iad1",
    )


def test_geolocation_without_headers_is_empty() -> None:
    """No Vercel headers (local development) means nothing resolved, not a default node."""
    geo = VercelEdgeSource().geolocation(Headers({}))

    assert geo == EdgeGeolocation()
    assert geo.region is None


def test_city_is_percent_decoded() -> None:
    headers = Headers({"x-vercel-ip-city": "S%C3%A3o%20Paulo"})

    assert VercelEdgeSource().geolocation(headers).city == "São Paulo"


def test_empty_city_is_absent() -> None:
    headers = Headers({"x-vercel-ip-city": ""})

    assert VercelEdgeSource().geolocation(headers).city is None


def test_region_is_first_segment_of_request_id() -> None:
    headers = Headers({"x-vercel-id": "cdg1::fra1::abcde-1760800000000-0123456789ab"})

    assert VercelEdgeSource().geolocation(headers).region == "cdg1"


def test_empty_request_id_has_no_region() -> None:
    headers = Headers({"x-vercel-id": ""})

    assert VercelEdgeSource().geolocation(headers).region is None


def test_header_names_are_case_insensitive() -> None:
    headers = Headers({"X-Vercel-IP-Country": "FR", "X-Real-IP": "192.0.2.1"})
    source = VercelEdgeSource()

    assert source.geolocation(headers).country == "FR"
    assert source.ip_address(headers) == "192.0.2.1"


def test_raw_header_fields() -> None:
    headers = Headers(AUSTIN_VERCEL_HEADERS)
    source = VercelEdgeSource()

    assert source.continent(headers) == "NA"
    assert source.timezone(headers) == "America/Chicago"
    assert source.postal_code(headers) == "78701"
    assert source.ip_address(headers) == "198.51.100.7"


def test_ip_ignores_forwarded_for() -> None:
    headers = Headers({"x-forwarded-for": "198.51.100.7, 10.0.0.1"})

    assert VercelEdgeSource().ip_address(headers) is None


def test_platform() -> None:
    assert VercelEdgeSource.platform is EdgePlatform.vercel
