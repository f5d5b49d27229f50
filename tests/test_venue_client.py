import copy

import httpx
import pytest

from dopc.models.domain import Coordinate, CutoffRange, PricedRange
from dopc.services.errors import FetchError
from dopc.services.venues.client import VenueApiClient

BASE_URL = "https://venues.test/v1/venues"

STATIC_PAYLOAD = {"venue_raw": {"location": {"coordinates": [24.93087, 60.17094]}}}
DYNAMIC_PAYLOAD = {
    "venue_raw": {
        "delivery_specs": {
            "order_minimum_no_surcharge": 1000,
            "delivery_pricing": {
                "base_price": 190,
                "distance_ranges": [
                    {"min": 0, "max": 500, "a": 0, "b": 0, "flag": None},
                    {"min": 500, "max": 1000, "a": 100, "b": 1, "flag": None},
                    {"min": 1000, "max": 0, "a": 0, "b": 0, "flag": None},
                ],
            },
        }
    }
}


def _client(handler, max_retries: int = 0) -> VenueApiClient:
    return VenueApiClient(
        base_url=BASE_URL,
        timeout=1.0,
        max_retries=max_retries,
        backoff_seconds=0.0,
        transport=httpx.MockTransport(handler),
    )


def _routes(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/venue-one/static"):
        return httpx.Response(200, json=STATIC_PAYLOAD)
    if request.url.path.endswith("/venue-one/dynamic"):
        return httpx.Response(200, json=DYNAMIC_PAYLOAD)
    return httpx.Response(404, json={"error": "not found"})


def test_static_data_decodes_lon_lat_order():
    location = _client(_routes).get_static_data("venue-one")
    assert location == Coordinate(latitude=60.17094, longitude=24.93087)


def test_dynamic_data_decodes_ranges_in_order():
    pricing = _client(_routes).get_dynamic_data("venue-one")

    assert pricing.base_price == 190
    assert pricing.order_minimum_no_surcharge == 1000
    assert pricing.ranges == (
        PricedRange(min=0, max=500, a=0, b=0),
        PricedRange(min=500, max=1000, a=100, b=1),
        CutoffRange(min=1000),
    )


def test_request_urls_use_slug_and_endpoint():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return _routes(request)

    client = _client(handler)
    client.get_static_data("venue-one")
    client.get_dynamic_data("venue-one")
    assert seen == [f"{BASE_URL}/venue-one/static", f"{BASE_URL}/venue-one/dynamic"]


def test_not_found_is_not_retried():
    attempts = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        return httpx.Response(404)

    with pytest.raises(FetchError, match="status 404"):
        _client(handler, max_retries=3).get_static_data("missing")
    assert len(attempts) == 1


def test_server_errors_are_retried_then_succeed():
    attempts = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        if len(attempts) < 3:
            return httpx.Response(503)
        return httpx.Response(200, json=STATIC_PAYLOAD)

    location = _client(handler, max_retries=2).get_static_data("venue-one")
    assert location.latitude == 60.17094
    assert len(attempts) == 3


def test_server_errors_exhaust_retries():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    with pytest.raises(FetchError, match="status 500"):
        _client(handler, max_retries=1).get_dynamic_data("venue-one")


def test_timeout_becomes_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(FetchError, match="timed out") as excinfo:
        _client(handler).get_static_data("venue-one")
    assert isinstance(excinfo.value.__cause__, httpx.TimeoutException)


def test_connection_error_becomes_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError, match="Failed to call static endpoint"):
        _client(handler).get_static_data("venue-one")


def test_invalid_json_becomes_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(FetchError, match="decode"):
        _client(handler).get_static_data("venue-one")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"venue_raw": {"location": {"coordinates": [24.9]}}},
        {"venue_raw": {"location": {"coordinates": [24.9, 95.0]}}},
    ],
)
def test_malformed_static_payload_becomes_fetch_error(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(FetchError, match="Malformed static payload"):
        _client(handler).get_static_data("venue-one")


def test_malformed_dynamic_payload_becomes_fetch_error():
    payload = {"venue_raw": {"delivery_specs": {"order_minimum_no_surcharge": 1000}}}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(FetchError, match="Malformed dynamic payload"):
        _client(handler).get_dynamic_data("venue-one")


@pytest.mark.parametrize(
    "venue_slug, raw_path",
    [
        ("other/static#", b"/v1/venues/other%2Fstatic%23/dynamic"),
        ("a?admin=1", b"/v1/venues/a%3Fadmin%3D1/dynamic"),
        ("../../secret#", b"/v1/venues/..%2F..%2Fsecret%23/dynamic"),
    ],
)
def test_slug_is_encoded_as_single_path_segment(venue_slug, raw_path):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json=DYNAMIC_PAYLOAD)

    _client(handler).get_dynamic_data(venue_slug)

    assert seen[0].raw_path == raw_path
    assert seen[0].query == b""


@pytest.mark.parametrize("venue_slug", [".", ".."])
def test_dot_segment_slug_is_rejected(venue_slug):
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request to {request.url}")

    with pytest.raises(FetchError, match="Invalid venue slug"):
        _client(handler).get_static_data(venue_slug)


def test_static_position_with_altitude_is_accepted():
    payload = {"venue_raw": {"location": {"coordinates": [24.93087, 60.17094, 12.5]}}}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    location = _client(handler).get_static_data("venue-one")
    assert location == Coordinate(latitude=60.17094, longitude=24.93087)


@pytest.mark.parametrize("flag", [7, {"kind": "peak"}, ["a"], "surge"])
def test_range_flag_of_any_type_is_ignored(flag):
    payload = copy.deepcopy(DYNAMIC_PAYLOAD)
    for item in payload["venue_raw"]["delivery_specs"]["delivery_pricing"]["distance_ranges"]:
        item["flag"] = flag

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    pricing = _client(handler).get_dynamic_data("venue-one")
    assert pricing.ranges[-1] == CutoffRange(min=1000)
