"""
Unit tests for the location service over a mocked geocoder transport
"""
import httpx
import pytest

from travel_journal.config.settings import MapsSettings
from travel_journal.core.exceptions import LocationLookupError
from travel_journal.models import Coordinate
from travel_journal.services.location_service import LocationService, place_from_record
from travel_journal.services.maps_client import MapsClient

PARIS = Coordinate(latitude=48.8566, longitude=2.3522)

SEARCH_RESULTS = [
    {
        "name": "Louvre Museum",
        "display_name": "Louvre Museum, Rue de Rivoli, Paris, France",
        "lat": "48.8606",
        "lon": "2.3376",
        "address": {"city": "Paris", "country": "France"},
    },
    {
        "name": "",
        "display_name": "Château de Versailles, Versailles, France",
        "lat": "48.8049",
        "lon": "2.1204",
        "address": {"town": "Versailles", "country": "France"},
    },
    {"name": "No Position", "address": {}},
    {"name": "Somewhere", "lat": "48.86", "lon": "2.35"},
]


def make_service(handler, **settings_overrides) -> LocationService:
    maps_settings = MapsSettings(base_url="https://geo.test", **settings_overrides)
    client = httpx.AsyncClient(base_url=maps_settings.base_url, transport=httpx.MockTransport(handler))
    return LocationService(MapsClient(maps_settings, client=client))


class Recorder:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


def test_place_from_record_defaults():
    place = place_from_record(SEARCH_RESULTS[3])
    assert place.name == "Somewhere"
    assert place.city == "Unknown"
    assert place.country == "Unknown"


@pytest.mark.asyncio
async def test_search_places_maps_records():
    """Records without a position are dropped, missing names fall back to display name"""
    handler = Recorder(SEARCH_RESULTS)
    service = make_service(handler)

    places = await service.search_places("museum")

    assert [p.name for p in places] == ["Louvre Museum", "Château de Versailles", "Somewhere"]
    assert places[0].city == "Paris"
    assert places[1].city == "Versailles"
    assert places[0].coordinate.latitude == pytest.approx(48.8606)
    params = handler.requests[0].url.params
    assert params["q"] == "museum"
    assert "viewbox" not in params
    await service.close()


@pytest.mark.asyncio
async def test_search_places_with_center_sends_viewbox():
    handler = Recorder([])
    service = make_service(handler)

    await service.search_places("cafe", center=PARIS)

    params = handler.requests[0].url.params
    min_lon, min_lat, max_lon, max_lat = (float(v) for v in params["viewbox"].split(","))
    assert min_lon < PARIS.longitude < max_lon
    assert min_lat < PARIS.latitude < max_lat
    # 50 km box is roughly 0.45 degrees of latitude
    assert max_lat - min_lat == pytest.approx(0.449, abs=0.01)
    assert params["bounded"] == "1"


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["", "   ", None, "x" * 500])
async def test_blank_or_oversized_query_skips_lookup(query):
    handler = Recorder(SEARCH_RESULTS)
    service = make_service(handler)

    assert await service.search_places(query) == []
    assert handler.requests == []


@pytest.mark.asyncio
async def test_search_failure_returns_empty():
    service = make_service(Recorder({"error": "down"}, status_code=503))
    assert await service.search_places("museum") == []


@pytest.mark.asyncio
async def test_transport_error_returns_empty():
    def handler(request):
        raise httpx.ConnectError("no network", request=request)

    service = make_service(handler)
    assert await service.search_places("museum") == []


@pytest.mark.asyncio
async def test_find_nearby_sorted_by_distance():
    far = {"name": "Far", "lat": "48.90", "lon": "2.40", "address": {}}
    near = {"name": "Near", "lat": "48.857", "lon": "2.353", "address": {}}
    handler = Recorder([far, near])
    service = make_service(handler)

    places = await service.find_nearby_places(PARIS)

    assert [p.name for p in places] == ["Near", "Far"]
    assert handler.requests[0].url.params["q"] == "tourist attractions"


@pytest.mark.asyncio
async def test_reverse_geocode():
    handler = Recorder({"address": {"city": "Paris", "country": "France"}})
    service = make_service(handler)

    assert await service.reverse_geocode(PARIS) == "Paris, France"
    assert handler.requests[0].url.path == "/reverse"


@pytest.mark.asyncio
async def test_reverse_geocode_no_result():
    service = make_service(Recorder({"error": "Unable to geocode"}))
    assert await service.reverse_geocode(PARIS) is None


@pytest.mark.asyncio
async def test_maps_client_rejects_non_list_search_payload():
    maps_settings = MapsSettings(base_url="https://geo.test")
    client = httpx.AsyncClient(
        base_url=maps_settings.base_url,
        transport=httpx.MockTransport(Recorder({"unexpected": True})),
    )
    maps = MapsClient(maps_settings, client=client)

    with pytest.raises(LocationLookupError):
        await maps.search("anything")
