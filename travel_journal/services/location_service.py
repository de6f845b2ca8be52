"""
Location service - place search, nearby attractions and reverse geocoding.

Lookups are async and never touch the record store; failures degrade to an
empty result or None.
"""
import logging
from typing import Any, Dict, List, Optional

from travel_journal.config.settings import MapsSettings
from travel_journal.core.exceptions import LocationLookupError
from travel_journal.core.geo import bounding_box
from travel_journal.core.validation import ValidationError, normalize_query, validate_span
from travel_journal.models.place import Coordinate, Place
from travel_journal.services.maps_client import MapsClient

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
NEARBY_QUERY = "tourist attractions"
_CITY_FIELDS = ("city", "town", "village", "municipality", "county")


def _city_of(address: Dict[str, Any]) -> Optional[str]:
    for field in _CITY_FIELDS:
        if address.get(field):
            return address[field]
    return None


def place_from_record(record: Dict[str, Any]) -> Optional[Place]:
    """Map a geocoder record to a Place; None when name or position is missing."""
    name = record.get("name") or (record.get("display_name") or "").split(",")[0].strip()
    try:
        coordinate = Coordinate(latitude=float(record["lat"]), longitude=float(record["lon"]))
    except (KeyError, TypeError, ValueError):
        return None
    if not name:
        return None

    address = record.get("address") or {}
    return Place(
        name=name,
        country=address.get("country") or UNKNOWN,
        city=_city_of(address) or UNKNOWN,
        coordinate=coordinate,
    )


class LocationService:
    def __init__(self, maps_client: Optional[MapsClient] = None, maps_settings: Optional[MapsSettings] = None):
        self.settings = maps_settings or (maps_client.settings if maps_client else MapsSettings())
        self.maps = maps_client or MapsClient(self.settings)

    async def close(self):
        await self.maps.close()

    async def _search(self, query: str, center: Optional[Coordinate], span_m: float) -> List[Place]:
        viewbox = None
        if center is not None:
            viewbox = bounding_box(center.latitude, center.longitude, validate_span(span_m))

        records = await self.maps.search(query, viewbox=viewbox)
        places = []
        for record in records:
            place = place_from_record(record)
            if place is not None:
                places.append(place)
        return places

    async def search_places(self, query: str, center: Optional[Coordinate] = None) -> List[Place]:
        """
        Search places by free text, biased to a box around `center` when given.

        Returns an empty list for blank queries and on lookup failure.
        """
        try:
            text = normalize_query(query)
        except ValidationError as e:
            logger.info("Rejected search query: %s", e)
            return []
        if text is None:
            return []

        try:
            return await self._search(text, center, self.settings.search_span_m)
        except LocationLookupError as e:
            logger.warning("Place search failed: %s", e.message)
            return []

    async def find_nearby_places(self, center: Coordinate) -> List[Place]:
        """Tourist attractions around `center`, closest first."""
        try:
            places = await self._search(NEARBY_QUERY, center, self.settings.nearby_span_m)
        except LocationLookupError as e:
            logger.warning("Nearby search failed: %s", e.message)
            return []
        return sorted(places, key=lambda p: center.distance_to(p.coordinate))

    async def reverse_geocode(self, coordinate: Coordinate) -> Optional[str]:
        """'City, Country' for a coordinate, or None."""
        try:
            record = await self.maps.reverse(coordinate.latitude, coordinate.longitude)
        except LocationLookupError as e:
            logger.info("Reverse geocode failed: %s", e.message)
            return None

        address = record.get("address") or {}
        city = _city_of(address) or ""
        country = address.get("country") or ""
        return f"{city}, {country}"
