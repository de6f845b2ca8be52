"""Geocoding provider client (Nominatim-compatible search and reverse APIs)."""
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from travel_journal.config.settings import MapsSettings
from travel_journal.core.exceptions import ErrorCode, LocationLookupError

logger = logging.getLogger(__name__)


class MapsClient:
    """Thin async wrapper returning the provider's raw JSON records"""

    def __init__(self, maps_settings: Optional[MapsSettings] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = maps_settings or MapsSettings()
        self.client = client or httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout_seconds,
            headers={"User-Agent": self.settings.user_agent},
        )

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise LocationLookupError(f"Geocoder request to {path} failed: {e}") from e
        except ValueError as e:
            raise LocationLookupError(f"Geocoder returned invalid JSON for {path}") from e

    async def search(
        self,
        query: str,
        viewbox: Optional[Tuple[float, float, float, float]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Free-text place search.

        Args:
            query: Natural language query ("tourist attractions", "Louvre")
            viewbox: Optional (min_lon, min_lat, max_lon, max_lat) restriction
            limit: Max results (defaults to settings)

        Returns:
            Raw result records
        """
        params: Dict[str, Any] = {
            "q": query,
            "format": "jsonv2",
            "addressdetails": 1,
            "limit": limit or self.settings.max_results,
        }
        if viewbox is not None:
            params["viewbox"] = ",".join(f"{v:.6f}" for v in viewbox)
            params["bounded"] = 1

        data = await self._get_json("/search", params)
        if not isinstance(data, list):
            raise LocationLookupError("Unexpected search payload", details={"type": type(data).__name__})
        logger.debug("Geocoder search returned %d results", len(data))
        return data

    async def reverse(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Reverse-geocode a coordinate into an address record"""
        data = await self._get_json(
            "/reverse",
            {"lat": latitude, "lon": longitude, "format": "jsonv2", "addressdetails": 1},
        )
        if not isinstance(data, dict) or "error" in data:
            raise LocationLookupError(
                "No address for coordinate",
                error_code=ErrorCode.LOCATION_NO_RESULTS,
                details={"latitude": latitude, "longitude": longitude},
            )
        return data
