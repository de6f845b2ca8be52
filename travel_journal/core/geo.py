"""Great-circle helpers."""
import math
from typing import Tuple

EARTH_RADIUS_M = 6371000
METERS_PER_DEGREE_LAT = 111320.0


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in meters between two lat/lon points."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi, dlam = math.radians(lat2 - lat1), math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bounding_box(lat: float, lon: float, span_m: float) -> Tuple[float, float, float, float]:
    """
    Box of `span_m` meters edge centered on a point.

    Returns (min_lon, min_lat, max_lon, max_lat), clamped to valid ranges.
    """
    half = span_m / 2
    dlat = half / METERS_PER_DEGREE_LAT
    # cos() collapses at the poles
    dlon = half / (METERS_PER_DEGREE_LAT * max(math.cos(math.radians(lat)), 0.01))
    return (
        max(lon - dlon, -180.0),
        max(lat - dlat, -90.0),
        min(lon + dlon, 180.0),
        min(lat + dlat, 90.0),
    )
