"""
Input validation utilities for coordinates, ratings and free text
"""
from typing import Optional


class ValidationError(ValueError):
    """Custom validation error"""
    pass


def validate_latitude(lat: float) -> float:
    """
    Validate latitude coordinate

    Args:
        lat: Latitude value

    Returns:
        Validated latitude

    Raises:
        ValidationError: If latitude is out of range
    """
    if not -90.0 <= lat <= 90.0:
        raise ValidationError(f"Latitude {lat} out of range (must be between -90 and 90)")

    return lat


def validate_longitude(lon: float) -> float:
    """
    Validate longitude coordinate

    Args:
        lon: Longitude value

    Returns:
        Validated longitude

    Raises:
        ValidationError: If longitude is out of range
    """
    if not -180.0 <= lon <= 180.0:
        raise ValidationError(f"Longitude {lon} out of range (must be between -180 and 180)")

    return lon


def validate_rating(rating: Optional[int]) -> Optional[int]:
    """
    Validate a place rating (1-5 stars)

    Args:
        rating: Rating or None

    Returns:
        Validated rating

    Raises:
        ValidationError: If rating is out of range
    """
    if rating is None:
        return None

    if isinstance(rating, bool) or not 1 <= rating <= 5:
        raise ValidationError(f"Rating {rating} out of range (must be 1-5)")

    return rating


def validate_span(span_m: float, max_span: float = 500000.0) -> float:
    """
    Validate a search box edge length (in meters)

    Raises:
        ValidationError: If span is not positive or too large
    """
    if span_m <= 0:
        raise ValidationError("Search span must be positive")

    if span_m > max_span:
        raise ValidationError(f"Search span cannot exceed {max_span:.0f} meters")

    return span_m


def normalize_query(query: Optional[str], max_length: int = 200) -> Optional[str]:
    """
    Trim a free-text search query

    Returns:
        The stripped query, or None when it is blank

    Raises:
        ValidationError: If the query is too long
    """
    if query is None:
        return None

    query = query.strip()
    if not query:
        return None

    if len(query) > max_length:
        raise ValidationError(f"Query too long ({len(query)} chars, max {max_length})")

    return query
