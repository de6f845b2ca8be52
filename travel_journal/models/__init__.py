"""
Domain models for the travel journal.

Persisted records are pydantic models serialized with camelCase field names.
"""

from .place import Coordinate, Place
from .trip import ChecklistCategory, ChecklistItem, Priority, Trip, TripType
from .profile import Profile, TravelInterest, TravelStyle
from .display import DisplayInfo, display_for

__all__ = [
    "Coordinate",
    "Place",
    "ChecklistCategory",
    "ChecklistItem",
    "Priority",
    "Trip",
    "TripType",
    "Profile",
    "TravelInterest",
    "TravelStyle",
    "DisplayInfo",
    "display_for",
]
