"""
Place model for visited and bucket-list points of interest
"""
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from travel_journal.core.geo import haversine_m
from travel_journal.core.validation import validate_latitude, validate_longitude, validate_rating
from travel_journal.models.base import JournalModel, UtcDatetime


class Coordinate(JournalModel):
    """WGS84 latitude/longitude pair"""
    latitude: float
    longitude: float

    @field_validator("latitude")
    @classmethod
    def check_latitude(cls, v: float) -> float:
        return validate_latitude(v)

    @field_validator("longitude")
    @classmethod
    def check_longitude(cls, v: float) -> float:
        return validate_longitude(v)

    def distance_to(self, other: "Coordinate") -> float:
        """Great-circle distance in meters"""
        return haversine_m(self.latitude, self.longitude, other.latitude, other.longitude)


class Place(JournalModel):
    """
    A point of interest with visitation metadata.
    The id is minted once at creation and identifies the place in both the
    visited list and the bucket list.
    """
    id: UUID = Field(default_factory=uuid4)
    name: str
    country: str
    city: str
    coordinate: Coordinate
    date_visited: Optional[UtcDatetime] = None
    rating: Optional[int] = None
    notes: str = ""
    photos: List[str] = Field(default_factory=list)  # photo file names
    tags: List[str] = Field(default_factory=list)
    is_visited: bool = False
    is_in_bucket_list: bool = False

    @field_validator("rating")
    @classmethod
    def check_rating(cls, v: Optional[int]) -> Optional[int]:
        return validate_rating(v)
