"""
Query objects for filtering places and trips
"""
import enum
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from travel_journal.models.trip import TripType


class PlaceFilterKind(str, enum.Enum):
    ALL = "all"
    RECENT = "recent"  # visited this calendar month
    HIGH_RATED = "high_rated"  # rating >= 4
    TAG = "tag"


class TripFilterKind(str, enum.Enum):
    ALL = "all"
    SOLO = "solo"  # at most one traveler
    GROUP = "group"


class PlaceQuery(BaseModel):
    """Search text plus one filter chip for a list of places"""
    search_text: str = ""
    filter: PlaceFilterKind = PlaceFilterKind.ALL
    tag: Optional[str] = Field(None, min_length=1)

    @model_validator(mode="after")
    def tag_required_for_tag_filter(self):
        if self.filter == PlaceFilterKind.TAG and not self.tag:
            raise ValueError("tag is required when filtering by tag")
        return self


class TripQuery(BaseModel):
    """Search text plus a traveler-count or trip-type filter"""
    search_text: str = ""
    filter: Union[TripFilterKind, TripType] = TripFilterKind.ALL
