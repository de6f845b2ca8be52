"""
Profile model: the single user's travel account state
"""
import enum
from typing import List, Optional

from pydantic import Field, ValidationError

from travel_journal.core.exceptions import ProfileDecodeError
from travel_journal.models.base import JournalModel
from travel_journal.models.place import Place
from travel_journal.models.trip import Trip


class TravelStyle(str, enum.Enum):
    ADVENTURE = "Adventure"
    RELAXATION = "Relaxation"
    CULTURAL = "Cultural"
    FOOD_AND_DRINK = "Food & Drink"


class TravelInterest(str, enum.Enum):
    MUSEUMS = "Museums"
    NATURE = "Nature"
    FOOD = "Food"
    NIGHTLIFE = "Nightlife"
    HISTORY = "History"
    ADVENTURE = "Adventure"
    BEACHES = "Beaches"
    ARCHITECTURE = "Architecture"
    SHOPPING = "Shopping"
    PHOTOGRAPHY = "Photography"
    WILDLIFE = "Wildlife"
    FESTIVALS = "Festivals"
    WELLNESS = "Wellness"
    LUXURY = "Luxury"


class Profile(JournalModel):
    """
    Owns the visited places, bucket list and trips.
    Serialized as a single JSON object under the profile blob key.
    """
    name: str = ""
    profile_image_name: Optional[str] = None
    travel_style: TravelStyle = TravelStyle.ADVENTURE
    interests: List[TravelInterest] = Field(default_factory=list)
    has_completed_onboarding: bool = False
    has_location_permission: bool = False
    visited_places: List[Place] = Field(default_factory=list)
    bucket_list: List[Place] = Field(default_factory=list)
    trips: List[Trip] = Field(default_factory=list)

    @property
    def visited_places_count(self) -> int:
        return len(self.visited_places)

    @property
    def countries_visited(self) -> int:
        return len({place.country for place in self.visited_places})

    @property
    def bucket_list_count(self) -> int:
        return len(self.bucket_list)

    @property
    def trips_count(self) -> int:
        return len(self.trips)

    @property
    def total_distance_km(self) -> float:
        """Sum of hops between consecutive visited places, in stored order"""
        if len(self.visited_places) < 2:
            return 0.0
        total_m = 0.0
        for prev, cur in zip(self.visited_places, self.visited_places[1:]):
            total_m += prev.coordinate.distance_to(cur.coordinate)
        return total_m / 1000

    def to_blob(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")

    @classmethod
    def from_blob(cls, data: bytes) -> "Profile":
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise ProfileDecodeError(details={"errors": e.error_count()}) from e
