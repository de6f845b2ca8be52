"""
Recommendations: random destination ideas, interest highlights and nearby
attractions for the dashboard.
"""
import enum
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from travel_journal.models.display import DisplayInfo, display_for
from travel_journal.models.place import Coordinate, Place
from travel_journal.models.profile import TravelInterest
from travel_journal.services.checklist_generator import DEFAULT_HOME_COUNTRY
from travel_journal.services.location_service import LocationService


class Season(str, enum.Enum):
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"
    ANY = "Any"


class TripDuration(str, enum.Enum):
    WEEKEND = "Weekend"
    WEEK = "Week"
    MONTH = "Month"
    ANY = "Any"


@dataclass
class RandomDestinationPreferences:
    domestic_only: bool = False
    season: Season = Season.ANY
    duration: TripDuration = TripDuration.WEEK
    interests: List[TravelInterest] = field(default_factory=list)


# (name, country, city, latitude, longitude)
POPULAR_DESTINATIONS: List[Tuple[str, str, str, float, float]] = [
    ("Machu Picchu", "Peru", "Cusco", -13.1631, -72.5450),
    ("Great Wall of China", "China", "Beijing", 40.4319, 116.5704),
    ("Santorini", "Greece", "Santorini", 36.3932, 25.4615),
    ("Bali", "Indonesia", "Denpasar", -8.3405, 115.0920),
    ("Iceland Blue Lagoon", "Iceland", "Reykjavik", 63.8804, -22.4495),
    ("Safari Kenya", "Kenya", "Nairobi", -1.2921, 36.8219),
    ("Taj Mahal", "India", "Agra", 27.1751, 78.0421),
    ("Northern Lights Norway", "Norway", "Tromsø", 69.6492, 18.9553),
    ("Grand Canyon", "USA", "Arizona", 36.1069, -112.1129),
    ("Cherry Blossoms Japan", "Japan", "Tokyo", 35.6762, 139.6503),
]


def popular_destinations() -> List[Place]:
    """Fresh Place objects for the catalogue (new ids on every call)."""
    return [
        Place(name=name, country=country, city=city,
              coordinate=Coordinate(latitude=lat, longitude=lon))
        for name, country, city, lat, lon in POPULAR_DESTINATIONS
    ]


def current_season(now: datetime) -> Season:
    if 3 <= now.month <= 5:
        return Season.SPRING
    if 6 <= now.month <= 8:
        return Season.SUMMER
    if 9 <= now.month <= 11:
        return Season.AUTUMN
    return Season.WINTER


class RecommendationService:
    def __init__(
        self,
        location_service: Optional[LocationService] = None,
        home_country: str = DEFAULT_HOME_COUNTRY,
        rng: Optional[random.Random] = None,
    ):
        self.location_service = location_service
        self.home_country = home_country
        self.rng = rng or random.Random()

    def _candidates(self, preferences: RandomDestinationPreferences) -> List[Place]:
        places = popular_destinations()
        if preferences.domestic_only:
            places = [p for p in places if p.country == self.home_country]
        return places

    def random_destination(self, preferences: Optional[RandomDestinationPreferences] = None) -> Optional[Place]:
        candidates = self._candidates(preferences or RandomDestinationPreferences())
        if not candidates:
            return None
        return self.rng.choice(candidates)

    def random_destinations(
        self,
        count: int,
        preferences: Optional[RandomDestinationPreferences] = None,
    ) -> List[Place]:
        """Up to `count` distinct destinations."""
        candidates = self._candidates(preferences or RandomDestinationPreferences())
        return self.rng.sample(candidates, min(max(count, 0), len(candidates)))

    def interest_highlights(self, interests: List[TravelInterest], limit: int = 4) -> List[Tuple[TravelInterest, DisplayInfo]]:
        return [(interest, display_for(interest)) for interest in interests[:limit]]

    async def nearby_highlights(self, center: Coordinate, limit: int = 5) -> List[Place]:
        if self.location_service is None:
            return []
        places = await self.location_service.find_nearby_places(center)
        return places[:limit]
