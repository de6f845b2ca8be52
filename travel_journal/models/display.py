"""
Presentation metadata for the closed enums.

Kept out of the enums themselves so the store and its models stay free of
UI concerns; callers look entries up by enum member.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from travel_journal.models.profile import TravelInterest, TravelStyle
from travel_journal.models.trip import ChecklistCategory, Priority, TripType


@dataclass(frozen=True)
class DisplayInfo:
    icon: str
    color: str
    description: Optional[str] = None


TRAVEL_STYLE_DISPLAY: Dict[TravelStyle, DisplayInfo] = {
    TravelStyle.ADVENTURE: DisplayInfo("mountain.2.fill", "orange", "Seeking thrills and outdoor activities"),
    TravelStyle.RELAXATION: DisplayInfo("beach.umbrella.fill", "blue", "Preferring peaceful and restorative experiences"),
    TravelStyle.CULTURAL: DisplayInfo("building.columns.fill", "brown", "Interested in history, art, and local traditions"),
    TravelStyle.FOOD_AND_DRINK: DisplayInfo("fork.knife", "red", "Exploring culinary experiences and local cuisine"),
}

TRAVEL_INTEREST_DISPLAY: Dict[TravelInterest, DisplayInfo] = {
    TravelInterest.MUSEUMS: DisplayInfo("building.columns", "blue", "Explore art, history, and science"),
    TravelInterest.NATURE: DisplayInfo("leaf.fill", "green", "Discover natural landscapes and wildlife"),
    TravelInterest.FOOD: DisplayInfo("fork.knife", "orange", "Indulge in culinary delights and local cuisine"),
    TravelInterest.NIGHTLIFE: DisplayInfo("moon.stars.fill", "purple", "Experience vibrant evenings and entertainment"),
    TravelInterest.HISTORY: DisplayInfo("book.fill", "brown", "Delve into the past and historical sites"),
    TravelInterest.ADVENTURE: DisplayInfo("figure.hiking", "red", "Seek thrilling activities and outdoor sports"),
    TravelInterest.BEACHES: DisplayInfo("beach.umbrella", "cyan", "Relax by the sea and enjoy coastal views"),
    TravelInterest.ARCHITECTURE: DisplayInfo("building.2.fill", "gray", "Admire unique buildings and urban design"),
    TravelInterest.SHOPPING: DisplayInfo("bag.fill", "pink", "Discover local markets and retail therapy"),
    TravelInterest.PHOTOGRAPHY: DisplayInfo("camera.fill", "yellow", "Capture beautiful moments and scenery"),
    TravelInterest.WILDLIFE: DisplayInfo("pawprint.fill", "mint", "Observe animals in their natural habitats"),
    TravelInterest.FESTIVALS: DisplayInfo("party.popper.fill", "indigo", "Immerse in cultural celebrations and events"),
    TravelInterest.WELLNESS: DisplayInfo("heart.circle.fill", "teal", "Focus on health, relaxation, and well-being"),
    TravelInterest.LUXURY: DisplayInfo("crown.fill", "purple", "Enjoy high-end experiences and exclusive services"),
}

TRIP_TYPE_DISPLAY: Dict[TripType, DisplayInfo] = {
    TripType.SOLO: DisplayInfo("person.fill", "blue"),
    TripType.COUPLE: DisplayInfo("heart.fill", "pink"),
    TripType.FAMILY: DisplayInfo("house.fill", "green"),
    TripType.FRIENDS: DisplayInfo("person.3.fill", "orange"),
}

CHECKLIST_CATEGORY_DISPLAY: Dict[ChecklistCategory, DisplayInfo] = {
    ChecklistCategory.DOCUMENTS: DisplayInfo("doc.text.fill", "blue"),
    ChecklistCategory.HEALTH: DisplayInfo("cross.fill", "red"),
    ChecklistCategory.PACKING: DisplayInfo("bag.fill", "green"),
    ChecklistCategory.PREPARATION: DisplayInfo("creditcard.fill", "orange"),
    ChecklistCategory.ACTIVITIES: DisplayInfo("ticket.fill", "purple"),
}

PRIORITY_DISPLAY: Dict[Priority, DisplayInfo] = {
    Priority.HIGH: DisplayInfo("exclamationmark.3", "red"),
    Priority.MEDIUM: DisplayInfo("exclamationmark.2", "orange"),
    Priority.LOW: DisplayInfo("exclamationmark", "green"),
}

_TABLES = {
    TravelStyle: TRAVEL_STYLE_DISPLAY,
    TravelInterest: TRAVEL_INTEREST_DISPLAY,
    TripType: TRIP_TYPE_DISPLAY,
    ChecklistCategory: CHECKLIST_CATEGORY_DISPLAY,
    Priority: PRIORITY_DISPLAY,
}


def display_for(member) -> DisplayInfo:
    """Look up display metadata for any supported enum member."""
    try:
        return _TABLES[type(member)][member]
    except KeyError:
        raise KeyError(f"No display metadata for {member!r}") from None
