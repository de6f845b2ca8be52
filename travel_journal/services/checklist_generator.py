"""
Smart checklist generation for new trips.

A fixed rule table; output order is the display order.
"""
from typing import List, Tuple

from travel_journal.models.trip import ChecklistCategory, ChecklistItem, Priority, TripType

DEFAULT_HOME_COUNTRY = "USA"
SHORT_TRIP_MAX_DAYS = 3

_Rule = Tuple[str, ChecklistCategory, Priority]

_DOCUMENTS: List[_Rule] = [
    ("Valid Passport", ChecklistCategory.DOCUMENTS, Priority.HIGH),
    ("Flight Tickets", ChecklistCategory.DOCUMENTS, Priority.HIGH),
    ("Travel Insurance", ChecklistCategory.DOCUMENTS, Priority.MEDIUM),
]
_INTERNATIONAL: List[_Rule] = [
    ("Check Visa Requirements", ChecklistCategory.DOCUMENTS, Priority.HIGH),
]
_HEALTH: List[_Rule] = [
    ("Check Vaccination Requirements", ChecklistCategory.HEALTH, Priority.MEDIUM),
    ("Pack Medications", ChecklistCategory.HEALTH, Priority.MEDIUM),
]
_SHORT_TRIP_LUGGAGE: _Rule = ("Pack Light Luggage", ChecklistCategory.PACKING, Priority.LOW)
_LONG_TRIP_LUGGAGE: _Rule = ("Pack Checked Luggage", ChecklistCategory.PACKING, Priority.MEDIUM)
_PACKING: List[_Rule] = [
    ("Weather-appropriate Clothing", ChecklistCategory.PACKING, Priority.MEDIUM),
    ("Phone Charger", ChecklistCategory.PACKING, Priority.MEDIUM),
]
_PREPARATION: List[_Rule] = [
    ("Exchange Currency", ChecklistCategory.PREPARATION, Priority.MEDIUM),
    ("Notify Bank of Travel", ChecklistCategory.PREPARATION, Priority.MEDIUM),
    ("Download Offline Maps", ChecklistCategory.PREPARATION, Priority.LOW),
]
_ACTIVITIES: List[_Rule] = [
    ("Research Local Attractions", ChecklistCategory.ACTIVITIES, Priority.LOW),
    ("Book Accommodation", ChecklistCategory.ACTIVITIES, Priority.HIGH),
]


def generate_smart_checklist(
    destination_country: str,
    trip_type: TripType,
    duration_days: int,
    home_country: str = DEFAULT_HOME_COUNTRY,
) -> List[ChecklistItem]:
    """
    Build the default checklist for a trip.

    Args:
        destination_country: Country of the trip destination
        trip_type: Trip category (accepted for future rules, no effect today)
        duration_days: Trip length in whole days
        home_country: Traveler's home country; anything else needs a visa check

    Returns:
        13 items for a domestic trip, 14 for an international one
    """
    rules: List[_Rule] = list(_DOCUMENTS)
    if destination_country != home_country:
        rules.extend(_INTERNATIONAL)
    rules.extend(_HEALTH)
    rules.append(_SHORT_TRIP_LUGGAGE if duration_days <= SHORT_TRIP_MAX_DAYS else _LONG_TRIP_LUGGAGE)
    rules.extend(_PACKING)
    rules.extend(_PREPARATION)
    rules.extend(_ACTIVITIES)

    return [
        ChecklistItem(title=title, category=category, priority=priority)
        for title, category, priority in rules
    ]
