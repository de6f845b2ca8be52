"""
Trip and checklist models
"""
import enum
import math
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import Field

from travel_journal.models.base import JournalModel, UtcDatetime
from travel_journal.models.place import Place

SECONDS_PER_DAY = 86400


class TripType(str, enum.Enum):
    """Who is travelling"""
    SOLO = "Solo"
    COUPLE = "Couple"
    FAMILY = "Family"
    FRIENDS = "Friends"


class ChecklistCategory(str, enum.Enum):
    DOCUMENTS = "Documents"
    HEALTH = "Health"
    PACKING = "Packing"
    PREPARATION = "Preparation"
    ACTIVITIES = "Activities"


class Priority(str, enum.Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ChecklistItem(JournalModel):
    """One preparation task attached to a trip"""
    id: UUID = Field(default_factory=uuid4)
    title: str
    category: ChecklistCategory
    priority: Priority = Priority.MEDIUM
    is_completed: bool = False
    reminder_date: Optional[UtcDatetime] = None


class Trip(JournalModel):
    """
    A planned or completed journey.
    Duration, checklist progress and departure countdown are derived on read
    and never persisted.
    """
    id: UUID = Field(default_factory=uuid4)
    name: str
    destination: Place
    start_date: UtcDatetime
    end_date: UtcDatetime
    number_of_travelers: int = 1
    trip_type: TripType = TripType.SOLO
    checklist: List[ChecklistItem] = Field(default_factory=list)
    is_completed: bool = False

    @property
    def duration(self) -> int:
        """Whole days from start to end"""
        return (self.end_date - self.start_date).days

    @property
    def checklist_progress(self) -> float:
        if not self.checklist:
            return 0.0
        completed = sum(1 for item in self.checklist if item.is_completed)
        return completed / len(self.checklist)

    def days_until_departure(self, now: datetime) -> int:
        """Floor of days from now to start; negative once the trip has begun."""
        return math.floor((self.start_date - now).total_seconds() / SECONDS_PER_DAY)

    def is_upcoming(self, now: datetime) -> bool:
        return self.start_date > now

    def is_active(self, now: datetime) -> bool:
        return self.start_date <= now <= self.end_date

    def is_past(self, now: datetime) -> bool:
        return self.end_date < now
