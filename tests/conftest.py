"""
Shared fixtures: a controllable clock, in-memory blob store and record store.
"""
from datetime import datetime, timedelta, timezone

import pytest

from travel_journal.config.settings import Settings, StorageBackend, StorageSettings
from travel_journal.core.blob_store import MemoryBlobStore
from travel_journal.models import Coordinate, Place, Trip
from travel_journal.services.record_store import RecordStore

NOW = datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Callable clock that only moves when told to"""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def test_settings():
    return Settings(
        storage=StorageSettings(backend=StorageBackend.MEMORY),
        log_format="text",
    )


@pytest.fixture
def blob_store():
    return MemoryBlobStore()


@pytest.fixture
def store(blob_store, test_settings, clock):
    return RecordStore(blob_store, app_settings=test_settings, clock=clock)


def make_place(name="Eiffel Tower", country="France", city="Paris", lat=48.8584, lon=2.2945, **kwargs) -> Place:
    return Place(
        name=name,
        country=country,
        city=city,
        coordinate=Coordinate(latitude=lat, longitude=lon),
        **kwargs,
    )


def make_trip(
    country="France",
    start=NOW + timedelta(days=10),
    days=7,
    name="Summer Trip",
    **kwargs,
) -> Trip:
    return Trip(
        name=name,
        destination=make_place(country=country),
        start_date=start,
        end_date=start + timedelta(days=days),
        **kwargs,
    )


@pytest.fixture
def place_factory():
    return make_place


@pytest.fixture
def trip_factory():
    return make_trip
