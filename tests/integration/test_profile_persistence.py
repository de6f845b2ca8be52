"""
Integration tests for profile persistence across store sessions
"""
from datetime import timedelta

import pytest

from travel_journal.bootstrap import bootstrap
from travel_journal.config.settings import Settings, StorageBackend, StorageSettings
from travel_journal.core.blob_store import FileBlobStore
from travel_journal.models import TravelInterest, TravelStyle
from travel_journal.services import create_record_store


@pytest.fixture
def file_settings(tmp_path):
    return Settings(
        _env_file=None,
        storage=StorageSettings(backend=StorageBackend.FILE, data_dir=str(tmp_path / "journal")),
        log_format="text",
    )


def test_full_session_survives_restart(file_settings, clock, place_factory, trip_factory):
    """Everything written in one session is there in the next"""
    store = create_record_store(file_settings, clock=clock)
    assert store.is_new_user

    store.update_profile("Alex", TravelStyle.ADVENTURE, [TravelInterest.NATURE, TravelInterest.PHOTOGRAPHY])
    store.complete_onboarding()
    store.set_location_permission(True)

    louvre = place_factory(name="Louvre", rating=5, tags=["Art"])
    store.add_visited_place(louvre)
    machu = place_factory(name="Machu Picchu", country="Peru", city="Cusco", lat=-13.1631, lon=-72.5450)
    store.add_to_bucket_list(machu)

    trip = trip_factory(country="Peru", start=clock.now + timedelta(days=45), days=9)
    store.add_trip(trip)
    done = trip.checklist[0].model_copy(update={"is_completed": True})
    store.update_checklist_item(trip.id, done)

    reopened = create_record_store(file_settings, clock=clock)

    assert reopened.is_new_user is False
    assert reopened.is_onboarding_complete is True
    assert reopened.profile == store.profile
    restored_trip = reopened.get_trip(trip.id)
    assert len(restored_trip.checklist) == 14
    assert restored_trip.checklist_progress == pytest.approx(1 / 14)
    assert [p.name for p in reopened.get_upcoming_trips()] == [trip.name]


def test_visit_from_bucket_list_persists(file_settings, clock, place_factory):
    store = create_record_store(file_settings, clock=clock)
    place = place_factory(name="Santorini", country="Greece", city="Santorini")
    store.add_to_bucket_list(place)
    clock.advance(days=200)
    store.add_visited_place(place)

    reopened = create_record_store(file_settings, clock=clock)
    profile = reopened.profile

    assert profile.bucket_list == []
    assert [p.id for p in profile.visited_places] == [place.id]
    assert profile.visited_places[0].date_visited == clock.now


def test_corrupt_file_recovers_with_default_profile(file_settings, clock):
    blob_store = FileBlobStore(file_settings.storage.get_data_dir())
    blob_store.save(file_settings.storage.first_launch_key, b"true")
    blob_store.save(file_settings.storage.profile_key, b"\x00\x01garbage")

    store = create_record_store(file_settings, blob_store=blob_store, clock=clock)

    assert store.is_new_user is False
    assert store.profile.visited_places == []
    assert store.complete_onboarding().ok


@pytest.mark.asyncio
async def test_bootstrap_wires_services(file_settings, clock):
    context = bootstrap(file_settings, clock=clock)
    try:
        context.recent_searches.add("Reykjavik")
        context.store.complete_onboarding()

        again = bootstrap(file_settings, clock=clock)
        assert again.recent_searches.items == ["Reykjavik"]
        assert again.store.is_onboarding_complete
        assert context.recommendations.home_country == file_settings.home_country
        await again.aclose()
    finally:
        await context.aclose()
