# Business logic services

from travel_journal.config.settings import Settings, get_settings
from travel_journal.core.blob_store import BlobStore, create_blob_store
from travel_journal.core.clock import Clock

from .checklist_generator import generate_smart_checklist
from .record_store import RecordStore, SaveResult
from .filters import filter_places, filter_trips, sort_places, split_trips
from .maps_client import MapsClient
from .location_service import LocationService
from .recommendation_service import (
    RecommendationService,
    RandomDestinationPreferences,
    Season,
    TripDuration,
    current_season,
)
from .search_history import RecentSearches


# Factory functions for dependency injection
def create_record_store(
    app_settings: Settings = None,
    blob_store: BlobStore = None,
    clock: Clock = None,
) -> RecordStore:
    """
    Factory function to create a RecordStore with its configured backend.

    Args:
        app_settings: Optional settings (uses global settings if None)
        blob_store: Optional blob store (built from settings if None)
        clock: Optional clock returning aware datetimes

    Returns:
        Configured RecordStore instance
    """
    app_settings = app_settings or get_settings()
    if blob_store is None:
        blob_store = create_blob_store(app_settings)
    return RecordStore(blob_store, app_settings=app_settings, clock=clock)


def create_recent_searches(app_settings: Settings = None, blob_store: BlobStore = None) -> RecentSearches:
    app_settings = app_settings or get_settings()
    if blob_store is None:
        blob_store = create_blob_store(app_settings)
    return RecentSearches(
        blob_store,
        key=app_settings.storage.recent_searches_key,
        limit=app_settings.recent_search_limit,
    )


__all__ = [
    'generate_smart_checklist',
    'RecordStore',
    'SaveResult',
    'create_record_store',
    'create_recent_searches',
    'filter_places',
    'filter_trips',
    'sort_places',
    'split_trips',
    'MapsClient',
    'LocationService',
    'RecommendationService',
    'RandomDestinationPreferences',
    'Season',
    'TripDuration',
    'current_season',
    'RecentSearches',
]
