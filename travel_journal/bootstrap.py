"""
Application wiring: configure logging and build the service graph.

The record store is an explicitly constructed instance handed to whatever UI
layer consumes it; nothing here is a module-level singleton.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from travel_journal.config.settings import Settings, get_settings
from travel_journal.core.blob_store import BlobStore, create_blob_store
from travel_journal.core.clock import Clock
from travel_journal.core.logging import configure_logging
from travel_journal.services import (
    LocationService,
    MapsClient,
    RecentSearches,
    RecommendationService,
    RecordStore,
    create_recent_searches,
    create_record_store,
)

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    store: RecordStore
    recent_searches: RecentSearches
    location: LocationService
    recommendations: RecommendationService

    async def aclose(self) -> None:
        await self.location.close()


def bootstrap(
    app_settings: Optional[Settings] = None,
    blob_store: Optional[BlobStore] = None,
    clock: Optional[Clock] = None,
) -> AppContext:
    app_settings = app_settings or get_settings()
    configure_logging(app_settings.log_level.value, app_settings.log_format)
    logger.info("Starting %s v%s", app_settings.app_name, app_settings.app_version)

    if blob_store is None:
        blob_store = create_blob_store(app_settings)

    store = create_record_store(app_settings, blob_store=blob_store, clock=clock)
    location = LocationService(MapsClient(app_settings.maps))
    return AppContext(
        settings=app_settings,
        store=store,
        recent_searches=create_recent_searches(app_settings, blob_store=blob_store),
        location=location,
        recommendations=RecommendationService(location, home_country=app_settings.home_country),
    )
