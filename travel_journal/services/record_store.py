"""
Record Store - single source of truth for the user's profile and travel records
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from uuid import UUID

from travel_journal.config.settings import Settings, get_settings
from travel_journal.core.blob_store import BlobStore
from travel_journal.core.clock import Clock, as_utc, utc_now
from travel_journal.core.exceptions import BlobStoreError, ErrorCode, ProfileDecodeError
from travel_journal.models.place import Place
from travel_journal.models.profile import Profile, TravelInterest, TravelStyle
from travel_journal.models.trip import ChecklistItem, Trip
from travel_journal.services.checklist_generator import generate_smart_checklist

logger = logging.getLogger(__name__)

_DISTANT_PAST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class SaveResult:
    """Outcome of the write-through persist that follows every mutation"""
    ok: bool
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    def __bool__(self) -> bool:
        return self.ok


class RecordStore:
    """
    Owns the Profile aggregate and persists it after every mutation.

    Operations targeting a missing id are silent no-ops. Persistence failures
    never raise: they are logged and reported through the returned SaveResult
    while the in-memory state stays authoritative for the session.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        app_settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
    ):
        self.blob_store = blob_store
        self.settings = app_settings or get_settings()
        source = clock or utc_now
        self._clock: Clock = lambda: as_utc(source())
        self._profile_key = self.settings.storage.profile_key
        self._first_launch_key = self.settings.storage.first_launch_key

        self._profile = self._load_profile()
        self.last_save_result: Optional[SaveResult] = None

        self.is_new_user = not self._has_launched_before()
        if self.is_new_user:
            self._mark_launched()

    # ------------------------------------------------------------------
    # Loading / saving
    # ------------------------------------------------------------------

    def _load_profile(self) -> Profile:
        try:
            data = self.blob_store.load(self._profile_key)
        except BlobStoreError as e:
            logger.warning("Could not read stored profile, starting empty: %s", e.message)
            return Profile()

        if data is None:
            logger.info("No stored profile found, starting empty")
            return Profile()

        try:
            profile = Profile.from_blob(data)
        except ProfileDecodeError as e:
            logger.warning("Stored profile is corrupt, starting empty: %s", e.message, extra=e.details)
            return Profile()

        logger.debug(
            "Loaded profile",
            extra={
                "visited": profile.visited_places_count,
                "bucket_list": profile.bucket_list_count,
                "trips": profile.trips_count,
            },
        )
        return profile

    def _has_launched_before(self) -> bool:
        try:
            data = self.blob_store.load(self._first_launch_key)
        except BlobStoreError as e:
            logger.warning("Could not read first-launch flag: %s", e.message)
            return False
        if data is None:
            return False
        try:
            return json.loads(data) is True
        except ValueError:
            return False

    def _mark_launched(self) -> None:
        try:
            self.blob_store.save(self._first_launch_key, b"true")
        except BlobStoreError as e:
            logger.warning("Could not record first launch: %s", e.message)

    def save(self) -> SaveResult:
        """Persist the current profile to the blob store."""
        try:
            data = self._profile.to_blob()
        except ValueError as e:
            result = SaveResult(ok=False, error=str(e), error_code=ErrorCode.PROFILE_ENCODE_FAILED)
        else:
            try:
                self.blob_store.save(self._profile_key, data)
                result = SaveResult(ok=True)
            except BlobStoreError as e:
                result = SaveResult(ok=False, error=e.message, error_code=e.error_code)

        if not result.ok:
            logger.warning("Profile not persisted: %s", result.error)
        self.last_save_result = result
        return result

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    @property
    def profile(self) -> Profile:
        """Snapshot of the profile; mutate through the store methods."""
        return self._profile.model_copy(deep=True)

    @property
    def is_onboarding_complete(self) -> bool:
        return self._profile.has_completed_onboarding

    def update_profile(
        self,
        name: str,
        travel_style: TravelStyle,
        interests: Iterable[TravelInterest],
    ) -> SaveResult:
        """Overwrite name, travel style and interests. Empty names are kept as-is."""
        self._profile.name = name
        self._profile.travel_style = TravelStyle(travel_style)
        self._profile.interests = [TravelInterest(i) for i in interests]
        return self.save()

    def complete_onboarding(self) -> SaveResult:
        self._profile.has_completed_onboarding = True
        return self.save()

    def set_location_permission(self, granted: bool) -> SaveResult:
        self._profile.has_location_permission = bool(granted)
        return self.save()

    # ------------------------------------------------------------------
    # Places
    # ------------------------------------------------------------------

    def add_visited_place(self, place: Place) -> SaveResult:
        """
        Mark a place visited now.

        Any bucket-list entry with the same id is removed; a place already in
        the visited list is not duplicated.
        """
        profile = self._profile
        profile.bucket_list = [p for p in profile.bucket_list if p.id != place.id]

        if not any(p.id == place.id for p in profile.visited_places):
            visited = place.model_copy(
                deep=True,
                update={"is_visited": True, "is_in_bucket_list": False, "date_visited": self._clock()},
            )
            profile.visited_places.append(visited)
            logger.debug("Added visited place %s (%s)", place.name, place.id)

        return self.save()

    def add_to_bucket_list(self, place: Place) -> SaveResult:
        """
        Add a place to the bucket list unless it is already there or visited.

        Ratings only mean something for visited places, so the stored entry
        drops any rating.
        """
        profile = self._profile
        already_listed = any(p.id == place.id for p in profile.bucket_list)
        already_visited = any(p.id == place.id for p in profile.visited_places)

        if not already_listed and not already_visited:
            wanted = place.model_copy(deep=True, update={"is_in_bucket_list": True, "rating": None})
            profile.bucket_list.append(wanted)
            logger.debug("Added bucket list place %s (%s)", place.name, place.id)

        return self.save()

    def remove_from_bucket_list(self, place_id: UUID) -> SaveResult:
        self._profile.bucket_list = [p for p in self._profile.bucket_list if p.id != place_id]
        return self.save()

    def get_recent_visited_places(self, limit: Optional[int] = None) -> List[Place]:
        """Visited places, newest visit first; undated places sort last."""
        if limit is None:
            limit = self.settings.recent_visited_limit
        ordered = sorted(
            self._profile.visited_places,
            key=lambda p: p.date_visited or _DISTANT_PAST,
            reverse=True,
        )
        return [p.model_copy(deep=True) for p in ordered[:max(limit, 0)]]

    # ------------------------------------------------------------------
    # Trips
    # ------------------------------------------------------------------

    def _find_trip_index(self, trip_id: UUID) -> Optional[int]:
        for index, trip in enumerate(self._profile.trips):
            if trip.id == trip_id:
                return index
        return None

    def add_trip(self, trip: Trip) -> SaveResult:
        """
        Generate the smart checklist onto `trip` and store a copy of it.

        The generator sees the trip length in whole days, at least 1.
        """
        trip.checklist = generate_smart_checklist(
            trip.destination.country,
            trip.trip_type,
            max(1, trip.duration),
            home_country=self.settings.home_country,
        )
        self._profile.trips.append(trip.model_copy(deep=True))
        logger.debug(
            "Added trip %s to %s with %d checklist items",
            trip.name,
            trip.destination.country,
            len(trip.checklist),
        )
        return self.save()

    def update_trip(self, trip: Trip) -> SaveResult:
        index = self._find_trip_index(trip.id)
        if index is not None:
            self._profile.trips[index] = trip.model_copy(deep=True)
        return self.save()

    def delete_trip(self, trip_id: UUID) -> SaveResult:
        self._profile.trips = [t for t in self._profile.trips if t.id != trip_id]
        return self.save()

    def update_checklist_item(self, trip_id: UUID, item: ChecklistItem) -> SaveResult:
        index = self._find_trip_index(trip_id)
        if index is not None:
            checklist = self._profile.trips[index].checklist
            for pos, existing in enumerate(checklist):
                if existing.id == item.id:
                    checklist[pos] = item.model_copy(deep=True)
                    break
        return self.save()

    def get_trip(self, trip_id: UUID) -> Optional[Trip]:
        index = self._find_trip_index(trip_id)
        if index is None:
            return None
        return self._profile.trips[index].model_copy(deep=True)

    def get_upcoming_trips(self) -> List[Trip]:
        """Trips starting strictly after now, soonest first."""
        now = self._clock()
        upcoming = [t for t in self._profile.trips if t.is_upcoming(now)]
        upcoming.sort(key=lambda t: t.start_date)
        return [t.model_copy(deep=True) for t in upcoming]

    def get_active_trips(self) -> List[Trip]:
        """Trips with start <= now <= end, in stored order."""
        now = self._clock()
        return [t.model_copy(deep=True) for t in self._profile.trips if t.is_active(now)]
