"""
Text search and filter chips over places and trips.

Pure functions over lists; nothing here touches the record store.
"""
from datetime import datetime
from typing import Iterable, List, Tuple

from travel_journal.models.place import Place
from travel_journal.models.trip import Trip, TripType
from travel_journal.schemas.filters import PlaceFilterKind, PlaceQuery, TripFilterKind, TripQuery

HIGH_RATING_THRESHOLD = 4


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def place_matches_text(place: Place, text: str) -> bool:
    if not text:
        return True
    return (
        _contains(place.name, text)
        or _contains(place.city, text)
        or _contains(place.country, text)
        or any(_contains(tag, text) for tag in place.tags)
    )


def _place_passes_filter(place: Place, query: PlaceQuery, now: datetime) -> bool:
    if query.filter == PlaceFilterKind.RECENT:
        visited = place.date_visited
        return visited is not None and (visited.year, visited.month) == (now.year, now.month)
    if query.filter == PlaceFilterKind.HIGH_RATED:
        return place.rating is not None and place.rating >= HIGH_RATING_THRESHOLD
    if query.filter == PlaceFilterKind.TAG:
        return query.tag in place.tags
    return True


def sort_places(places: Iterable[Place]) -> List[Place]:
    """Dated places newest first, then undated places by name."""
    places = list(places)
    dated = sorted((p for p in places if p.date_visited is not None), key=lambda p: p.date_visited, reverse=True)
    undated = sorted((p for p in places if p.date_visited is None), key=lambda p: p.name)
    return dated + undated


def filter_places(places: Iterable[Place], query: PlaceQuery, now: datetime) -> List[Place]:
    text = query.search_text.strip()
    matched = [
        p for p in places
        if place_matches_text(p, text) and _place_passes_filter(p, query, now)
    ]
    return sort_places(matched)


def trip_matches_text(trip: Trip, text: str) -> bool:
    if not text:
        return True
    destination = trip.destination
    return (
        _contains(trip.name, text)
        or _contains(destination.name, text)
        or _contains(destination.city, text)
        or _contains(destination.country, text)
    )


def _trip_passes_filter(trip: Trip, query: TripQuery) -> bool:
    if isinstance(query.filter, TripType):
        return trip.trip_type == query.filter
    if query.filter == TripFilterKind.SOLO:
        return trip.number_of_travelers <= 1
    if query.filter == TripFilterKind.GROUP:
        return trip.number_of_travelers > 1
    return True


def filter_trips(trips: Iterable[Trip], query: TripQuery) -> List[Trip]:
    text = query.search_text.strip()
    matched = [t for t in trips if trip_matches_text(t, text) and _trip_passes_filter(t, query)]
    return sorted(matched, key=lambda t: t.start_date)


def split_trips(trips: Iterable[Trip], now: datetime) -> Tuple[List[Trip], List[Trip]]:
    """
    Split into (current, past).

    Current holds upcoming and in-progress trips; past holds trips whose end
    date is before now.
    """
    current, past = [], []
    for trip in trips:
        if trip.is_past(now):
            past.append(trip)
        else:
            current.append(trip)
    return current, past
