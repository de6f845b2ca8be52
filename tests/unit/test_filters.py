"""
Unit tests for place and trip filtering
"""
from datetime import timedelta

import pytest
from pydantic import ValidationError

from travel_journal.models import TripType
from travel_journal.schemas.filters import PlaceFilterKind, PlaceQuery, TripFilterKind, TripQuery
from travel_journal.services.filters import filter_places, filter_trips, sort_places, split_trips


@pytest.fixture
def places(place_factory, clock):
    now = clock.now
    return [
        place_factory(name="Eiffel Tower", tags=["Romantic", "Architecture"], rating=5,
                      date_visited=now - timedelta(days=3)),
        place_factory(name="Statue of Liberty", country="USA", city="New York", tags=["History"], rating=4,
                      date_visited=now - timedelta(days=60)),
        place_factory(name="Colosseum", country="Italy", city="Rome", rating=3,
                      date_visited=now - timedelta(days=1)),
        place_factory(name="Alhambra", country="Spain", city="Granada"),
        place_factory(name="Acropolis", country="Greece", city="Athens", tags=["History"]),
    ]


def names(items):
    return [i.name for i in items]


class TestPlaceFilters:
    def test_default_query_sorts_dated_then_by_name(self, places, clock):
        result = filter_places(places, PlaceQuery(), clock.now)
        assert names(result) == ["Colosseum", "Eiffel Tower", "Statue of Liberty", "Acropolis", "Alhambra"]

    @pytest.mark.parametrize("text,expected", [
        ("eiffel", ["Eiffel Tower"]),
        ("NEW YORK", ["Statue of Liberty"]),
        ("italy", ["Colosseum"]),
        ("hist", ["Statue of Liberty", "Acropolis"]),
        ("  rome  ", ["Colosseum"]),
        ("nowhere", []),
    ])
    def test_text_search(self, places, clock, text, expected):
        assert names(filter_places(places, PlaceQuery(search_text=text), clock.now)) == expected

    def test_recent_means_this_month(self, places, clock):
        result = filter_places(places, PlaceQuery(filter=PlaceFilterKind.RECENT), clock.now)
        assert names(result) == ["Colosseum", "Eiffel Tower"]

    def test_high_rated(self, places, clock):
        result = filter_places(places, PlaceQuery(filter=PlaceFilterKind.HIGH_RATED), clock.now)
        assert names(result) == ["Eiffel Tower", "Statue of Liberty"]

    def test_tag_filter_is_exact(self, places, clock):
        query = PlaceQuery(filter=PlaceFilterKind.TAG, tag="History")
        assert names(filter_places(places, query, clock.now)) == ["Statue of Liberty", "Acropolis"]
        query = PlaceQuery(filter=PlaceFilterKind.TAG, tag="history")
        assert filter_places(places, query, clock.now) == []

    def test_tag_filter_requires_tag(self):
        with pytest.raises(ValidationError):
            PlaceQuery(filter=PlaceFilterKind.TAG)

    def test_text_and_filter_combine(self, places, clock):
        query = PlaceQuery(search_text="history", filter=PlaceFilterKind.HIGH_RATED)
        assert names(filter_places(places, query, clock.now)) == ["Statue of Liberty"]

    def test_sort_places_empty(self):
        assert sort_places([]) == []


@pytest.fixture
def trips(trip_factory, clock):
    now = clock.now
    return [
        trip_factory(name="Paris Adventure", start=now + timedelta(days=30), number_of_travelers=2,
                     trip_type=TripType.COUPLE),
        trip_factory(name="Solo Hike", country="Peru", start=now + timedelta(days=5)),
        trip_factory(name="Family Reunion", country="USA", start=now - timedelta(days=40),
                     number_of_travelers=5, trip_type=TripType.FAMILY),
        trip_factory(name="Weekend Away", country="Italy", start=now - timedelta(days=1), days=3),
    ]


class TestTripFilters:
    def test_sorted_by_start_date(self, trips):
        assert names(filter_trips(trips, TripQuery())) == [
            "Family Reunion", "Weekend Away", "Solo Hike", "Paris Adventure",
        ]

    def test_search_matches_destination(self, trips):
        assert names(filter_trips(trips, TripQuery(search_text="peru"))) == ["Solo Hike"]
        assert names(filter_trips(trips, TripQuery(search_text="adventure"))) == ["Paris Adventure"]

    def test_solo_and_group(self, trips):
        solo = filter_trips(trips, TripQuery(filter=TripFilterKind.SOLO))
        group = filter_trips(trips, TripQuery(filter=TripFilterKind.GROUP))
        assert names(solo) == ["Weekend Away", "Solo Hike"]
        assert names(group) == ["Family Reunion", "Paris Adventure"]

    def test_trip_type_filter(self, trips):
        assert names(filter_trips(trips, TripQuery(filter=TripType.FAMILY))) == ["Family Reunion"]
        assert names(filter_trips(trips, TripQuery(filter="Couple"))) == ["Paris Adventure"]

    def test_split_current_and_past(self, trips, clock):
        current, past = split_trips(trips, clock.now)
        assert names(current) == ["Paris Adventure", "Solo Hike", "Weekend Away"]
        assert names(past) == ["Family Reunion"]
