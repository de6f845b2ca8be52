from .filters import PlaceFilterKind, PlaceQuery, TripFilterKind, TripQuery

__all__ = ["PlaceFilterKind", "PlaceQuery", "TripFilterKind", "TripQuery"]
