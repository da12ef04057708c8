"""Distance-based store selection. Pure functions, no I/O."""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

EARTH_RADIUS_MILES = 3959.0


@dataclass(frozen=True)
class StoreDistance:
    store_id: str
    distance_miles: float


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in miles."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    a = min(1.0, a)
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _field(store: Any, name: str):
    if isinstance(store, dict):
        return store.get(name)
    return getattr(store, name, None)


def is_eligible(store: Any) -> bool:
    """Only active stores with both coordinates take part in distance selection."""
    return (
        bool(_field(store, "is_active"))
        and _field(store, "latitude") is not None
        and _field(store, "longitude") is not None
    )


def rank_by_distance(origin: Sequence[float], stores: Iterable[Any]) -> list[StoreDistance]:
    """
    Distances from ``origin`` to every eligible store, nearest first.

    Args:
        origin: (lat, lon) pair or any object with lat/lon attributes
        stores: StoreLocation rows or dicts with id, latitude, longitude, is_active

    Returns:
        StoreDistance entries sorted by non-decreasing distance (ties keep input order)
    """
    lat, lon = _origin(origin)
    ranked = [
        StoreDistance(
            _field(store, "id"),
            haversine_miles(lat, lon, _field(store, "latitude"), _field(store, "longitude")),
        )
        for store in stores
        if is_eligible(store)
    ]
    ranked.sort(key=lambda entry: entry.distance_miles)
    return ranked


def select_nearest(origin: Sequence[float], stores: Iterable[Any], limit: int) -> list[str]:
    """Ids of the ``limit`` nearest eligible stores; fewer if fewer qualify."""
    if limit <= 0:
        return []
    return [entry.store_id for entry in rank_by_distance(origin, stores)[:limit]]


def select_within_radius(origin: Sequence[float], stores: Iterable[Any], radius_miles: float) -> list[str]:
    """Ids of every eligible store within ``radius_miles``, nearest first. May be empty."""
    return [
        entry.store_id
        for entry in rank_by_distance(origin, stores)
        if entry.distance_miles <= radius_miles
    ]


def _origin(origin: Any) -> tuple[float, float]:
    if hasattr(origin, "lat") and hasattr(origin, "lon"):
        return origin.lat, origin.lon
    lat, lon = origin
    return lat, lon
