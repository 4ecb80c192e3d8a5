# route_planner/services/geo.py
import math
from typing import Protocol, Tuple

from route_planner.core.errors import DegenerateSegmentError

EARTH_RADIUS_KM = 6371.0

COMPASS_LABELS: Tuple[str, ...] = (
    "North",
    "Northeast",
    "East",
    "Southeast",
    "South",
    "Southwest",
    "West",
    "Northwest",
)


class LatLon(Protocol):
    latitude: float
    longitude: float


def distance_km(a: LatLon, b: LatLon) -> float:
    """
    Great-circle (haversine) distance between two points, in kilometres.
    """
    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    lon2 = math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def bearing_degrees(a: LatLon, b: LatLon) -> float:
    """
    Initial bearing from a to b, in degrees within [0, 360).

    Raises DegenerateSegmentError when a and b are the same point, where the
    bearing is meaningless.
    """
    if a.latitude == b.latitude and a.longitude == b.longitude:
        raise DegenerateSegmentError(
            f"Bearing undefined for zero-length segment at ({a.latitude}, {a.longitude})"
        )

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def compass_label(bearing: float) -> str:
    """Quantise a bearing to one of the 8 compass labels (359 -> North)."""
    # half-up rounding, so 22.5 is Northeast rather than banker's-rounded North
    return COMPASS_LABELS[int(math.floor(bearing / 45.0 + 0.5)) % 8]


def bearing_label(a: LatLon, b: LatLon) -> str:
    return compass_label(bearing_degrees(a, b))
