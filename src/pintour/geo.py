from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # rounding can push antipodal pairs just past 1
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def planar_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Euclidean distance on raw degree values.

    Only used to order tour stops; it is not a physical distance.
    """
    return math.sqrt((lat1 - lat2) ** 2 + (lng1 - lng2) ** 2)
