from __future__ import annotations

from .schemas import UNKNOWN_LOCATION, LocationRecord

# Coordinates within this many degrees of (0, 0) on both axes are treated as a
# failed geocode rather than a real pin in the Gulf of Guinea.
NEAR_ORIGIN_DEGREES = 1


def is_valid_location(record: LocationRecord) -> bool:
    """Return True if the record can be placed on the map."""
    if record.id == UNKNOWN_LOCATION.id:
        return False
    latitude, longitude = record.latitude, record.longitude
    if latitude == 0 and longitude == 0:
        return False
    if abs(latitude) < NEAR_ORIGIN_DEGREES and abs(longitude) < NEAR_ORIGIN_DEGREES:
        return False
    if abs(latitude) > 90 or abs(longitude) > 180:
        return False
    return True
