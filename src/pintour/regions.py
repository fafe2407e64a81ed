"""Coarse rectangular region classification for map coordinates.

Codes and names come from two separate rule tables. Their boundaries differ on
purpose (the name table checks South America before North America and splits
North America at other longitudes), so neither is derived from the other.
"""

from __future__ import annotations

ANTARCTICA_CODE = "ANT"
OCEAN_CODE = "OCN"


def region_code(latitude: float, longitude: float) -> str:
    """Return the region code for a coordinate, e.g. ``"NAM-EAST"``."""
    # North America
    if latitude >= 5 and -180 <= longitude <= -30:
        if longitude <= -125:
            return "NAM-WEST"
        if longitude <= -105:
            return "NAM-MOUNTAIN"
        if longitude <= -95:
            return "NAM-CENTRAL"
        if longitude <= -80:
            return "NAM-MIDWEST"
        return "NAM-EAST"

    # South America
    if -60 <= latitude < 15 and -85 <= longitude <= -30:
        if longitude <= -70:
            return "SAM-WEST"
        if latitude < -20:
            return "SAM-SOUTH"
        return "SAM-EAST"

    # Europe
    if latitude >= 35 and -10 <= longitude <= 60:
        if longitude <= 15:
            return "EUR-WEST"
        if longitude <= 30:
            return "EUR-CENTRAL"
        if latitude >= 55:
            return "EUR-NORTH"
        if latitude <= 45:
            return "EUR-SOUTH"
        return "EUR-EAST"

    # Africa
    if -35 <= latitude <= 40 and -20 <= longitude <= 55:
        if latitude >= 15:
            return "AFR-NORTH"
        if longitude <= 15:
            return "AFR-WEST"
        if longitude >= 35:
            return "AFR-EAST"
        return "AFR-CENTRAL"

    # Asia
    if latitude >= 0 and 60 <= longitude <= 180:
        if longitude <= 100:
            return "ASI-SOUTH"
        if latitude >= 50:
            return "ASI-NORTH"
        if longitude >= 140:
            return "ASI-EAST"
        if latitude <= 30:
            return "ASI-SOUTHEAST"
        return "ASI-CENTRAL"

    # Indonesia and the rest of maritime Southeast Asia, south of the equator
    if -10 <= latitude <= 25 and 90 <= longitude <= 150:
        return "ASI-SOUTHEAST"

    # Oceania
    if -50 <= latitude <= 0 and 110 <= longitude <= 180:
        if longitude >= 160:
            return "OCE-PACIFIC"
        if latitude >= -25:
            return "OCE-NORTH"
        return "OCE-SOUTH"

    if latitude < -60:
        return ANTARCTICA_CODE
    return OCEAN_CODE


def region_name(latitude: float, longitude: float) -> str:
    """Return a human-readable region name for a coordinate."""
    if -60 <= latitude < 15 and -85 <= longitude <= -30:
        if longitude <= -70:
            return "Western South America"
        if latitude < -20:
            return "Southern South America"
        return "Eastern South America"
    if latitude >= 5 and -180 <= longitude <= -30:
        if longitude <= -130:
            return "Western North America"
        if longitude <= -95:
            return "Central North America"
        if longitude <= -60:
            return "Eastern North America"
        return "Northern North America"
    if latitude >= 35 and -10 <= longitude <= 60:
        if longitude <= 15:
            return "Western Europe"
        if longitude <= 30:
            return "Central Europe"
        if latitude >= 55:
            return "Northern Europe"
        if latitude <= 45:
            return "Southern Europe"
        return "Eastern Europe"
    if -35 <= latitude <= 40 and -20 <= longitude <= 55:
        if latitude >= 15:
            return "Northern Africa"
        if longitude <= 15:
            return "Western Africa"
        if longitude >= 35:
            return "Eastern Africa"
        return "Central Africa"
    if latitude >= 0 and 60 <= longitude <= 180:
        if longitude <= 100:
            return "South Asia"
        if latitude >= 50:
            return "Northern Asia"
        if longitude >= 140:
            return "East Asia"
        if latitude <= 30:
            return "Southeast Asia"
        return "Central Asia"
    if -10 <= latitude <= 25 and 90 <= longitude <= 150:
        return "Southeast Asia"
    if -50 <= latitude <= 0 and 110 <= longitude <= 180:
        if longitude >= 160:
            return "Pacific Islands"
        if latitude >= -25:
            return "Northern Australia"
        return "Southern Australia"
    if latitude < -60:
        return "Antarctica"
    return "Ocean Region"
