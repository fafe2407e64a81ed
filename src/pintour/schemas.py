from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Tuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LocationRecord(BaseModel):
    """A single viewer-location pin.

    Identity is ``id``. Two records at the same coordinates are still two
    distinct pins, so callers must key lookups by ``id`` and never by the
    record itself.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    latitude: Decimal
    longitude: Decimal
    description: str = ""
    service: str = "Unknown"
    user_type: str = "user"
    timestamp: datetime = Field(default_factory=_utcnow)
    user_id: str = ""
    stream_id: str = ""

    @property
    def coordinates(self) -> Tuple[float, float]:
        return float(self.latitude), float(self.longitude)


UNKNOWN_LOCATION = LocationRecord(
    id=UUID(int=0),
    latitude=Decimal(0),
    longitude=Decimal(0),
    description="Unknown",
    timestamp=datetime(1970, 1, 1, tzinfo=timezone.utc),
)


class TourStopLocation(BaseModel):
    description: str
    latitude: float
    longitude: float
    user_type: str
    service: str


class TourStop(BaseModel):
    """One ordered, zoom-annotated, described cluster handed to a map renderer."""

    latitude: float
    longitude: float
    zoom: int
    description: str
    location_count: int
    primary_user_type: str
    locations: List[TourStopLocation] = Field(default_factory=list)
