from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .clustering import Cluster, generate_clusters
from .config import TourConfig
from .geo import planar_distance
from .regions import region_name
from .schemas import LocationRecord, TourStop, TourStopLocation

LOGGER = logging.getLogger(__name__)

# Geographic center of the contiguous United States.
US_CENTER = (39.8283, -98.5795)

DESCRIPTION_LIMIT = 100
SAMPLE_DESCRIPTION_LIMIT = 50

# (upper bound on average spread in km, zoom level), checked in order.
ZOOM_TIERS = (
    (10.0, 10),
    (50.0, 8),
    (200.0, 7),
    (500.0, 5),
    (1000.0, 4),
)
SINGLE_LOCATION_ZOOM = 8
WIDEST_ZOOM = 3


def arrange_by_distance(clusters: Sequence[Cluster]) -> List[Cluster]:
    """Order clusters for the tour with a greedy farthest-next walk.

    The first stop is the cluster nearest the US center; every following stop
    is the remaining cluster farthest from the previous one. Distances are
    planar on raw degrees and ties go to the earliest cluster in the input.
    """
    if len(clusters) <= 1:
        return list(clusters)

    remaining = list(range(len(clusters)))
    current = min(
        remaining,
        key=lambda idx: planar_distance(
            clusters[idx].center_latitude, clusters[idx].center_longitude, *US_CENTER
        ),
    )
    arranged = [clusters[current]]
    remaining.remove(current)

    while remaining:
        here = clusters[current]
        current = max(
            remaining,
            key=lambda idx: planar_distance(
                clusters[idx].center_latitude,
                clusters[idx].center_longitude,
                here.center_latitude,
                here.center_longitude,
            ),
        )
        arranged.append(clusters[current])
        remaining.remove(current)

    return arranged


def determine_zoom(cluster: Cluster, max_zoom: int = 6) -> int:
    """Pick a map zoom level that keeps every member of the cluster on screen."""
    if cluster.count == 1:
        return min(SINGLE_LOCATION_ZOOM, max_zoom)
    spread = cluster.average_distance_from_center
    for upper_km, zoom in ZOOM_TIERS:
        if spread < upper_km:
            return min(zoom, max_zoom)
    return min(WIDEST_ZOOM, max_zoom)


def truncate(text: Optional[str], limit: int) -> str:
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def describe(cluster: Cluster) -> str:
    """Label a tour stop: the pin's own text, or the region name and viewer count."""
    if cluster.count == 1:
        return truncate(cluster.locations[0].description, DESCRIPTION_LIMIT)
    name = region_name(cluster.center_latitude, cluster.center_longitude)
    return f"{name} ({cluster.count} viewers)"


class TourPlanner:
    """Turn a location history into an ordered list of tour stops."""

    def __init__(self, config: TourConfig | None = None):
        self.config = config or TourConfig()

    def plan(self, locations: Sequence[LocationRecord]) -> List[TourStop]:
        capped = list(locations[: self.config.max_locations])
        if len(capped) < len(locations):
            LOGGER.info(
                "Capped tour input from %d to %d locations", len(locations), len(capped)
            )

        clusters = generate_clusters(capped, self.config.cluster_distance_km)
        arranged = arrange_by_distance(clusters)[: self.config.max_stops]
        stops = [self._build_stop(cluster) for cluster in arranged]
        LOGGER.info("Planned %d tour stops from %d clusters", len(stops), len(clusters))
        return stops

    def _build_stop(self, cluster: Cluster) -> TourStop:
        return TourStop(
            latitude=round(cluster.center_latitude, 6),
            longitude=round(cluster.center_longitude, 6),
            zoom=determine_zoom(cluster, self.config.max_zoom),
            description=describe(cluster),
            location_count=cluster.count,
            primary_user_type=cluster.primary_user_type,
            locations=[
                TourStopLocation(
                    description=truncate(location.description, SAMPLE_DESCRIPTION_LIMIT),
                    latitude=round(float(location.latitude), 6),
                    longitude=round(float(location.longitude), 6),
                    user_type=location.user_type,
                    service=location.service,
                )
                for location in cluster.locations[: self.config.sample_size]
            ],
        )
