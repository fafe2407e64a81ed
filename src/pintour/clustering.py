"""Density-prioritised regional clustering of location pins."""

from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List, Optional, Sequence, Set, Tuple
from uuid import UUID

from .geo import haversine_km
from .regions import region_code
from .schemas import LocationRecord
from .validity import is_valid_location

LOGGER = logging.getLogger(__name__)

CLUSTER_DISTANCE_KM = 1000.0


@dataclass(frozen=True)
class Cluster:
    """A sealed group of locations with its derived center and spread.

    Use :meth:`from_locations` or :class:`ClusterBuilder`; the derived fields
    are computed once and never change afterwards.
    """

    cluster_id: str
    locations: Tuple[LocationRecord, ...]
    center_latitude: float
    center_longitude: float
    average_distance_from_center: float

    @classmethod
    def from_locations(
        cls, locations: Iterable[LocationRecord], cluster_id: Optional[str] = None
    ) -> "Cluster":
        members = tuple(locations)
        if not members:
            raise ValueError("A cluster needs at least one location.")

        coords = [member.coordinates for member in members]
        center_lat = sum(lat for lat, _ in coords) / len(coords)
        center_lng = sum(lng for _, lng in coords) / len(coords)

        average_distance = 0.0
        if len(coords) > 1:
            average_distance = sum(
                haversine_km(center_lat, center_lng, lat, lng) for lat, lng in coords
            ) / len(coords)

        return cls(
            cluster_id=cluster_id if cluster_id is not None else str(members[0].id),
            locations=members,
            center_latitude=center_lat,
            center_longitude=center_lng,
            average_distance_from_center=average_distance,
        )

    @property
    def count(self) -> int:
        return len(self.locations)

    @property
    def primary_user_type(self) -> str:
        """Most common user type among the members; ties go to the first seen."""
        counts = Counter(location.user_type for location in self.locations)
        return counts.most_common(1)[0][0]


class ClusterBuilder:
    """Accumulates members in discovery order, then seals them into a Cluster."""

    def __init__(self, cluster_id: str):
        self.cluster_id = cluster_id
        self._members: List[LocationRecord] = []

    def add(self, location: LocationRecord) -> None:
        self._members.append(location)

    def __len__(self) -> int:
        return len(self._members)

    def build(self) -> Cluster:
        return Cluster.from_locations(self._members, cluster_id=self.cluster_id)


def density_scores(
    locations: Sequence[LocationRecord], radius_km: float = CLUSTER_DISTANCE_KM
) -> Dict[UUID, int]:
    """Count, for each location id, how many other locations lie within ``radius_km``.

    O(n²): callers cap the input size.
    """
    coords = [location.coordinates for location in locations]
    scores: Dict[UUID, int] = {}
    for i, location in enumerate(locations):
        lat, lng = coords[i]
        scores[location.id] = sum(
            1
            for j, other in enumerate(locations)
            if other.id != location.id
            and haversine_km(lat, lng, coords[j][0], coords[j][1]) <= radius_km
        )
    return scores


def generate_clusters(
    locations: Sequence[LocationRecord], radius_km: float = CLUSTER_DISTANCE_KM
) -> List[Cluster]:
    """Partition locations into clusters of chained neighbours within one region.

    Seeds are taken in descending density order (ties keep input order). From
    each seed a breadth-first expansion absorbs every unprocessed location that
    is within ``radius_km`` of, and in the same region code as, the location
    just dequeued. Clusters are returned in seed order.
    """
    valid = [location for location in locations if is_valid_location(location)]
    if len(valid) < len(locations):
        LOGGER.debug("Dropped %d invalid locations", len(locations) - len(valid))
    if not valid:
        return []

    coords = [location.coordinates for location in valid]
    regions = [region_code(lat, lng) for lat, lng in coords]
    scores = density_scores(valid, radius_km)
    seed_order = sorted(range(len(valid)), key=lambda idx: -scores[valid[idx].id])

    processed: Set[UUID] = set()
    clusters: List[Cluster] = []
    for seed in seed_order:
        if valid[seed].id in processed:
            continue

        builder = ClusterBuilder(cluster_id=f"cluster-{len(clusters) + 1}")
        queue: Deque[int] = deque([seed])
        while queue:
            current = queue.popleft()
            if valid[current].id in processed:
                continue
            builder.add(valid[current])
            processed.add(valid[current].id)

            lat, lng = coords[current]
            for idx, candidate in enumerate(valid):
                if candidate.id in processed:
                    continue
                if regions[idx] != regions[current]:
                    continue
                if haversine_km(lat, lng, coords[idx][0], coords[idx][1]) <= radius_km:
                    queue.append(idx)

        clusters.append(builder.build())

    LOGGER.debug("Generated %d clusters from %d valid locations", len(clusters), len(valid))
    return clusters
