from decimal import Decimal

import pytest

from pintour.clustering import Cluster
from pintour.config import TourConfig
from pintour.schemas import LocationRecord
from pintour.tour import TourPlanner, arrange_by_distance, describe, determine_zoom, truncate


def _location(lat: float, lng: float, description: str, user_type: str = "viewer") -> LocationRecord:
    return LocationRecord(
        latitude=Decimal(str(lat)),
        longitude=Decimal(str(lng)),
        description=description,
        service="Twitch",
        user_type=user_type,
    )


def _cluster(*locations: LocationRecord) -> Cluster:
    return Cluster.from_locations(locations)


def test_arrange_empty():
    assert arrange_by_distance([]) == []


def test_arrange_single_cluster():
    cluster = _cluster(_location(40.7128, -74.0060, "New York"))
    arranged = arrange_by_distance([cluster])
    assert arranged == [cluster]
    assert arranged[0].cluster_id == cluster.cluster_id


def test_arrange_starts_near_us_center():
    clusters = [
        _cluster(_location(40.7128, -74.0060, "New York")),
        _cluster(_location(39.8283, -98.5795, "Geographic Center of US")),
        _cluster(_location(51.5074, -0.1278, "London")),
    ]

    arranged = arrange_by_distance(clusters)

    assert arranged[0].locations[0].description == "Geographic Center of US"
    assert sorted(c.cluster_id for c in arranged) == sorted(c.cluster_id for c in clusters)


def test_arrange_jumps_to_farthest_cluster():
    new_york = _cluster(_location(40.7128, -74.0060, "New York"))
    los_angeles = _cluster(_location(34.0522, -118.2437, "Los Angeles"))
    chicago = _cluster(_location(41.8781, -87.6298, "Chicago"))

    arranged = arrange_by_distance([new_york, los_angeles, chicago])

    assert arranged == [chicago, los_angeles, new_york]


def test_arrange_breaks_ties_by_input_order():
    first = _cluster(_location(45.0, -90.0, "first"))
    second = _cluster(_location(45.0, -90.0, "second"))
    far = _cluster(_location(-33.8688, 151.2093, "Sydney"))

    arranged = arrange_by_distance([far, first, second])

    assert [c.locations[0].description for c in arranged] == ["first", "Sydney", "second"]


def test_zoom_single_location():
    cluster = _cluster(_location(40.7128, -74.0060, "New York"))
    assert determine_zoom(cluster, max_zoom=10) == 8
    assert determine_zoom(cluster, max_zoom=5) == 5


def test_zoom_tight_cluster():
    cluster = _cluster(
        _location(40.7128, -74.0060, "Location 1"),
        _location(40.7200, -74.0100, "Location 2"),
        _location(40.7150, -74.0080, "Location 3"),
    )
    assert determine_zoom(cluster, max_zoom=12) == 10


def test_zoom_regional_cluster():
    cluster = _cluster(
        _location(40.7128, -74.0060, "New York"),
        _location(41.8781, -87.6298, "Chicago"),
        _location(42.3601, -71.0589, "Boston"),
    )
    assert determine_zoom(cluster, max_zoom=10) == 4


# Two points on one meridian: the average spread is half their separation.
@pytest.mark.parametrize(
    "separation_deg, expected_uncapped, expected_capped",
    [
        (0.1, 10, 6),
        (0.5, 8, 6),
        (2.0, 7, 6),
        (6.0, 5, 5),
        (12.0, 4, 4),
        (30.0, 3, 3),
    ],
)
def test_zoom_tiers(separation_deg, expected_uncapped, expected_capped):
    cluster = _cluster(_location(20.0, -75.0, "a"), _location(20.0 + separation_deg, -75.0, "b"))
    assert determine_zoom(cluster, max_zoom=12) == expected_uncapped
    assert determine_zoom(cluster, max_zoom=6) == expected_capped


def test_zoom_is_monotonic_in_spread():
    zooms = [
        determine_zoom(_cluster(_location(20.0, -75.0, "a"), _location(20.0 + sep, -75.0, "b")), 12)
        for sep in (0.05, 0.3, 1.0, 3.0, 8.0, 15.0, 40.0)
    ]
    assert zooms == sorted(zooms, reverse=True)


def test_describe_single_location():
    cluster = _cluster(_location(40.7128, -74.0060, "New York City, NY"))
    assert describe(cluster) == "New York City, NY"


def test_describe_truncates_long_description():
    cluster = _cluster(_location(40.7128, -74.0060, "A" * 150))

    description = describe(cluster)

    assert len(description) == 100
    assert description == "A" * 97 + "..."


def test_describe_multiple_locations():
    cluster = _cluster(
        _location(40.7128, -74.0060, "New York"),
        _location(42.3601, -71.0589, "Boston"),
        _location(39.9526, -75.1652, "Philadelphia"),
    )

    assert describe(cluster) == "Eastern North America (3 viewers)"


def test_truncate():
    assert truncate(None, 10) == ""
    assert truncate("", 10) == ""
    assert truncate("short", 10) == "short"
    assert truncate("x" * 10, 10) == "x" * 10
    assert truncate("x" * 11, 10) == "xxxxxxx..."


def test_planner_builds_stops_in_tour_order():
    locations = [
        _location(51.5074, -0.1278, "London"),
        _location(40.7128, -74.0060, "New York"),
        _location(42.3601, -71.0589, "Boston"),
        _location(39.9526, -75.1652, "Philadelphia"),
    ]

    stops = TourPlanner().plan(locations)

    assert [stop.description for stop in stops] == ["Eastern North America (3 viewers)", "London"]
    first = stops[0]
    assert first.location_count == 3
    assert first.zoom <= 6
    assert first.primary_user_type == "viewer"
    assert [loc.description for loc in first.locations] == ["New York", "Boston", "Philadelphia"]
    assert stops[1].zoom == 6
    assert stops[1].latitude == 51.5074
    assert stops[1].longitude == -0.1278


def test_planner_caps_stops_and_inputs():
    locations = [
        _location(40.7128, -74.0060, "New York"),
        _location(51.5074, -0.1278, "London"),
        _location(35.6762, 139.6503, "Tokyo"),
        _location(-33.8688, 151.2093, "Sydney"),
    ]

    assert len(TourPlanner(TourConfig(max_stops=2)).plan(locations)) == 2

    stops = TourPlanner(TourConfig(max_locations=1)).plan(locations)
    assert [stop.description for stop in stops] == ["New York"]


def test_planner_samples_members():
    locations = [
        _location(40.0 + i * 0.01, -74.0, f"Pin {i} " + "x" * 60) for i in range(12)
    ]

    stops = TourPlanner(TourConfig(sample_size=10)).plan(locations)

    assert len(stops) == 1
    assert stops[0].location_count == 12
    assert len(stops[0].locations) == 10
    assert all(len(loc.description) == 50 for loc in stops[0].locations)
    assert all(loc.service == "Twitch" for loc in stops[0].locations)


def test_planner_without_locations():
    assert TourPlanner().plan([]) == []
