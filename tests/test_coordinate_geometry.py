import warnings

import pytest
from pyproj import CRS
from shapely.geometry import shape

from config import Config
from utils.coordinate_geometry import (
    CoordinateGeometry, to_point, search_window, geodesic_distance_meters
)
from tests.conftest import CITY_CENTRE, square


def test_to_point_swaps_to_lng_lat():
    point = to_point(*CITY_CENTRE)
    assert (point.x, point.y) == (CITY_CENTRE[1], CITY_CENTRE[0])


@pytest.mark.parametrize("meters", [50, 1000, 10_000])
def test_search_window_reaches_radius_on_both_axes(meters):
    lat, lng = CITY_CENTRE
    west, south, east, north = search_window(to_point(lat, lng), meters).bounds

    assert geodesic_distance_meters(lat, lng, north, lng) > meters
    assert geodesic_distance_meters(lat, lng, south, lng) > meters
    assert geodesic_distance_meters(lat, lng, lat, east) > meters
    assert geodesic_distance_meters(lat, lng, lat, west) > meters


def test_projected_crs_is_the_utm_zone_containing_kigali():
    zone = int((CITY_CENTRE[1] + 180) // 6) + 1
    assert CRS(Config.PROJECTED_CRS).utm_zone == f"{zone}S"


def test_projection_emits_no_warnings():
    geometry = CoordinateGeometry()
    polygon = to_point(*CITY_CENTRE).buffer(0.001)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        projected = geometry.project(polygon)

    assert projected.geom_type == "Polygon"
    assert projected.area > 0


def test_projected_distance_matches_geodesic():
    geometry = CoordinateGeometry()
    lat, lng = CITY_CENTRE
    point = to_point(lat, lng)
    north = to_point(lat + 0.009, lng)

    projected = geometry.project(point).distance(geometry.project(north))
    assert projected == pytest.approx(geodesic_distance_meters(lat, lng, lat + 0.009, lng), rel=0.002)


def test_distance_uses_precomputed_projection():
    geometry = CoordinateGeometry()
    polygon = to_point(-1.935, 30.0619).buffer(0.001)
    point = to_point(*CITY_CENTRE)

    expected = geometry.distance_meters(point, polygon)
    assert geometry.distance_meters(point, polygon, geometry.project(polygon)) == pytest.approx(expected)


def test_distance_is_zero_when_contained():
    geometry = CoordinateGeometry()
    polygon = shape(square(30.05, -1.95, 30.07, -1.93))
    assert geometry.distance_meters(to_point(*CITY_CENTRE), polygon) == 0.0
