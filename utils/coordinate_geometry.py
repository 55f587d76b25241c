"""
Coordinate Geometry Utilities for zone resolution
Coordinate order handling, metric projection and distance calculations
"""

import numpy as np
from typing import Optional
from pyproj import Transformer
import shapely
from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry
from geopy.distance import geodesic
import logging

from config import Config

logger = logging.getLogger(__name__)

# Lower bound on the length of one degree of latitude on the WGS84 ellipsoid
MIN_METERS_PER_DEGREE = 110_000.0
SEARCH_PADDING = 1.05


def to_point(lat: float, lng: float) -> Point:
    """Build a geometry point from API-order (lat, lng) coordinates

    Geometry is stored in (x=lng, y=lat) order. This is the only place the swap happens.
    """
    return Point(float(lng), float(lat))


def is_valid_coordinate(lat, lng) -> bool:
    """True for finite numbers within the geographic lat/lng ranges"""
    try:
        values = np.array([lat, lng], dtype=float)
    except (TypeError, ValueError):
        return False
    if not np.all(np.isfinite(values)):
        return False
    return -90.0 <= values[0] <= 90.0 and -180.0 <= values[1] <= 180.0


def degrees_for_meters(meters: float, lat: float) -> float:
    """Search radius in degrees that covers `meters` along both axes at the given latitude

    The window can admit extra candidates; callers filter by exact metric distance.
    """
    cos_lat = max(np.cos(np.radians(lat)), 1e-6)
    return float(meters) * SEARCH_PADDING / (MIN_METERS_PER_DEGREE * cos_lat)


def search_window(point: Point, meters: float) -> BaseGeometry:
    """Bounding box around a (lng, lat) point enclosing every location within `meters`"""
    d = degrees_for_meters(meters, point.y)
    return box(point.x - d, point.y - d, point.x + d, point.y + d)


def geodesic_distance_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Geodesic (WGS84 ellipsoid) distance between two points in meters"""
    return geodesic((lat1, lng1), (lat2, lng2)).meters


class CoordinateGeometry:
    """Metric calculations on geographic geometries via a local projected CRS"""

    def __init__(self, projected_crs: Optional[str] = None):
        self.projected_crs = projected_crs or Config.PROJECTED_CRS
        # Coordinate system transformers
        self.wgs84_to_projected = Transformer.from_crs("EPSG:4326", self.projected_crs, always_xy=True)

    def project(self, geometry: BaseGeometry) -> BaseGeometry:
        """Project a (lng, lat) geometry into the metric CRS"""
        return shapely.transform(geometry, self._project_coords)

    def _project_coords(self, coords: np.ndarray) -> np.ndarray:
        x, y = self.wgs84_to_projected.transform(coords[:, 0], coords[:, 1])
        return np.column_stack([x, y])

    def distance_meters(self, point: Point, geometry: BaseGeometry,
                        projected: Optional[BaseGeometry] = None) -> float:
        """Shortest distance from a point to a geometry in meters, 0 when contained

        `projected` is the geometry already in the metric CRS, when the caller has it.
        """
        if geometry.contains(point):
            return 0.0
        if projected is None:
            projected = self.project(geometry)
        return float(self.project(point).distance(projected))

    def centroid_distance_meters(self, point: Point, geometry: BaseGeometry) -> float:
        """Distance from a point to the centroid of a geometry in meters"""
        centroid = geometry.centroid
        return geodesic_distance_meters(point.y, point.x, centroid.y, centroid.x)
