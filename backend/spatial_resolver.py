"""
Spatial Resolver
Finds the zoning polygon containing a coordinate, and nearby polygons for advisory display
"""

import logging
from typing import List, Optional

from config import Config
from models.spatial import ZoningPolygon, SpatialQueryResult
from backend.geometry_store import ZoningGeometryStore
from utils.coordinate_geometry import to_point, is_valid_coordinate

logger = logging.getLogger(__name__)


class SpatialResolver:
    """Resolve coordinates against a geometry store

    Containment and nearest-zone lookups are separate operations: a point outside
    every polygon resolves to None, never to the nearest polygon.
    """

    def __init__(self, store: ZoningGeometryStore, timeout: Optional[float] = None):
        self.store = store
        self.timeout = timeout if timeout is not None else Config.STORE_TIMEOUT

    def find_containing_zone(self, lat: float, lng: float) -> Optional[SpatialQueryResult]:
        """
        Find the zone containing a coordinate

        Args:
            lat: Latitude
            lng: Longitude

        Returns:
            SpatialQueryResult with distance 0, or None when no polygon contains the point
        """
        if not is_valid_coordinate(lat, lng):
            logger.debug(f"Ignoring invalid coordinate ({lat}, {lng})")
            return None

        point = to_point(lat, lng)
        return self._select_containing(point, self.store.contains(point))

    def find_nearest(self, lat: float, lng: float, max_distance_meters: float,
                     limit: int) -> List[SpatialQueryResult]:
        """Polygons within max_distance_meters ordered by ascending distance, at most `limit`"""
        if not is_valid_coordinate(lat, lng):
            return []

        point = to_point(lat, lng)
        matches = self.store.within_distance(point, max_distance_meters, limit)
        return [self._to_result(polygon, distance, source='nearby') for polygon, distance in matches]

    async def afind_containing_zone(self, lat: float, lng: float,
                                    timeout: Optional[float] = None) -> Optional[SpatialQueryResult]:
        """Async containment lookup; raises StoreTimeoutError when the store is too slow"""
        if not is_valid_coordinate(lat, lng):
            return None

        point = to_point(lat, lng)
        hits = await self.store.acontains(point, timeout if timeout is not None else self.timeout)
        return self._select_containing(point, hits)

    async def afind_nearest(self, lat: float, lng: float, max_distance_meters: float, limit: int,
                            timeout: Optional[float] = None) -> List[SpatialQueryResult]:
        if not is_valid_coordinate(lat, lng):
            return []

        point = to_point(lat, lng)
        matches = await self.store.awithin_distance(
            point, max_distance_meters, limit, timeout if timeout is not None else self.timeout
        )
        return [self._to_result(polygon, distance, source='nearby') for polygon, distance in matches]

    def _select_containing(self, point, hits: List[ZoningPolygon]) -> Optional[SpatialQueryResult]:
        if not hits:
            return None

        if len(hits) > 1:
            # Overlapping polygons: closest centroid wins, then earliest loaded
            hits = sorted(
                hits,
                key=lambda p: (self.store.geometry.centroid_distance_meters(point, p.geometry), p.sequence)
            )
            logger.debug(f"{len(hits)} overlapping zones at ({point.y}, {point.x}), "
                         f"selected {hits[0].zone_label!r}")

        return self._to_result(hits[0], 0.0, source='exact_match')

    def _to_result(self, polygon: ZoningPolygon, distance: float, source: str) -> SpatialQueryResult:
        return SpatialQueryResult(
            zone_label=polygon.zone_label,
            zone_code=polygon.zone_code,
            attributes=polygon.attributes(),
            distance_meters=distance,
            area_sq_meters=self.store.area_sq_meters(polygon),
            source=source
        )
