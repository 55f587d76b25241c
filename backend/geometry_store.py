"""
Zoning Geometry Store
Spatially indexed in-memory store of Kigali zoning polygons loaded from GeoJSON
"""

import json
import asyncio
import logging
import threading
from collections import Counter, OrderedDict
from pathlib import Path
from typing import Dict, List, Any, Optional, Iterable, Tuple, Union

from shapely.geometry import shape, box, mapping, Point
from shapely.strtree import STRtree

from models.spatial import ZoningPolygon
from backend.errors import StoreUnavailableError, StoreTimeoutError
from utils.coordinate_geometry import CoordinateGeometry, search_window

logger = logging.getLogger(__name__)

# Property names that carry the zone label, most specific first
LABEL_PROPERTIES = ('new_zoning', 'zone_name', 'zoning', 'name')
OBJECT_ID_PROPERTIES = ('objectid_1', 'objectid', 'fid')

_KNOWN_PROPERTIES = set(LABEL_PROPERTIES) | set(OBJECT_ID_PROPERTIES) | {
    'zone_code', 'phase', 'level_1', 'level_2', 'level_3', 'area_sqkm',
    'year_of_implementation', 'globalid'
}


def _first(properties: Dict[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if properties.get(key) not in (None, ''):
            return properties[key]
    return None


class _Snapshot:
    """Immutable view of the loaded polygons and their spatial index"""

    def __init__(self, polygons: List[ZoningPolygon]):
        self.polygons = polygons
        self.tree = STRtree([p.geometry for p in polygons]) if polygons else None


class ZoningGeometryStore:
    """In-memory geometry store answering containment and within-distance queries

    Polygons are immutable once loaded; the whole set is replaced atomically by
    clear_and_reload. Queries on a store that is not loaded raise StoreUnavailableError.
    """

    def __init__(self, source: Optional[Union[str, Path, Dict[str, Any]]] = None,
                 geometry: Optional[CoordinateGeometry] = None):
        self.source = source
        self.geometry = geometry or CoordinateGeometry()
        self._snapshot: Optional[_Snapshot] = None
        self._areas: Dict[int, float] = {}
        self._projected: Dict[int, Any] = {}
        self._lock = threading.RLock()
        self._next_sequence = 0

    # Lifecycle

    def open(self) -> "ZoningGeometryStore":
        """Load polygons from the configured source"""
        if self.source is None:
            raise StoreUnavailableError("No zoning source configured for the geometry store")
        self.load_geojson(self.source)
        return self

    def close(self):
        with self._lock:
            self._snapshot = None
            self._areas.clear()
        logger.info("Geometry store closed")

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def __len__(self) -> int:
        snapshot = self._snapshot
        return len(snapshot.polygons) if snapshot else 0

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # Loading

    def load_geojson(self, source: Union[str, Path, Dict[str, Any]]) -> int:
        """
        Load a GeoJSON FeatureCollection from a file path or an already parsed dict

        Returns:
            Number of polygons loaded
        """
        if isinstance(source, dict):
            data = source
        else:
            path = Path(source)
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise StoreUnavailableError(f"Could not read zoning data from {path}: {e}") from e
            logger.info(f"Read zoning GeoJSON from {path}")

        if data.get('type') == 'Feature':
            features = [data]
        else:
            features = data.get('features')
        if features is None:
            raise StoreUnavailableError("GeoJSON source has no features")

        return self.clear_and_reload(features)

    def clear_and_reload(self, features: Iterable[Dict[str, Any]]) -> int:
        """Replace every loaded polygon with the given GeoJSON features"""
        with self._lock:
            polygons = []
            skipped = 0
            for feature in features:
                polygon = self._build_polygon(feature, self._next_sequence)
                if polygon is None:
                    skipped += 1
                    continue
                polygons.append(polygon)
                self._next_sequence += 1

            self._snapshot = _Snapshot(polygons)
            self._areas.clear()
            self._projected.clear()

        if skipped:
            logger.warning(f"Skipped {skipped} features without a usable polygon geometry or zone label")
        logger.info(f"Loaded {len(polygons)} zoning polygons")
        return len(polygons)

    def _build_polygon(self, feature: Dict[str, Any], sequence: int) -> Optional[ZoningPolygon]:
        raw_geometry = feature.get('geometry')
        if not raw_geometry:
            return None

        try:
            geometry = shape(raw_geometry)
        except (ValueError, TypeError, AttributeError) as e:
            logger.debug(f"Invalid feature geometry: {e}")
            return None

        if geometry.is_empty or geometry.geom_type not in ('Polygon', 'MultiPolygon'):
            return None
        if not geometry.is_valid:
            geometry = geometry.buffer(0)

        properties = {str(k).lower(): v for k, v in (feature.get('properties') or {}).items()}
        label = _first(properties, LABEL_PROPERTIES)
        if label is None:
            return None

        area_sqkm = properties.get('area_sqkm')
        try:
            area_sqkm = float(area_sqkm) if area_sqkm is not None else None
        except (TypeError, ValueError):
            area_sqkm = None

        return ZoningPolygon(
            zone_label=str(label),
            geometry=geometry,
            sequence=sequence,
            zone_code=properties.get('zone_code'),
            phase=properties.get('phase'),
            level_1=properties.get('level_1'),
            level_2=properties.get('level_2'),
            level_3=properties.get('level_3'),
            area_sqkm=area_sqkm,
            year_of_implementation=properties.get('year_of_implementation'),
            object_id=_first(properties, OBJECT_ID_PROPERTIES),
            global_id=properties.get('globalid'),
            extra={k: v for k, v in properties.items() if k not in _KNOWN_PROPERTIES}
        )

    def _require_snapshot(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise StoreUnavailableError("Geometry store is not loaded")
        return snapshot

    # Spatial queries

    def contains(self, point: Point) -> List[ZoningPolygon]:
        """All polygons containing the point, in insertion order"""
        snapshot = self._require_snapshot()
        if snapshot.tree is None:
            return []

        hits = []
        for idx in snapshot.tree.query(point):
            polygon = snapshot.polygons[int(idx)]
            if polygon.geometry.contains(point):
                hits.append(polygon)
        return sorted(hits, key=lambda p: p.sequence)

    def within_distance(self, point: Point, meters: float, limit: int) -> List[Tuple[ZoningPolygon, float]]:
        """Polygons within `meters` of the point as (polygon, distance) pairs, nearest first"""
        snapshot = self._require_snapshot()
        if snapshot.tree is None or limit <= 0 or meters < 0:
            return []

        results = []
        for idx in snapshot.tree.query(search_window(point, meters)):
            polygon = snapshot.polygons[int(idx)]
            distance = self.geometry.distance_meters(point, polygon.geometry, self.projected(polygon))
            if distance <= meters:
                results.append((polygon, distance))

        results.sort(key=lambda item: (item[1], item[0].sequence))
        return results[:limit]

    def area_sq_meters(self, polygon: ZoningPolygon) -> float:
        """Projected area of a polygon in square meters"""
        area = self._areas.get(polygon.sequence)
        if area is None:
            area = float(self.projected(polygon).area)
            self._areas[polygon.sequence] = area
        return area

    def projected(self, polygon: ZoningPolygon):
        """Polygon geometry in the metric CRS, projected once per load"""
        geometry = self._projected.get(polygon.sequence)
        if geometry is None:
            geometry = self.geometry.project(polygon.geometry)
            self._projected[polygon.sequence] = geometry
        return geometry

    async def acontains(self, point: Point, timeout: float) -> List[ZoningPolygon]:
        return await self._run_with_timeout('contains', timeout, self.contains, point)

    async def awithin_distance(self, point: Point, meters: float, limit: int,
                               timeout: float) -> List[Tuple[ZoningPolygon, float]]:
        return await self._run_with_timeout('within_distance', timeout, self.within_distance,
                                            point, meters, limit)

    async def _run_with_timeout(self, operation: str, timeout: float, func, *args):
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Geometry store {operation} timed out after {timeout}s")
            raise StoreTimeoutError(operation, timeout) from e

    # Catalogue queries

    def zone_summary(self) -> List[Dict[str, Any]]:
        """Zones grouped by label, phase and level categories with feature counts"""
        snapshot = self._require_snapshot()
        groups: "OrderedDict[Tuple, int]" = OrderedDict()
        for polygon in snapshot.polygons:
            key = (polygon.zone_label, polygon.phase, polygon.level_1, polygon.level_2)
            groups[key] = groups.get(key, 0) + 1

        summary = [
            {'zone_name': name, 'phase': phase, 'level_1': level_1, 'level_2': level_2, 'feature_count': count}
            for (name, phase, level_1, level_2), count in groups.items()
        ]
        return sorted(summary, key=lambda row: row['zone_name'])

    def search(self, term: str, limit: int = 20) -> List[Dict[str, Any]]:
        """Case-insensitive search over zone label, zone code and level categories"""
        snapshot = self._require_snapshot()
        needle = (term or '').strip().lower()
        if not needle:
            return []

        seen = OrderedDict()
        for polygon in snapshot.polygons:
            fields = (polygon.zone_label, polygon.zone_code, polygon.level_1, polygon.level_2)
            if not any(needle in str(value).lower() for value in fields if value):
                continue
            key = (polygon.zone_label, polygon.zone_code, polygon.phase, polygon.level_1, polygon.level_2)
            if key not in seen:
                seen[key] = {
                    'zone_name': polygon.zone_label,
                    'zone_code': polygon.zone_code,
                    'phase': polygon.phase,
                    'level_1': polygon.level_1,
                    'level_2': polygon.level_2,
                    'feature_count': 0
                }
            seen[key]['feature_count'] += 1

        rows = sorted(seen.values(), key=lambda row: row['zone_name'])
        return rows[:limit]

    def stats(self, top: int = 10) -> Dict[str, Any]:
        """Feature totals and the most frequent zone labels"""
        snapshot = self._require_snapshot()
        counts = Counter(p.zone_label for p in snapshot.polygons)
        return {
            'total_features': len(snapshot.polygons),
            'unique_zones': len(counts),
            'top_zones': [{'zone_name': name, 'count': count} for name, count in counts.most_common(top)]
        }

    def zones_by_phase(self, phase: Optional[str] = None) -> List[Dict[str, Any]]:
        """Feature counts and total area grouped by phase, year and zone label"""
        snapshot = self._require_snapshot()
        groups: Dict[Tuple, Dict[str, Any]] = {}
        for polygon in snapshot.polygons:
            if phase is not None and polygon.phase != phase:
                continue
            key = (polygon.phase, polygon.year_of_implementation, polygon.zone_label)
            row = groups.setdefault(key, {
                'phase': polygon.phase,
                'year_of_implementation': polygon.year_of_implementation,
                'zone_name': polygon.zone_label,
                'feature_count': 0,
                'total_area': 0.0
            })
            row['feature_count'] += 1
            row['total_area'] += polygon.area_sqkm or 0.0

        return sorted(groups.values(), key=lambda row: tuple(str(row[k] or '') for k in
                                                            ('phase', 'year_of_implementation', 'zone_name')))

    def boundaries(self, zone_names: Optional[List[str]] = None,
                   bounds: Optional[Dict[str, float]] = None) -> Dict[str, Any]:
        """
        Zone boundaries as a GeoJSON FeatureCollection

        Args:
            zone_names: Only include polygons with these labels
            bounds: Bounding box with north, south, east and west keys
        """
        snapshot = self._require_snapshot()
        candidates = snapshot.polygons

        if bounds:
            envelope = box(bounds['west'], bounds['south'], bounds['east'], bounds['north'])
            if snapshot.tree is None:
                candidates = []
            else:
                candidates = [snapshot.polygons[int(i)] for i in snapshot.tree.query(envelope, predicate='intersects')]

        if zone_names:
            wanted = set(zone_names)
            candidates = [p for p in candidates if p.zone_label in wanted]

        features = [
            {
                'type': 'Feature',
                'properties': {
                    'zone_name': p.zone_label,
                    'zone_code': p.zone_code,
                    'phase': p.phase,
                    'level_1': p.level_1,
                    'level_2': p.level_2,
                    'area_sqkm': p.area_sqkm
                },
                'geometry': mapping(p.geometry)
            }
            for p in sorted(candidates, key=lambda p: (p.zone_label, p.sequence))
        ]
        return {'type': 'FeatureCollection', 'features': features}
