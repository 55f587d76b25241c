"""Spatial data models for zone resolution"""

from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field
from pydantic import BaseModel, Field
from shapely.geometry.base import BaseGeometry

from .zoning import ZoneRegulation, DevelopmentParams


@dataclass
class ZoningPolygon:
    """A zoning polygon as bulk-loaded from the source GeoJSON

    Geometry is kept in geographic (lng, lat) order.
    """
    zone_label: str
    geometry: BaseGeometry
    sequence: int
    zone_code: Optional[str] = None
    phase: Optional[str] = None
    level_1: Optional[str] = None
    level_2: Optional[str] = None
    level_3: Optional[str] = None
    area_sqkm: Optional[float] = None
    year_of_implementation: Optional[str] = None
    object_id: Optional[Any] = None
    global_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def attributes(self) -> Dict[str, Any]:
        """Raw administrative attributes, passed through untouched"""
        return {
            'objectid': self.object_id,
            'zone_name': self.zone_label,
            'zone_code': self.zone_code,
            'phase': self.phase,
            'level_1': self.level_1,
            'level_2': self.level_2,
            'level_3': self.level_3,
            'area_sqkm': self.area_sqkm,
            'year_of_implementation': self.year_of_implementation,
            'globalid': self.global_id,
            **self.extra
        }


class Location(BaseModel):
    """Location model"""
    lat: float
    lng: float


class SpatialQueryResult(BaseModel):
    """A polygon matched by a spatial query"""
    zone_label: str
    zone_code: Optional[str] = None
    attributes: Dict[str, Any] = {}
    distance_meters: float = Field(0.0, ge=0, description="0 when the point is contained")
    area_sq_meters: float = Field(0.0, ge=0)
    source: str = "exact_match"

    @property
    def is_contained(self) -> bool:
        return self.distance_meters == 0


class LocationSpatialData(BaseModel):
    """Assembled regulatory context for a coordinate"""
    location: Location
    zone_data: Optional[SpatialQueryResult] = None
    nearby_features: List[SpatialQueryResult] = []
    zone_code: Optional[str] = None
    regulation: Optional[ZoneRegulation] = None
    development_params: Optional[DevelopmentParams] = None
    message: Optional[str] = None

    @property
    def has_coverage(self) -> bool:
        return self.zone_data is not None

    @property
    def has_regulation(self) -> bool:
        return self.regulation is not None

    def get_summary(self) -> Dict[str, Any]:
        """Get a compact summary of the context"""
        return {
            'coordinates': (self.location.lat, self.location.lng),
            'zone': self.zone_data.zone_label if self.zone_data else None,
            'zone_code': self.zone_code,
            'zone_name': self.regulation.full_name if self.regulation else None,
            'has_coverage': self.has_coverage,
            'has_regulation': self.has_regulation
        }
