"""Data models for the Kigali Zoning Assistant"""

from .zoning import (
    ZoneCode, UnknownZone, ZoneIdentity, UseStatus, Setbacks, DensityRange, Density,
    LotSize, MaxFloors, ConditionalUse, UsePermissions, ZoneRegulation,
    DevelopmentParams, UseClassification
)
from .spatial import ZoningPolygon, Location, SpatialQueryResult, LocationSpatialData

__all__ = [
    'ZoneCode',
    'UnknownZone',
    'ZoneIdentity',
    'UseStatus',
    'Setbacks',
    'DensityRange',
    'Density',
    'LotSize',
    'MaxFloors',
    'ConditionalUse',
    'UsePermissions',
    'ZoneRegulation',
    'DevelopmentParams',
    'UseClassification',
    'ZoningPolygon',
    'Location',
    'SpatialQueryResult',
    'LocationSpatialData'
]
