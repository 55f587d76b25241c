"""
Regulatory Context Assembler
Combines the containing zone of a coordinate with its regulations from the knowledge base
"""

import logging
from typing import Optional

from models.zoning import ZoneCode, ZoneIdentity
from models.spatial import Location, LocationSpatialData, SpatialQueryResult
from backend.spatial_resolver import SpatialResolver
from backend.zone_normalizer import ZoneCodeNormalizer

logger = logging.getLogger(__name__)

NO_COVERAGE_MESSAGE = "No zoning data found for this location"


class RegulatoryContextAssembler:
    """Build the regulatory context for a coordinate"""

    def __init__(self, resolver: SpatialResolver, knowledge_base, normalizer: Optional[ZoneCodeNormalizer] = None):
        self.resolver = resolver
        self.knowledge_base = knowledge_base
        self.normalizer = normalizer or ZoneCodeNormalizer()

    def assemble(self, lat: float, lng: float) -> LocationSpatialData:
        zone_data = self.resolver.find_containing_zone(lat, lng)
        return self._build(lat, lng, zone_data)

    async def aassemble(self, lat: float, lng: float, timeout: Optional[float] = None) -> LocationSpatialData:
        """Async variant; store timeouts and failures propagate unchanged"""
        zone_data = await self.resolver.afind_containing_zone(lat, lng, timeout=timeout)
        return self._build(lat, lng, zone_data)

    def _build(self, lat: float, lng: float, zone_data: Optional[SpatialQueryResult]) -> LocationSpatialData:
        location = Location(lat=lat, lng=lng)

        if zone_data is None:
            return LocationSpatialData(location=location, zone_data=None, nearby_features=[],
                                       message=NO_COVERAGE_MESSAGE)

        identity: ZoneIdentity = self.normalizer.normalize(zone_data.zone_label)
        if not isinstance(identity, ZoneCode):
            logger.warning(f"Zone label {zone_data.zone_label!r} has no regulations in the knowledge base")
            return LocationSpatialData(location=location, zone_data=zone_data, nearby_features=[])

        regulation = self.knowledge_base.lookup(identity)
        if regulation is None:
            logger.warning(f"No regulations loaded for zone {identity.value}")

        return LocationSpatialData(
            location=location,
            zone_data=zone_data,
            nearby_features=[],
            zone_code=identity.value,
            regulation=regulation,
            development_params=self.knowledge_base.development_params(identity)
        )
