"""
Zoning Service
Entry points used by the API layer: resolve a location and list nearby zones
"""

import logging
from typing import List, Optional

from config import Config
from models.spatial import LocationSpatialData, SpatialQueryResult
from backend.geometry_store import ZoningGeometryStore
from backend.spatial_resolver import SpatialResolver
from backend.context_assembler import RegulatoryContextAssembler
from knowledge_base import KigaliKnowledgeBase, get_knowledge_base
from utils.cache_manager import ResponseCache, CacheSweeper

logger = logging.getLogger(__name__)


class ZoningService:
    """Wires the geometry store, knowledge base and response cache together

    Store and cache handles are injected; open() loads polygons, opens the cache and
    starts the sweeper, close() reverses it.
    """

    def __init__(self, store: ZoningGeometryStore, knowledge_base: Optional[KigaliKnowledgeBase] = None,
                 cache: Optional[ResponseCache] = None, sweep_interval: Optional[float] = None,
                 store_timeout: Optional[float] = None):
        self.store = store
        self.knowledge_base = knowledge_base or get_knowledge_base()
        self.cache = cache
        self.resolver = SpatialResolver(store, timeout=store_timeout)
        self.assembler = RegulatoryContextAssembler(self.resolver, self.knowledge_base)
        self.sweeper = CacheSweeper(cache, interval=sweep_interval) if cache is not None else None

    @classmethod
    def from_config(cls, cache: Optional[ResponseCache] = None) -> "ZoningService":
        """Build a service over the configured GeoJSON file"""
        return cls(
            store=ZoningGeometryStore(source=Config.ZONING_GEOJSON_FILE),
            cache=cache,
            sweep_interval=Config.CACHE_SWEEP_INTERVAL,
            store_timeout=Config.STORE_TIMEOUT
        )

    def open(self) -> "ZoningService":
        if not self.store.is_loaded:
            self.store.open()
        if self.cache is not None:
            self.cache.open()
            self.sweeper.start()
        logger.info(f"Zoning service ready with {len(self.store)} polygons")
        return self

    def close(self):
        if self.sweeper is not None:
            self.sweeper.stop()
        if self.cache is not None:
            self.cache.close()
        self.store.close()
        logger.info("Zoning service closed")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def resolve_location(self, lat: float, lng: float) -> LocationSpatialData:
        """Zone and regulatory context for a coordinate"""
        return self.assembler.assemble(lat, lng)

    async def aresolve_location(self, lat: float, lng: float, timeout: Optional[float] = None) -> LocationSpatialData:
        return await self.assembler.aassemble(lat, lng, timeout=timeout)

    def find_nearby(self, lat: float, lng: float, radius_meters: float = None,
                    limit: int = None) -> List[SpatialQueryResult]:
        """Zones within radius_meters, nearest first, for advisory display only"""
        radius_meters = Config.DEFAULT_NEARBY_RADIUS if radius_meters is None else radius_meters
        limit = Config.DEFAULT_NEARBY_LIMIT if limit is None else limit
        return self.resolver.find_nearest(lat, lng, radius_meters, limit)

    async def afind_nearby(self, lat: float, lng: float, radius_meters: float = None, limit: int = None,
                           timeout: Optional[float] = None) -> List[SpatialQueryResult]:
        radius_meters = Config.DEFAULT_NEARBY_RADIUS if radius_meters is None else radius_meters
        limit = Config.DEFAULT_NEARBY_LIMIT if limit is None else limit
        return await self.resolver.afind_nearest(lat, lng, radius_meters, limit, timeout=timeout)
