"""Shared fixtures: a small set of zoning polygons around Kigali city centre"""

import pytest

from backend.geometry_store import ZoningGeometryStore
from backend.spatial_resolver import SpatialResolver
from backend.zoning_service import ZoningService
from knowledge_base import KigaliKnowledgeBase
from utils.cache_manager import ResponseCache, SQLiteCacheBackend

CITY_CENTRE = (-1.9441, 30.0619)


def square(west, south, east, north):
    return {
        'type': 'Polygon',
        'coordinates': [[[west, south], [east, south], [east, north], [west, north], [west, south]]]
    }


def feature(label, geometry, **properties):
    props = {'new_zoning': label}
    props.update(properties)
    return {'type': 'Feature', 'properties': props, 'geometry': geometry}


@pytest.fixture
def kigali_features():
    return [
        feature("R1-Low density residential zone", square(30.058, -1.948, 30.066, -1.940),
                zone_code="R1", phase="Phase 1", level_1="Residential", level_2="Low density",
                area_sqkm=0.79, objectid_1=101, globalid="{A1}"),
        feature("C1-Mixed use zone", square(30.066, -1.948, 30.072, -1.940),
                zone_code="C1", phase="Phase 1", level_1="Commercial", level_2="Mixed use",
                area_sqkm=0.59, objectid_1=102),
        feature("R3-Medium density residential - Expansion zone", square(30.058, -1.956, 30.066, -1.948),
                zone_code="R3", phase="Phase 2", level_1="Residential", level_2="Medium density",
                area_sqkm=0.79, objectid_1=103),
        feature("I1-Light industrial zone", square(30.100, -1.950, 30.110, -1.940),
                zone_code="I1", phase="Phase 2", level_1="Industrial", area_sqkm=1.2, objectid_1=104),
        feature("Special Economic Zone", square(30.080, -1.930, 30.085, -1.925),
                phase="Phase 3", level_1="Industrial", area_sqkm=0.3, objectid_1=105),
    ]


@pytest.fixture
def feature_collection(kigali_features):
    return {'type': 'FeatureCollection', 'features': kigali_features}


@pytest.fixture
def store(kigali_features):
    store = ZoningGeometryStore()
    store.clear_and_reload(kigali_features)
    return store


@pytest.fixture
def resolver(store):
    return SpatialResolver(store)


@pytest.fixture
def knowledge_base():
    return KigaliKnowledgeBase()


@pytest.fixture
def service(store, knowledge_base):
    return ZoningService(store=store, knowledge_base=knowledge_base)


class FakeClock:
    """Manually advanced clock for expiry tests"""

    def __init__(self, start=1_700_000_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sqlite_cache(tmp_path, clock):
    cache = ResponseCache(backend=SQLiteCacheBackend(tmp_path / "responses.db"), clock=clock)
    cache.open()
    yield cache
    cache.close()
