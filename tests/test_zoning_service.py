import asyncio
import json

import pytest

from backend.errors import StoreUnavailableError
from backend.geometry_store import ZoningGeometryStore
from backend.zoning_service import ZoningService
from tests.conftest import CITY_CENTRE


def test_resolve_location_city_centre(service):
    context = service.resolve_location(*CITY_CENTRE)
    assert context.zone_data.zone_label == "R1-Low density residential zone"
    assert context.zone_data.distance_meters == 0
    assert context.zone_code == "R1"


def test_resolve_location_far_outside(service):
    context = service.resolve_location(0.0, 0.0)
    assert context.zone_data is None
    assert context.nearby_features == []


def test_find_nearby(service):
    results = service.find_nearby(*CITY_CENTRE, 1000, 5)
    distances = [r.distance_meters for r in results]
    assert len(results) <= 5
    assert distances == sorted(distances)
    assert all(d <= 1000 for d in distances)


def test_find_nearby_defaults(service):
    assert len(service.find_nearby(*CITY_CENTRE)) == 3


def test_async_entry_points(service):
    async def scenario():
        context = await service.aresolve_location(*CITY_CENTRE, timeout=5)
        nearby = await service.afind_nearby(*CITY_CENTRE, 1000, 5, timeout=5)
        return context, nearby

    context, nearby = asyncio.run(scenario())
    assert context.zone_code == "R1"
    assert len(nearby) == 3


def test_lifecycle(tmp_path, feature_collection, knowledge_base, sqlite_cache):
    path = tmp_path / "zones.geojson"
    path.write_text(json.dumps(feature_collection), encoding='utf-8')
    service = ZoningService(ZoningGeometryStore(source=path), knowledge_base=knowledge_base,
                            cache=sqlite_cache, sweep_interval=3600)

    with service:
        assert service.sweeper.is_running
        assert service.resolve_location(*CITY_CENTRE).zone_code == "R1"

    assert not service.sweeper.is_running
    with pytest.raises(StoreUnavailableError):
        service.resolve_location(*CITY_CENTRE)


def test_open_without_source_fails(knowledge_base):
    with pytest.raises(StoreUnavailableError):
        ZoningService(ZoningGeometryStore(), knowledge_base=knowledge_base).open()
