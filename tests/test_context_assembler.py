import asyncio
from unittest.mock import MagicMock, AsyncMock

import pytest

from backend.context_assembler import RegulatoryContextAssembler, NO_COVERAGE_MESSAGE
from backend.errors import StoreTimeoutError
from models.spatial import SpatialQueryResult
from models.zoning import ZoneCode, UseStatus
from tests.conftest import CITY_CENTRE


def make_assembler(result, knowledge_base=None):
    resolver = MagicMock()
    resolver.find_containing_zone.return_value = result
    resolver.afind_containing_zone = AsyncMock(return_value=result)
    kb = knowledge_base
    if kb is None:
        kb = MagicMock()
        kb.lookup.return_value = None
        kb.development_params.return_value = None
    return RegulatoryContextAssembler(resolver, kb), resolver, kb


def test_no_coverage_is_terminal():
    assembler, _, kb = make_assembler(None)
    context = assembler.assemble(0.0, 0.0)

    assert context.zone_data is None
    assert context.nearby_features == []
    assert context.regulation is None
    assert context.message == NO_COVERAGE_MESSAGE
    assert not context.has_coverage
    kb.lookup.assert_not_called()


def test_known_zone_is_enriched(knowledge_base):
    zone = SpatialQueryResult(zone_label="R1-Low density residential zone")
    assembler, _, _ = make_assembler(zone, knowledge_base)

    context = assembler.assemble(*CITY_CENTRE)
    assert context.zone_data == zone
    assert context.zone_code == "R1"
    assert context.regulation.full_name == "Low Density Residential Zone"
    assert context.development_params.max_floor_area_ratio == pytest.approx(0.5)
    assert context.location.lat == CITY_CENTRE[0]
    assert context.get_summary()['zone_name'] == "Low Density Residential Zone"


def test_lookup_receives_normalized_code():
    zone = SpatialQueryResult(zone_label="C3-City commercial zone")
    assembler, _, kb = make_assembler(zone)

    assembler.assemble(*CITY_CENTRE)
    kb.lookup.assert_called_once_with(ZoneCode.C3)
    kb.development_params.assert_called_once_with(ZoneCode.C3)


def test_unknown_label_degrades_gracefully():
    zone = SpatialQueryResult(zone_label="Special Economic Zone")
    assembler, _, kb = make_assembler(zone)

    context = assembler.assemble(*CITY_CENTRE)
    assert context.zone_data.zone_label == "Special Economic Zone"
    assert context.regulation is None
    assert context.development_params is None
    assert context.has_coverage
    kb.lookup.assert_not_called()


def test_async_assemble(knowledge_base):
    zone = SpatialQueryResult(zone_label="R1-Low density residential zone")
    assembler, resolver, _ = make_assembler(zone, knowledge_base)

    context = asyncio.run(assembler.aassemble(*CITY_CENTRE, timeout=1.0))
    assert context.zone_code == "R1"
    resolver.afind_containing_zone.assert_awaited_once_with(*CITY_CENTRE, timeout=1.0)


def test_async_timeout_propagates():
    resolver = MagicMock()
    resolver.afind_containing_zone = AsyncMock(side_effect=StoreTimeoutError('contains', 1.0))
    assembler = RegulatoryContextAssembler(resolver, MagicMock())

    with pytest.raises(StoreTimeoutError):
        asyncio.run(assembler.aassemble(*CITY_CENTRE))


def test_city_centre_scenario(service, knowledge_base):
    context = service.resolve_location(*CITY_CENTRE)
    assert context.zone_data.zone_label == "R1-Low density residential zone"
    assert context.zone_data.distance_meters == 0
    assert knowledge_base.classify_use(context.zone_code, "home occupation").status == UseStatus.PERMITTED
