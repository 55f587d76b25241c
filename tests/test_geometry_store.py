import json

import pytest

from backend.errors import StoreUnavailableError
from backend.geometry_store import ZoningGeometryStore
from utils.coordinate_geometry import to_point
from tests.conftest import CITY_CENTRE, feature, square


def test_load_geojson_from_dict(feature_collection):
    store = ZoningGeometryStore()
    assert store.load_geojson(feature_collection) == 5
    assert store.is_loaded
    assert len(store) == 5


def test_load_geojson_from_file(tmp_path, feature_collection):
    path = tmp_path / "zones.geojson"
    path.write_text(json.dumps(feature_collection), encoding='utf-8')

    store = ZoningGeometryStore(source=path)
    with store:
        assert len(store) == 5
    assert not store.is_loaded


def test_missing_file_is_store_unavailable(tmp_path):
    store = ZoningGeometryStore(source=tmp_path / "missing.geojson")
    with pytest.raises(StoreUnavailableError):
        store.open()


def test_queries_before_load_raise():
    store = ZoningGeometryStore()
    with pytest.raises(StoreUnavailableError):
        store.contains(to_point(*CITY_CENTRE))


def test_features_without_polygon_or_label_are_skipped(kigali_features):
    store = ZoningGeometryStore()
    features = kigali_features + [
        {'type': 'Feature', 'properties': {'new_zoning': "R1"}, 'geometry': None},
        {'type': 'Feature', 'properties': {'new_zoning': "R1"},
         'geometry': {'type': 'Point', 'coordinates': [30.06, -1.94]}},
        {'type': 'Feature', 'properties': {}, 'geometry': square(30.0, -2.0, 30.01, -1.99)},
    ]
    assert store.clear_and_reload(features) == 5


def test_uppercase_property_names():
    store = ZoningGeometryStore()
    store.clear_and_reload([{
        'type': 'Feature',
        'properties': {'NEW_ZONING': "C1-Mixed use zone", 'OBJECTID_1': 7, 'Shape_Leng': 12.5},
        'geometry': square(30.0, -2.0, 30.01, -1.99)
    }])
    polygon = store.contains(to_point(-1.995, 30.005))[0]
    assert polygon.zone_label == "C1-Mixed use zone"
    assert polygon.object_id == 7
    assert polygon.attributes()['shape_leng'] == 12.5


def test_clear_and_reload_replaces_everything(store):
    store.clear_and_reload([feature("U-Utility zone", square(29.0, -2.5, 29.01, -2.49))])
    assert len(store) == 1
    assert store.contains(to_point(*CITY_CENTRE)) == []


def test_sequences_increase_across_reloads(store, kigali_features):
    first = store.contains(to_point(*CITY_CENTRE))[0].sequence
    store.clear_and_reload(kigali_features)
    assert store.contains(to_point(*CITY_CENTRE))[0].sequence > first


def test_contains(store):
    hits = store.contains(to_point(*CITY_CENTRE))
    assert [p.zone_label for p in hits] == ["R1-Low density residential zone"]


def test_within_distance_orders_by_distance(store):
    results = store.within_distance(to_point(*CITY_CENTRE), 1000, 5)
    labels = [p.zone_label for p, _ in results]
    distances = [d for _, d in results]

    assert labels[0] == "R1-Low density residential zone"
    assert distances[0] == 0
    assert distances == sorted(distances)
    assert all(d <= 1000 for d in distances)
    assert "I1-Light industrial zone" not in labels


def test_within_distance_limit(store):
    assert len(store.within_distance(to_point(*CITY_CENTRE), 5000, 2)) == 2


def test_projected_geometry_is_cached_per_load(store, kigali_features):
    polygon = store.contains(to_point(*CITY_CENTRE))[0]
    projected = store.projected(polygon)
    assert store.projected(polygon) is projected

    store.clear_and_reload(kigali_features)
    reloaded = store.contains(to_point(*CITY_CENTRE))[0]
    assert store.projected(reloaded) is not projected
    assert store.projected(reloaded).area == pytest.approx(projected.area)


def test_area_in_square_meters(store):
    polygon = store.contains(to_point(*CITY_CENTRE))[0]
    # 0.008 x 0.008 degrees near the equator is roughly 0.79 km²
    assert store.area_sq_meters(polygon) == pytest.approx(790_000, rel=0.05)


def test_zone_summary(store):
    summary = store.zone_summary()
    assert len(summary) == 5
    assert summary[0]['zone_name'] == "C1-Mixed use zone"
    assert all(row['feature_count'] == 1 for row in summary)


def test_search(store):
    rows = store.search("residential")
    assert {row['zone_name'] for row in rows} == {
        "R1-Low density residential zone",
        "R3-Medium density residential - Expansion zone"
    }
    assert store.search("c1")[0]['zone_code'] == "C1"
    assert store.search("") == []
    assert len(store.search("zone", limit=2)) == 2


def test_stats(store):
    stats = store.stats()
    assert stats['total_features'] == 5
    assert stats['unique_zones'] == 5
    assert len(stats['top_zones']) == 5


def test_zones_by_phase(store):
    rows = store.zones_by_phase("Phase 2")
    assert {row['zone_name'] for row in rows} == {
        "R3-Medium density residential - Expansion zone", "I1-Light industrial zone"
    }
    assert sum(row['total_area'] for row in rows) == pytest.approx(1.99)
    assert len(store.zones_by_phase()) == 5


def test_boundaries_filters(store):
    everything = store.boundaries()
    assert everything['type'] == 'FeatureCollection'
    assert len(everything['features']) == 5

    named = store.boundaries(zone_names=["C1-Mixed use zone"])
    assert [f['properties']['zone_name'] for f in named['features']] == ["C1-Mixed use zone"]

    boxed = store.boundaries(bounds={'north': -1.941, 'south': -1.947, 'east': 30.065, 'west': 30.059})
    assert [f['properties']['zone_name'] for f in boxed['features']] == ["R1-Low density residential zone"]

    both = store.boundaries(zone_names=["C1-Mixed use zone"],
                            bounds={'north': -1.941, 'south': -1.947, 'east': 30.065, 'west': 30.059})
    assert both['features'] == []
