import pytest

from models.zoning import ZoneCode, UnknownZone
from backend.zone_normalizer import ZoneCodeNormalizer, normalize_zone_label


@pytest.mark.parametrize("label, expected", [
    ("R1-Low density residential zone", ZoneCode.R1),
    ("Low Density Residential Densification Zone", ZoneCode.R1A),
    ("W3 - Sustainable Exploitation", ZoneCode.W3),
    ("Agriculture Zone", ZoneCode.A1),
    ("A1-Agriculture zone", ZoneCode.A1),
    ("P3C-Steep slopes (> 30%) zone", ZoneCode.P3C),
    ("WR-Waterbody zone", ZoneCode.WR),
])
def test_known_label_variants(label, expected):
    assert normalize_zone_label(label) == expected


@pytest.mark.parametrize("label, expected", [
    ("R1A-Low density residential densification (revised)", ZoneCode.R1A),
    ("PF2 Health facilities - district hospital", ZoneCode.PF2),
    ("C3", ZoneCode.C3),
])
def test_prefix_extraction(label, expected):
    assert normalize_zone_label(label) == expected


def test_unrecognised_label_is_unknown_zone():
    result = normalize_zone_label("Special Economic Zone")
    assert isinstance(result, UnknownZone)
    assert result.raw_label == "Special Economic Zone"


def test_prefix_not_in_known_codes_is_unknown():
    # "X9" looks like a code but is not a known zone
    assert normalize_zone_label("X9-Experimental zone") == UnknownZone(raw_label="X9-Experimental zone")


@pytest.mark.parametrize("label", [None, ""])
def test_empty_label(label):
    assert normalize_zone_label(label) == UnknownZone(raw_label="")


@pytest.mark.parametrize("code", list(ZoneCode))
def test_normalize_is_idempotent_for_canonical_codes(code):
    once = normalize_zone_label(code.value)
    assert once == code
    assert normalize_zone_label(once) == once


def test_unknown_zone_passes_through():
    unknown = UnknownZone(raw_label="Mystery")
    assert normalize_zone_label(unknown) is unknown


def test_custom_known_codes_limit_prefix_matching():
    normalizer = ZoneCodeNormalizer(label_variants={}, known_codes=["R1"])
    assert normalizer.normalize("R1-anything") == ZoneCode.R1
    assert isinstance(normalizer.normalize("C1-Mixed use zone"), UnknownZone)
