import math

import pytest

from utils.validators import (
    LocationValidator, ValidationError, require_valid_coordinates, sanitize_string, validate_ask_input
)


@pytest.mark.parametrize("lat, lng", [(-1.9441, 30.0619), (-3.0, 28.0), (-1.0, 31.0), ("-1.95", "30.1")])
def test_valid_coordinates(lat, lng):
    assert LocationValidator.validate_coordinates(lat, lng) == (True, None)


@pytest.mark.parametrize("lat, lng, fragment", [
    (0.0, 0.0, "outside the Kigali service area"),
    (-1.95, 32.0, "outside the Kigali service area"),
    (-95.0, 30.0, "between -90 and 90"),
    (-1.95, 190.0, "between -180 and 180"),
    (math.nan, 30.0, "finite"),
    ("abc", 30.0, "must be numbers"),
    (None, 30.0, "must be numbers"),
    (True, 30.0, "must be numbers"),
])
def test_invalid_coordinates(lat, lng, fragment):
    is_valid, error = LocationValidator.validate_coordinates(lat, lng)
    assert not is_valid
    assert fragment in error


def test_require_valid_coordinates():
    assert require_valid_coordinates("-1.9441", 30.0619) == (-1.9441, 30.0619)
    with pytest.raises(ValidationError):
        require_valid_coordinates(0.0, 0.0)


@pytest.mark.parametrize("radius, limit, ok", [
    (1000, 5, True),
    (0, 5, False),
    (50_000, 5, False),
    (1000, 0, False),
    (1000, 100, False),
    (1000, 2.5, False),
])
def test_nearby_params(radius, limit, ok):
    assert LocationValidator.validate_nearby_params(radius, limit)[0] is ok


def test_language_and_question():
    assert LocationValidator.validate_language('rw')[0]
    assert not LocationValidator.validate_language('de')[0]
    assert not LocationValidator.validate_question("   ")[0]
    assert not LocationValidator.validate_question("x" * 1001)[0]


def test_sanitize_string():
    assert sanitize_string("  Can   I build <b>here</b>? ") == "Can I build bhere/b?"
    assert sanitize_string("abcdef", max_length=3) == "abc"


def test_validate_ask_input():
    assert validate_ask_input({'question': "Can I open a shop?", 'latitude': -1.9441, 'longitude': 30.0619}) == {}

    errors = validate_ask_input({'question': "", 'latitude': 0, 'longitude': 0, 'language': 'de'})
    assert set(errors) == {'question', 'coordinates', 'language'}
