"""
Input validation utilities
Caller-side precondition checks, applied before requests reach the zoning core
"""

import re
import math
from typing import Tuple, Optional, Dict, Any
from config import Config


class ValidationError(Exception):
    """Custom validation error"""
    pass


SUPPORTED_LANGUAGES = ('en', 'rw', 'fr')


class LocationValidator:
    """Validator for location query inputs"""

    @staticmethod
    def validate_coordinates(lat: Any, lng: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate latitude and longitude coordinates

        Args:
            lat: Latitude
            lng: Longitude

        Returns:
            Tuple of (is_valid, error_message)
        """
        if isinstance(lat, bool) or isinstance(lng, bool):
            return False, "Latitude and longitude must be numbers"
        try:
            lat = float(lat)
            lng = float(lng)
        except (TypeError, ValueError):
            return False, "Latitude and longitude must be numbers"

        if not (math.isfinite(lat) and math.isfinite(lng)):
            return False, "Latitude and longitude must be finite numbers"

        # Basic coordinate validation
        if not (-90 <= lat <= 90):
            return False, f"Latitude must be between -90 and 90, got {lat}"

        if not (-180 <= lng <= 180):
            return False, f"Longitude must be between -180 and 180, got {lng}"

        # Service area (approximate bounds of Rwanda)
        bounds = Config.SERVICE_BOUNDS

        if not (bounds['lat_min'] <= lat <= bounds['lat_max']):
            return False, f"Latitude {lat} appears to be outside the Kigali service area"

        if not (bounds['lon_min'] <= lng <= bounds['lon_max']):
            return False, f"Longitude {lng} appears to be outside the Kigali service area"

        return True, None

    @staticmethod
    def validate_nearby_params(radius_meters: Any, limit: Any) -> Tuple[bool, Optional[str]]:
        """Validate search radius and result limit for nearby zone queries"""
        if isinstance(radius_meters, bool) or not isinstance(radius_meters, (int, float)):
            return False, "Radius must be a number"
        if not math.isfinite(radius_meters) or radius_meters <= 0:
            return False, f"Radius must be a positive number of meters, got {radius_meters}"
        if radius_meters > Config.MAX_NEARBY_RADIUS:
            return False, f"Radius must not exceed {Config.MAX_NEARBY_RADIUS} meters"

        if isinstance(limit, bool) or not isinstance(limit, int):
            return False, "Limit must be an integer"
        if not (1 <= limit <= Config.MAX_NEARBY_LIMIT):
            return False, f"Limit must be between 1 and {Config.MAX_NEARBY_LIMIT}, got {limit}"

        return True, None

    @staticmethod
    def validate_language(language: Any) -> Tuple[bool, Optional[str]]:
        if language not in SUPPORTED_LANGUAGES:
            return False, f"Unsupported language: {language}. Use one of {', '.join(SUPPORTED_LANGUAGES)}"
        return True, None

    @staticmethod
    def validate_question(question: Any) -> Tuple[bool, Optional[str]]:
        if not isinstance(question, str) or not question.strip():
            return False, "Question must be a non-empty string"
        if len(question) > Config.MAX_QUESTION_LENGTH:
            return False, f"Question is too long (max {Config.MAX_QUESTION_LENGTH} characters)"
        return True, None


def sanitize_string(text: str, max_length: int = 1000) -> str:
    """
    Sanitize string input

    Args:
        text: Input text
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if not isinstance(text, str):
        return str(text)

    # Remove excessive whitespace
    text = re.sub(r'\s+', ' ', text.strip())

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length].strip()

    # Remove potentially harmful characters (basic sanitization)
    text = re.sub(r'[<>{}]', '', text)

    return text


def require_valid_coordinates(lat: Any, lng: Any) -> Tuple[float, float]:
    """Validate coordinates and return them as floats, raising ValidationError otherwise"""
    is_valid, error = LocationValidator.validate_coordinates(lat, lng)
    if not is_valid:
        raise ValidationError(error)
    return float(lat), float(lng)


def validate_ask_input(data: Dict[str, Any]) -> Dict[str, str]:
    """
    Validate an "ask" request payload

    Args:
        data: Dictionary with question, latitude, longitude and optional language

    Returns:
        Dictionary of field name to error message, empty when valid
    """
    errors = {}
    validator = LocationValidator()

    is_valid, error = validator.validate_question(data.get('question'))
    if not is_valid:
        errors['question'] = error

    is_valid, error = validator.validate_coordinates(data.get('latitude'), data.get('longitude'))
    if not is_valid:
        errors['coordinates'] = error

    is_valid, error = validator.validate_language(data.get('language', Config.DEFAULT_LANGUAGE))
    if not is_valid:
        errors['language'] = error

    return errors
