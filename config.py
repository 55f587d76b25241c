"""
Configuration module for the Kigali Zoning Assistant
Manages all application settings and constants
"""

import os
import logging
from typing import Dict, Any
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables
load_dotenv()


class Config:
    """Application configuration"""

    # Data paths
    BASE_DIR = Path(__file__).parent
    DATA_PATH = Path(os.getenv("DATA_PATH", BASE_DIR / "data"))
    CACHE_PATH = Path(os.getenv("CACHE_PATH", BASE_DIR / "cache"))

    # Data files
    ZONING_GEOJSON_FILE = Path(os.getenv("ZONING_GEOJSON_FILE", DATA_PATH / "kigali_zoning.geojson"))
    CACHE_DB_PATH = Path(os.getenv("CACHE_DB_PATH", CACHE_PATH / "ai_responses.db"))

    # Response cache configuration
    CACHE_BACKEND = os.getenv("CACHE_BACKEND", "sqlite")  # sqlite | redis
    CACHE_TTL = 86400  # 24 hours
    CACHE_SWEEP_INTERVAL = int(os.getenv("CACHE_SWEEP_INTERVAL", 3600))  # hourly
    CACHE_TIMEOUT = float(os.getenv("CACHE_TIMEOUT", 2.0))  # seconds

    REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT = int(os.getenv("REDIS_PORT", 6379))
    REDIS_DB = int(os.getenv("REDIS_DB", 0))
    REDIS_PASSWORD = os.getenv("REDIS_PASSWORD") or None

    # Geometry store configuration
    STORE_TIMEOUT = float(os.getenv("STORE_TIMEOUT", 5.0))  # seconds
    PROJECTED_CRS = "EPSG:32736"  # WGS 84 / UTM zone 36S (30°E to 36°E), covers Kigali

    # Service area (approximate bounds of Rwanda)
    SERVICE_BOUNDS = {
        'lat_min': -3.0,
        'lat_max': -1.0,
        'lon_min': 28.0,
        'lon_max': 31.0
    }

    # Nearby zones defaults
    DEFAULT_NEARBY_RADIUS = 1000  # meters
    DEFAULT_NEARBY_LIMIT = 5
    MAX_NEARBY_RADIUS = 10000  # meters
    MAX_NEARBY_LIMIT = 20
    MAX_QUESTION_LENGTH = 1000

    # LLM configuration
    GROQ_API_KEY = os.getenv("GROQ_API_KEY", "")
    LLM_MODEL = os.getenv("LLM_MODEL", "llama-3.3-70b-versatile")
    LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", 2500))
    LLM_TEMPERATURE = 0.1  # Low temperature for factual responses
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 30))  # seconds
    DEFAULT_LANGUAGE = "en"

    # Contact details quoted in answers
    OSC_PHONE = "+250 788 000 000"
    OSC_WEBSITE = "kigalicity.gov.rw"
    PERMITS_WEBSITE = "https://kubaka.gov.rw/"
    REGULATION_SOURCE = "Kigali City Zoning Regulations (August 2020)"

    # Development Configuration
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")

    @classmethod
    def get_config_dict(cls) -> Dict[str, Any]:
        """Get configuration as dictionary"""
        return {
            key: value for key, value in cls.__dict__.items()
            if not key.startswith('_') and not callable(value)
            and not isinstance(value, (classmethod, staticmethod))
            and 'KEY' not in key and 'PASSWORD' not in key
        }


# Initialize configuration
config = Config()


def setup_logging(level: str = None):
    """Configure root logging for the application"""
    level_name = (level or Config.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )
