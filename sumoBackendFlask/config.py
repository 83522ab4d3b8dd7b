"""
Configuration management for the Sumo roads backend

Values come from the environment first, then an optional config.json next
to this file, then the defaults below.
"""
import os
import json
from typing import Dict, Any
from pathlib import Path

CONFIG_FILE = Path(__file__).with_name("config.json")

class Config:
    def __init__(self, path: Path = CONFIG_FILE):
        self.path = path
        self._file_values: Dict[str, Any] = {}
        if path.exists():
            with path.open("r", encoding="utf-8") as f:
                self._file_values = json.load(f)

    def get(self, key: str, default: str = "") -> str:
        value = os.getenv(key)
        if value is None:
            value = self._file_values.get(key, default)
        return str(value)

    def get_int(self, key: str, default: int) -> int:
        return int(self.get(key, str(default)))

    def get_float(self, key: str, default: float) -> float:
        return float(self.get(key, str(default)))

config = Config()

# External routing services
MAPBOX_ACCESS_TOKEN  = config.get("MAPBOX_ACCESS_TOKEN", "").strip()
MAPBOX_BASE_URL      = config.get("MAPBOX_BASE_URL", "https://api.mapbox.com").strip().rstrip("/")
MAPBOX_PROFILE       = config.get("MAPBOX_PROFILE", "mapbox/driving").strip()
MAPBOX_MAX_COORDS    = config.get_int("MAPBOX_MAX_COORDS", 100)

OSRM_BASE_URL        = config.get("OSRM_BASE_URL", "https://router.project-osrm.org").strip().rstrip("/")
OSRM_PROFILE         = config.get("OSRM_PROFILE", "driving").strip()

HTTP_TIMEOUT         = config.get_float("HTTP_TIMEOUT", 15.0)

# Snapping knobs (request values are clamped into these bounds)
DEFAULT_STEPS_PER_SEGMENT = config.get_int("DEFAULT_STEPS_PER_SEGMENT", 30)
MIN_STEPS_PER_SEGMENT     = 1
MAX_STEPS_PER_SEGMENT     = 100

DEFAULT_DEDUPE_EPSILON    = config.get_float("DEFAULT_DEDUPE_EPSILON", 0.00001)
MIN_DEDUPE_EPSILON        = 0.000001
MAX_DEDUPE_EPSILON        = 0.01

CORS_ORIGINS         = [o.strip() for o in config.get("CORS_ORIGINS", "*").split(",")]
LOG_LEVEL            = config.get("LOG_LEVEL", "INFO").upper()

if MAPBOX_MAX_COORDS < 2:
    raise RuntimeError(f"MAPBOX_MAX_COORDS must be at least 2, got {MAPBOX_MAX_COORDS}")
