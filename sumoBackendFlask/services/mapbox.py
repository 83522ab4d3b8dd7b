"""
Mapbox Map Matching service.

Long traces are split into chunks the API accepts; consecutive chunks share
their boundary coordinate, and the stitched path drops the repeated point.
Any failure fails the whole trace so callers never mix strategies.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Any, List, Optional

import requests

from ..config import MAPBOX_ACCESS_TOKEN, MAPBOX_BASE_URL, MAPBOX_PROFILE, MAPBOX_MAX_COORDS
from ..errors import MapMatchError
from ..utils.geo import LatLngPoint, parse_lng_lat, to_lng_lat_param
from ..utils.http import http_get, http_status
from ..logger import get_logger

log = get_logger(__name__)

GetJson = Callable[..., Dict[str, Any]]

@dataclass(frozen=True)
class MatchResult:
    points: Optional[List[LatLngPoint]] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.points is not None

    @classmethod
    def success(cls, points: List[LatLngPoint]) -> "MatchResult":
        return cls(points=points)

    @classmethod
    def failure(cls, reason: str) -> "MatchResult":
        return cls(reason=reason)

def chunk_points(points: List[LatLngPoint], size: int) -> List[List[LatLngPoint]]:
    """Split into chunks of at most `size` points, each starting on the previous chunk's last point"""
    if size < 2:
        raise ValueError(f"chunk size must be at least 2, got {size}")
    if len(points) < 2:
        return [list(points)]
    stride = size - 1
    return [points[i:i + size] for i in range(0, len(points) - 1, stride)]

def _match_chunk(chunk: List[LatLngPoint], token: str, get_json: GetJson) -> List[LatLngPoint]:
    url = f"{MAPBOX_BASE_URL}/matching/v5/{MAPBOX_PROFILE}/{to_lng_lat_param(chunk)}"
    params = {
        "geometries": "geojson",
        "overview": "full",
        "tidy": "true",
        "access_token": token,
    }
    try:
        data = get_json(url, params=params)
    except requests.HTTPError as e:
        status = http_status(e)
        if status is None:
            raise MapMatchError("MAPBOX_MATCH_REQUEST_FAILED", str(e)) from e
        raise MapMatchError(f"MAPBOX_MATCH_HTTP_{status}") from e
    except ValueError as e:
        raise MapMatchError("MAPBOX_MATCH_BAD_JSON", str(e)) from e
    except requests.RequestException as e:
        raise MapMatchError("MAPBOX_MATCH_REQUEST_FAILED", str(e)) from e

    if not isinstance(data, dict):
        raise MapMatchError("MAPBOX_MATCH_BAD_JSON", "body is not an object")

    code = data.get("code")
    if code != "Ok":
        msg = data.get("message")
        raise MapMatchError(f"MAPBOX_MATCH_{code or 'FAILED'}" + (f": {msg}" if msg else ""))

    matchings = data.get("matchings")
    first = matchings[0] if isinstance(matchings, list) and matchings else None
    geometry = first.get("geometry") if isinstance(first, dict) else None
    coords = geometry.get("coordinates") if isinstance(geometry, dict) else None
    if not isinstance(coords, list) or len(coords) < 2:
        raise MapMatchError("MAPBOX_MATCH_NO_GEOMETRY")

    matched = [p for p in (parse_lng_lat(pair) for pair in coords) if p is not None]
    if len(matched) < 2:
        raise MapMatchError("MAPBOX_MATCH_INVALID_GEOMETRY")
    return matched

def match_trace(points: List[LatLngPoint], token: Optional[str] = None, get_json: GetJson = http_get,
                max_coords: int = MAPBOX_MAX_COORDS) -> MatchResult:
    """Map-match a whole trace; returns a failed MatchResult instead of raising"""
    token = (token if token is not None else MAPBOX_ACCESS_TOKEN).strip()
    if not token:
        return MatchResult.failure("MAPBOX_ACCESS_TOKEN_MISSING")

    chunks = chunk_points(points, max_coords)
    snapped: List[LatLngPoint] = []
    try:
        for idx, chunk in enumerate(chunks):
            if len(chunk) < 2:
                snapped.extend(chunk)
                continue
            matched = _match_chunk(chunk, token, get_json)
            if snapped:
                matched = matched[1:]
            snapped.extend(matched)
            log.debug(f"[map_match] chunk {idx + 1}/{len(chunks)}: {len(chunk)} in, {len(matched)} kept")
    except MapMatchError as e:
        log.warning(f"[map_match] chunk {idx + 1}/{len(chunks)} failed: {e}")
        return MatchResult.failure(e.code)

    if len(snapped) < 2:
        return MatchResult.failure("MAPBOX_MATCH_OUTPUT_TOO_SHORT")
    return MatchResult.success(snapped)
