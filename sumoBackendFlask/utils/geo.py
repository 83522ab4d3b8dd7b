"""
Geospatial utilities for GPS traces
"""
import math
from numbers import Real
from typing import List, NamedTuple, Optional, Any, Iterable, Mapping, Tuple

from ..config import (
    DEFAULT_STEPS_PER_SEGMENT, MIN_STEPS_PER_SEGMENT, MAX_STEPS_PER_SEGMENT,
    DEFAULT_DEDUPE_EPSILON, MIN_DEDUPE_EPSILON, MAX_DEDUPE_EPSILON,
)
from ..errors import InvalidTraceError

class LatLngPoint(NamedTuple):
    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}

def is_finite_number(value: Any) -> bool:
    """True for real, finite numbers; bools are not coordinates"""
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False

def _coords_of(candidate: Any) -> Optional[Tuple[Any, Any]]:
    if isinstance(candidate, LatLngPoint):
        return candidate.lat, candidate.lng
    if isinstance(candidate, Mapping):
        return candidate.get("lat"), candidate.get("lng")
    return None

def is_valid_point(candidate: Any) -> bool:
    """Check a {lat, lng} mapping (or LatLngPoint) for finite in-range coordinates"""
    coords = _coords_of(candidate)
    if coords is None:
        return False
    lat, lng = coords
    if not is_finite_number(lat) or not is_finite_number(lng):
        return False
    return -90 <= lat <= 90 and -180 <= lng <= 180

def parse_trace(raw: Any) -> List[LatLngPoint]:
    """
    Validate a raw trace and convert it to LatLngPoints.
    Raises InvalidTraceError; nothing is partially accepted.
    """
    if not isinstance(raw, (list, tuple)):
        raise InvalidTraceError("INVALID_BODY", "points must be a list")

    valid = [c for c in raw if is_valid_point(c)]
    if len(valid) < 2:
        raise InvalidTraceError("MIN_2_POINTS_REQUIRED", f"{len(valid)} valid point(s)")
    if len(valid) != len(raw):
        raise InvalidTraceError("INVALID_POINTS_FORMAT", f"{len(raw) - len(valid)} invalid point(s)")

    out = []
    for c in valid:
        lat, lng = _coords_of(c)
        out.append(LatLngPoint(float(lat), float(lng)))
    return out

def densify(points: List[LatLngPoint], steps_per_segment: int) -> List[LatLngPoint]:
    """Linearly interpolate `steps_per_segment` points per segment; endpoints are shared"""
    if len(points) < 2:
        return points

    dense = [points[0]]
    for frm, to in zip(points, points[1:]):
        for step in range(1, steps_per_segment + 1):
            t = step / steps_per_segment
            dense.append(LatLngPoint(frm.lat + (to.lat - frm.lat) * t,
                                     frm.lng + (to.lng - frm.lng) * t))
    return dense

def dedupe_near(points: List[LatLngPoint], epsilon: float) -> List[LatLngPoint]:
    """
    Collapse consecutive near-duplicates.
    A point survives when it differs from the last kept point by more than
    epsilon on either axis (per-axis, not Euclidean).
    """
    if not points:
        return list(points)

    kept = [points[0]]
    for cur in points[1:]:
        prev = kept[-1]
        if abs(cur.lat - prev.lat) > epsilon or abs(cur.lng - prev.lng) > epsilon:
            kept.append(cur)
    return kept

def clamp_steps(value: Any) -> int:
    """Round and clamp densification steps; junk falls back to the default"""
    if not is_finite_number(value):
        value = DEFAULT_STEPS_PER_SEGMENT
    # half-up, so 30.5 -> 31
    return max(MIN_STEPS_PER_SEGMENT, min(MAX_STEPS_PER_SEGMENT, int(math.floor(value + 0.5))))

def clamp_epsilon(value: Any) -> float:
    """Clamp dedupe epsilon; junk falls back to the default"""
    if not is_finite_number(value):
        value = DEFAULT_DEDUPE_EPSILON
    return max(MIN_DEDUPE_EPSILON, min(MAX_DEDUPE_EPSILON, float(value)))

def to_lng_lat_param(points: Iterable[LatLngPoint]) -> str:
    """Encode points as `lng,lat;lng,lat` (longitude first)"""
    return ";".join(f"{p.lng},{p.lat}" for p in points)

def parse_lng_lat(pair: Any) -> Optional[LatLngPoint]:
    """Parse a `[lng, lat, ...]` wire pair; None when unusable"""
    if not isinstance(pair, (list, tuple)) or len(pair) < 2:
        return None
    lng, lat = pair[0], pair[1]
    if not is_finite_number(lng) or not is_finite_number(lat):
        return None
    return LatLngPoint(float(lat), float(lng))
