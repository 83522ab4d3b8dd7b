"""
Trace snapping orchestrator: densify, map-match, fall back to nearest-road, dedupe
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from ..errors import NearestRoadError
from ..utils.geo import LatLngPoint, parse_trace, densify, dedupe_near, clamp_steps, clamp_epsilon
from ..utils.http import http_get
from .mapbox import GetJson, match_trace
from .osrm import snap_point_to_nearest_road
from ..logger import get_logger

log = get_logger(__name__)

MODE_MAP_MATCH = "map-match"
MODE_NEAREST_ROAD = "nearest-road"

@dataclass(frozen=True)
class SnapResult:
    points: List[LatLngPoint]
    mode: str
    input_count: int
    dense_count: int
    fallback_reason: Optional[str] = None

def _snap_each_point(dense: List[LatLngPoint], get_json: GetJson) -> List[LatLngPoint]:
    """Sequential nearest-road snapping; a failed point is kept as-is"""
    out = []
    failed = 0
    for point in dense:
        try:
            out.append(snap_point_to_nearest_road(point, get_json=get_json))
        except NearestRoadError as e:
            failed += 1
            log.debug(f"[nearest_road] keeping raw point {point}: {e}")
            out.append(point)
    if failed:
        log.warning(f"[nearest_road] {failed}/{len(dense)} point(s) left unsnapped")
    return out

def snap_trace_to_road(points: Any, steps_per_segment: Any = None, epsilon: Any = None,
                       get_json: GetJson = http_get, token: Optional[str] = None) -> SnapResult:
    """
    Snap an ordered trace to the road network.

    Raises InvalidTraceError before any network call when the trace is
    malformed. Otherwise always returns a full trace: Mapbox matching when
    every chunk succeeds, per-point OSRM snapping when any chunk fails.
    """
    trace = parse_trace(points)
    steps = clamp_steps(steps_per_segment)
    eps = clamp_epsilon(epsilon)

    dense = densify(trace, steps)
    matched = match_trace(dense, token=token, get_json=get_json)

    if matched.ok:
        mode, snapped, reason = MODE_MAP_MATCH, matched.points, None
    else:
        log.warning(f"[snap_trace] map matching unavailable ({matched.reason}); "
                    f"falling back to nearest-road for {len(dense)} points")
        mode, snapped, reason = MODE_NEAREST_ROAD, _snap_each_point(dense, get_json), matched.reason

    result = dedupe_near(snapped, eps)
    log.info(f"[snap_trace] mode={mode} input={len(trace)} dense={len(dense)} output={len(result)}")
    return SnapResult(points=result, mode=mode, input_count=len(trace),
                      dense_count=len(dense), fallback_reason=reason)
