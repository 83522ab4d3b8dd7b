"""
HTTP request/response helpers
"""
from typing import Any, Dict

from ..services.snapping import SnapResult
from ..utils.geo import is_finite_number

def parse_number(value: Any, fallback: Any = None) -> Any:
    """Return value when it is a finite JSON number, otherwise fallback"""
    return value if is_finite_number(value) else fallback

def snap_response(result: SnapResult) -> Dict[str, Any]:
    """Serialize a SnapResult for the client"""
    body = {
        "ok": True,
        "mode": result.mode,
        "input_count": result.input_count,
        "dense_count": result.dense_count,
        "output_count": len(result.points),
        "points": [p.to_dict() for p in result.points],
    }
    if result.fallback_reason:
        body["fallback_reason"] = result.fallback_reason
    return body
