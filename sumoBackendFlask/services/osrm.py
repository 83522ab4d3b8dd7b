"""
OSRM nearest-road service
"""
from typing import Callable, Dict, Any

import requests

from ..config import OSRM_BASE_URL, OSRM_PROFILE
from ..errors import NearestRoadError
from ..utils.geo import LatLngPoint, parse_lng_lat
from ..utils.http import http_get, http_status
from ..logger import get_logger

log = get_logger(__name__)

GetJson = Callable[..., Dict[str, Any]]

def snap_point_to_nearest_road(point: LatLngPoint, get_json: GetJson = http_get) -> LatLngPoint:
    """Snap a single coordinate to the closest road segment (one candidate)"""
    url = f"{OSRM_BASE_URL}/nearest/v1/{OSRM_PROFILE}/{point.lng},{point.lat}"
    try:
        data = get_json(url, params={"number": 1})
    except requests.HTTPError as e:
        status = http_status(e)
        if status is None:
            raise NearestRoadError("OSRM_NEAREST_REQUEST_FAILED", str(e)) from e
        raise NearestRoadError(f"OSRM_NEAREST_HTTP_{status}") from e
    except ValueError as e:
        raise NearestRoadError("OSRM_NEAREST_BAD_JSON", str(e)) from e
    except requests.RequestException as e:
        raise NearestRoadError("OSRM_NEAREST_REQUEST_FAILED", str(e)) from e

    waypoints = data.get("waypoints") if isinstance(data, dict) else None
    first = waypoints[0] if isinstance(waypoints, list) and waypoints else None
    snapped = parse_lng_lat(first.get("location")) if isinstance(first, dict) else None
    if snapped is None:
        raise NearestRoadError("OSRM_NEAREST_NO_LOCATION")
    return snapped
