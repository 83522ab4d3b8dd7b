"""Shared fixtures: a fake JSON transport standing in for Mapbox and OSRM."""

from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
import requests

from sumoBackendFlask.utils.geo import LatLngPoint


def http_error(status: int) -> requests.HTTPError:
    response = requests.Response()
    response.status_code = status
    return requests.HTTPError(f"{status} error", response=response)


def echo_matching(url: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """Mapbox stand-in that returns the requested coordinates as the matched geometry."""
    coords = []
    for pair in url.rsplit("/", 1)[1].split(";"):
        lng, lat = pair.split(",")
        coords.append([float(lng), float(lat)])
    return {"code": "Ok", "matchings": [{"geometry": {"coordinates": coords}}]}


def nearest_offset(url: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """OSRM stand-in that moves every point 0.01 degrees north."""
    lng, lat = (float(v) for v in url.rsplit("/", 1)[1].split(","))
    return {"code": "Ok", "waypoints": [{"location": [lng, lat + 0.01]}]}


class FakeTransport:
    """Records calls and routes them to per-service handlers."""

    def __init__(self, matching: Optional[Callable] = None, nearest: Optional[Callable] = None):
        self.matching = matching
        self.nearest = nearest
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def __call__(self, url: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Dict[str, Any]:
        params = params or {}
        self.calls.append((url, params))
        handler = self.matching if "/matching/" in url else self.nearest
        if handler is None:
            raise AssertionError(f"unexpected request to {url}")
        return handler(url, params)

    def urls(self, kind: str) -> List[str]:
        return [url for url, _ in self.calls if f"/{kind}/" in url]


@pytest.fixture
def line_trace() -> List[LatLngPoint]:
    """250 points heading east along the equator."""
    return [LatLngPoint(0.0, i * 0.001) for i in range(250)]
