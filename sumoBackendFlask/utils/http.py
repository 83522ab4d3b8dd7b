"""
HTTP utilities for API calls
"""
import requests
from typing import Dict, Any, Optional

from ..config import HTTP_TIMEOUT

def http_get(url: str, params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None,
             timeout: float = HTTP_TIMEOUT):
    """Make HTTP GET request and decode the JSON body.

    Raises requests.HTTPError on non-2xx, requests.RequestException on
    transport failures and ValueError when the body is not JSON.
    """
    r = requests.get(url, params=params or {}, headers=headers or {}, timeout=timeout)
    r.raise_for_status()
    return r.json()

def http_status(exc: requests.RequestException) -> Optional[int]:
    """Status code carried by a requests exception, if any"""
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None)
