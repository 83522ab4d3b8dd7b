"""
Error types raised by the snapping pipeline
"""

class SnapError(Exception):
    """Base error; `code` is the machine-readable reason sent to clients"""

    def __init__(self, code: str, detail: str = ""):
        super().__init__(f"{code}: {detail}" if detail else code)
        self.code = code
        self.detail = detail

class InvalidTraceError(SnapError):
    """Input trace rejected before any external call"""

class NearestRoadError(SnapError):
    """Nearest-road lookup for a single point failed"""

class MapMatchError(SnapError):
    """Map-matching failed for the whole trace"""
