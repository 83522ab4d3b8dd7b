"""
HTTP API routes for the Sumo roads backend
"""
from flask import Flask, request, jsonify

from ..config import MAPBOX_ACCESS_TOKEN, OSRM_BASE_URL, MAPBOX_MAX_COORDS
from ..errors import InvalidTraceError
from ..services.snapping import snap_trace_to_road
from .middleware import parse_number, snap_response
from ..logger import get_logger

log = get_logger(__name__)

def create_api_routes(app: Flask):
    """Create all API routes for the Flask app"""

    @app.route("/api/health")
    def health():
        return jsonify({
            "ok": True,
            "mapboxKeySet": bool(MAPBOX_ACCESS_TOKEN),
            "osrmBaseUrl": OSRM_BASE_URL,
            "maxCoordsPerRequest": MAPBOX_MAX_COORDS,
        })

    @app.route("/api/roads/snap", methods=["POST"])
    def roads_snap():
        """POST /api/roads/snap - Snap an ordered GPS trace to roads"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("points"), list):
            return jsonify({"ok": False, "error": "INVALID_BODY"}), 400

        steps = parse_number(data.get("steps_per_segment"))
        epsilon = parse_number(data.get("dedupe_epsilon"))

        try:
            result = snap_trace_to_road(data["points"], steps, epsilon)
        except InvalidTraceError as e:
            log.info(f"[roads_snap] rejected: {e}")
            return jsonify({"ok": False, "error": e.code}), 400
        except Exception:
            log.exception("[roads_snap] unexpected failure")
            return jsonify({"ok": False, "error": "SNAP_FAILED"}), 500

        return jsonify(snap_response(result))
