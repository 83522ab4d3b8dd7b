"""
Flask entry point for the Sumo roads backend
"""
import os

from flask import Flask
from flask_cors import CORS

from sumoBackendFlask.config import CORS_ORIGINS
from sumoBackendFlask.http_headers.api import create_api_routes
from sumoBackendFlask.logger import setup_logging, log

def create_app() -> Flask:
    setup_logging()
    app = Flask(__name__)
    # the snap endpoint is public; no cookies or auth headers are expected
    CORS(app, origins="*" if CORS_ORIGINS == ["*"] else CORS_ORIGINS)
    create_api_routes(app)
    log.info(f"Roads snapping API ready (cors={','.join(CORS_ORIGINS)})")
    return app

def main():
    port = int(os.getenv("PORT", "5000"))
    create_app().run(host="0.0.0.0", port=port, debug=False)

if __name__ == "__main__":
    main()
