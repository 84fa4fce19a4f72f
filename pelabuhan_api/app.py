"""HTTP application: routes, CORS handling and the server entry point."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any

from dotenv import load_dotenv
from flask import Flask, Response, request

from pelabuhan_api.controller import Controller
from pelabuhan_api.service import HttpExternalService

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
DEFAULT_PORT = "8080"

ALLOWED_ORIGINS = frozenset(
    {
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:3001",
        "http://127.0.0.1:3001",
    }
)

_CORS_HEADERS = {
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Max-Age": "3600",
}


def create_app(controller: Controller | None = None) -> Flask:
    """Build the Flask application; without a controller one is built from the environment."""
    if controller is None:
        controller = Controller(HttpExternalService.from_env())

    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]

    @app.before_request
    def _preflight() -> Response | None:
        if request.method == "OPTIONS":
            return Response(status=204)
        return None

    @app.after_request
    def _cors(response: Response) -> Response:
        origin = request.headers.get("Origin", "")
        if origin in ALLOWED_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = origin
        elif not origin:
            response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers.update(_CORS_HEADERS)
        return response

    @app.get("/api/v1/negaras")
    def negaras() -> Any:
        return controller.get_negaras()

    @app.get("/api/v1/pelabuhans")
    def pelabuhans() -> Any:
        return controller.get_pelabuhans(request.args.get("id_negara"))

    @app.get("/api/v1/barangs")
    def barangs() -> Any:
        return controller.get_barangs(request.args.get("id_pelabuhan"))

    @app.get("/health")
    def health() -> Any:
        return {"status": "success", "message": "Server is running", "version": VERSION}

    @app.get("/")
    def index() -> Any:
        return {
            "status": "success",
            "message": "Pelabuhan Nusantara API Server",
            "version": VERSION,
            "endpoints": {
                "countries": "/api/v1/negaras",
                "ports": "/api/v1/pelabuhans?id_negara={id}",
                "goods": "/api/v1/barangs?id_pelabuhan={id}",
                "health": "/health",
            },
        }

    return app


def main(argv: list[str] | None = None) -> int:
    """Start the API server on the port named by PORT."""
    parser = argparse.ArgumentParser(description="Pelabuhan Nusantara API server")
    parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if not load_dotenv():
        logger.info("No .env file found")

    mode = os.environ.get("GIN_MODE") or "debug"
    app = create_app()
    app.debug = mode == "debug"

    port_text = os.environ.get("PORT") or DEFAULT_PORT
    try:
        port = int(port_text)
    except ValueError:
        logger.error("Failed to start server: invalid port %r", port_text)
        return 1

    logger.info("Server starting on port %s", port_text)
    logger.info("CORS enabled for localhost:3000 and localhost:3001")
    logger.info("External API URL: %s", os.environ.get("EXTERNAL_API_URL", ""))

    try:
        app.run(host="0.0.0.0", port=port, use_reloader=False)
    except OSError as exc:
        logger.error("Failed to start server: %s", exc)
        return 1
    return 0