"""HTTP API over the document service."""

from __future__ import annotations

import argparse
import random
import uuid
from typing import Optional, Sequence

from flask import Flask, jsonify, request

from nietzsche import logs
from nietzsche.service import Nietzsche
from nietzsche.storage import LocalStorage

API_SERVER = "api.nietzsche.com"
DEFAULT_STORAGE_DIR = "storage"
DEFAULT_BASE_URL = "https://nietzsche.example.com"
DEFAULT_PORT = 8080
_ALLOWED_METHODS = "GET,POST,HEAD,PUT,DELETE,PATCH"


def _status_body() -> dict:
    return {"server": API_SERVER, "task": "task_123", "status": "success"}


def create_app(service: Nietzsche) -> Flask:
    """Build the Flask application serving ``service``."""
    app = Flask(__name__)

    @app.after_request
    def _cors_and_log(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        if request.method == "OPTIONS":
            response.headers["Access-Control-Allow-Methods"] = _ALLOWED_METHODS
            requested = request.headers.get("Access-Control-Request-Headers")
            if requested:
                response.headers["Access-Control-Allow-Headers"] = requested
        logs.info(f"{response.status_code} - {request.method} {request.path}")
        return response

    @app.get("/")
    def start():
        return jsonify(
            {
                "server": API_SERVER,
                "task": "task_" + str(uuid.uuid4()),
                "remaning_credits": random.randrange(100000),
            }
        )

    @app.post("/upload")
    def upload():
        request.form.get("task", "")
        uploaded = request.files.get("file")
        if uploaded is None:
            return jsonify({"error": "Failed to get file"}), 400
        try:
            content = uploaded.read()
        except OSError:
            return jsonify({"error": "Failed to read file content"}), 400
        try:
            result = service.upload(uploaded.filename or "", content)
        except (ValueError, OSError):
            return jsonify({"error": "Failed to upload file"}), 400
        return jsonify({"server_filename": result.server_file_name})

    @app.post("/process")
    def process():
        return jsonify(_status_body())

    @app.get("/download")
    def download():
        return jsonify(_status_body())

    return app


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Start the API server."""
    parser = argparse.ArgumentParser(description="Document processing API server.")
    parser.add_argument("--storage", default=DEFAULT_STORAGE_DIR, help="upload directory")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="public base URL")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    storage = LocalStorage(args.storage, args.base_url)
    app = create_app(Nietzsche(storage))
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()