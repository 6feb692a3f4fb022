from __future__ import annotations

import os

from flask import Flask, jsonify, request, send_from_directory
from flask_wtf.csrf import generate_csrf
from werkzeug.exceptions import NotFound
from werkzeug.security import safe_join

from ..common.datetime_utils import now_local
from ..container import Container
from .auth import login_required
from .errors import error_response

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; style-src 'self' 'unsafe-inline'; script-src 'self'; img-src 'self' data: https:"
)

# Paths under these prefixes never fall back to the SPA.
_SERVER_PREFIXES = ("/api", "/uploads")


def register(app: Flask, container: Container) -> None:
    dist = app.config["FRONTEND_DIST"]

    def serve_spa(path: str):
        target = safe_join(dist, path) if path else None
        if target and os.path.isfile(target):
            return send_from_directory(dist, path)
        if os.path.isfile(os.path.join(dist, "index.html")):
            return send_from_directory(dist, "index.html")
        return error_response("Frontend application is unavailable (Build missing).", 503)

    @app.after_request
    def security_headers(response):
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)
        return response

    @app.get("/health")
    def health():
        return jsonify({"status": "OK", "timestamp": now_local().isoformat()})

    @app.get("/api/v1/csrf-token")
    def csrf_token():
        return jsonify({"csrfToken": generate_csrf()})

    @app.get("/uploads/<path:name>")
    @login_required
    def uploaded_file(name: str):
        return send_from_directory(container.document_storage.folder, name)

    @app.get("/")
    def index():
        return serve_spa("")

    @app.errorhandler(NotFound)
    def not_found(e: NotFound):
        """Unmatched GETs outside the API are client-side routes or built assets."""
        if request.path.startswith("/api"):
            return error_response("API endpoint not found", 404)
        if request.method not in ("GET", "HEAD") or request.path.startswith(_SERVER_PREFIXES):
            return error_response(e.description or e.name, 404)
        return serve_spa(request.path.lstrip("/"))
