"""JSON error responses.

Services raise the exceptions of ``core.exceptions``; this module is the only
place that turns them (and framework errors) into HTTP responses.
"""
from __future__ import annotations

import logging

from flask import Flask, current_app, jsonify, request
from flask_jwt_extended import JWTManager
from flask_wtf.csrf import CSRFError
from werkzeug.exceptions import HTTPException, MethodNotAllowed, RequestEntityTooLarge

from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int, **extra):
    body = {"error": message}
    body.update(extra)
    return jsonify(body), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if isinstance(e, ValidationError) and e.errors:
            return error_response(str(e), e.status_code, errors=e.errors)
        return error_response(str(e), e.status_code)

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e: CSRFError):
        logger.warning("CSRF validation failed on %s %s: %s", request.method, request.path, e.description)
        return error_response("Invalid CSRF token", 403)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e: RequestEntityTooLarge):
        return error_response("Request payload too large", 413)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        response, status = error_response(e.description or e.name, e.code or 500)
        if isinstance(e, MethodNotAllowed) and e.valid_methods:
            response.headers["Allow"] = ", ".join(e.valid_methods)
        return response, status

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("Internal server error", 500)


def register_jwt_handlers(jwt: JWTManager, users) -> None:
    """Token problems answer 401; a token for a missing or inactive user is invalid."""

    @jwt.user_lookup_loader
    def load_user(_jwt_header, jwt_data):
        try:
            user_id = int(jwt_data["sub"])
        except (KeyError, TypeError, ValueError):
            return None
        user = users.get_by_id(user_id)
        if not user or not user.is_active:
            return None
        return user

    @jwt.user_lookup_error_loader
    def user_lookup_failed(_jwt_header, jwt_data):
        logger.warning("Access token refers to a missing or inactive user (sub=%s)", jwt_data.get("sub"))
        return error_response("Invalid access token", 401)

    @jwt.unauthorized_loader
    def missing_token(reason: str):
        return error_response("No access token provided", 401)

    @jwt.invalid_token_loader
    def invalid_token(reason: str):
        logger.warning("Invalid access token: %s", reason)
        return error_response("Invalid access token", 401)

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_data):
        return error_response("Token has expired", 401)
