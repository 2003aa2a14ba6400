from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError

logger = logging.getLogger(__name__)


def error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def login_required(container):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not container.auth_service.current_user():
                return error("Please log in to continue", 401)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(container):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = container.auth_service.current_user()
            if not user:
                return error("Please log in to continue", 401)
            if user.role != Role.ADMIN:
                return error("You do not have permission", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e):
        return error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def handle_authentication(e):
        return error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def handle_authorization(e):
        return error(str(e), 403)

    @app.errorhandler(HTTPException)
    def handle_http(e):
        return error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return error(f"Internal error: {e}", 500)
        return error("Internal error", 500)
