"""Helpers shared by the JSON controllers."""
from __future__ import annotations

from functools import wraps
from typing import Any

from flask import current_app, jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Oturum açmanız gerekiyor"}), 401
        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> int:
    return int(session["user_id"])


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(exc: DomainError):
    status = 400
    for exc_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, exc_type):
            status = code
            break
    return jsonify({"error": str(exc)}), status


def server_error(context: str):
    """Log the active exception and answer with a generic 500."""
    current_app.logger.exception("%s", context)
    return jsonify({"error": "Sunucu hatası"}), 500
