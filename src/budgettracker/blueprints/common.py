"""Request helpers and JSON error handling shared by every blueprint."""

from __future__ import annotations

from typing import Any

from flask import Flask, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from ..context import AppContext, UserSession
from ..domain.results import StorageResult
from ..errors import (
    AuthenticationError,
    DefaultCategoryError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)
from ..logging_config import get_logger

USER_HEADER = "X-User-Id"
EXTENSION_KEY = "budgettracker"

logger = get_logger("blueprints")


def get_context() -> AppContext:
    return current_app.extensions[EXTENSION_KEY]


def current_user_session() -> UserSession:
    """Resolve the caller from the request headers."""

    user_id = (request.headers.get(USER_HEADER) or "").strip()
    return UserSession(user_id=user_id or None)


def require_user_id() -> str:
    return current_user_session().require_user_id()


def request_payload() -> dict[str, Any]:
    """Return the JSON body, or form data for non-JSON posts."""

    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError({"body": ["Expected a JSON object."]})
        return payload
    return request.form.to_dict(flat=True)


def serialize_record(record: Any) -> dict[str, Any]:
    return record.model_dump(mode="json")


def result_response(result: StorageResult, key: str, serialize=serialize_record, status: int = 200):
    """Unwrap ``result`` into a JSON body that also names the serving backend."""

    value = result.unwrap()
    if isinstance(value, list):
        body = [serialize(item) for item in value]
    else:
        body = serialize(value)
    return jsonify({key: body, "source": result.source}), status


def _error(message: str, status: int, **extra: Any):
    payload = {"error": message}
    payload.update(extra)
    return jsonify(payload), status


def register_error_handlers(app: Flask) -> None:
    """Answer application errors with JSON bodies carrying the raw message."""

    @app.errorhandler(ValidationError)
    def _validation(exc: ValidationError):
        return _error(str(exc), 400, fields=exc.fields)

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(exc: AuthenticationError):
        return _error(str(exc), 401)

    @app.errorhandler(RecordNotFoundError)
    def _not_found(exc: RecordNotFoundError):
        return _error(str(exc), 404)

    @app.errorhandler(DefaultCategoryError)
    def _default_category(exc: DefaultCategoryError):
        return _error(str(exc), 403)

    @app.errorhandler(StorageError)
    @app.errorhandler(SQLAlchemyError)
    def _storage(exc: Exception):
        logger.error("Storage failure: %s", exc)
        return _error(str(exc), 503)

    @app.errorhandler(HTTPException)
    def _http(exc: HTTPException):
        return _error(exc.description or exc.name, exc.code or 500)
