"""
Error types and the application-wide error boundary.

Handlers validate input inline and return 4xx responses directly.
Everything else (not-visible rows, database failures, unexpected
exceptions) is raised and rendered here, once, as JSON.
"""
import traceback

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

GENERIC_ERROR = "Internal server error"
GENERIC_MESSAGE = "Something went wrong"


class ApiError(Exception):
    """An error that carries its own HTTP status and display name."""

    status_code = 500
    name = "Error"

    def __init__(self, message: str, status_code: int = None, name: str = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if name is not None:
            self.name = name


class NotVisible(ApiError):
    """
    The row does not exist or belongs to another teacher.

    Row-level security makes the two cases indistinguishable, and the
    API keeps it that way so other tenants' data is never revealed.
    """

    status_code = 404
    name = "Not found"


class DatabaseError(ApiError):
    """A PostgREST call failed."""

    status_code = 500
    name = "Database error"

    def __init__(self, action: str, message: str, code: str = None):
        super().__init__(message or action)
        self.action = action
        self.code = code


def _status_for(error: BaseException) -> int:
    for attr in ("status", "status_code", "code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value if 400 <= value <= 599 else 500
    return 500


def _message_for(error: BaseException) -> str:
    message = getattr(error, "message", None)
    if not message and isinstance(error, HTTPException):
        message = error.description
    if not message:
        message = str(error)
    return message or GENERIC_ERROR


def handle_error(error: Exception):
    """Terminal handler: turn any exception into a JSON response."""
    status = _status_for(error)
    message = _message_for(error)
    production = current_app.config.get("IS_PRODUCTION", False)

    if status < 500:
        return jsonify({
            "error": getattr(error, "name", None) or "Error",
            "message": message,
        }), status

    if production:
        current_app.logger.error(f"[Error] {status} {message}")
        return jsonify({"error": GENERIC_ERROR, "message": GENERIC_MESSAGE}), status

    current_app.logger.error(f"[Error] {status} {message}", exc_info=error)
    stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return jsonify({"error": GENERIC_ERROR, "message": message, "stack": stack}), status


def handle_unmatched_route(e):
    """No route matched (or the method is not served at that path)."""
    current_app.logger.warning(f"404 error: {request.method} {request.path}")
    return jsonify({
        "error": "Not found",
        "message": f"Cannot {request.method} {request.path}",
    }), 404


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(404, handle_unmatched_route)
    app.register_error_handler(405, handle_unmatched_route)
    app.register_error_handler(Exception, handle_error)
