from typing import Optional

from flask import Request, current_app, g, jsonify
from supabase import AuthError

from classroom_api.auth.models import Teacher
from classroom_api.security import SecurityLogger

BEARER_PREFIX = "Bearer "

MISSING_HEADER_MESSAGE = "Missing or invalid Authorization header"
INVALID_SESSION_MESSAGE = "Your session has expired or is invalid. Please sign in again."


def not_configured_response():
    return jsonify({
        "error": "Auth not configured",
        "message": "Set SUPABASE_URL and SUPABASE_ANON_KEY in backend .env",
    }), 503


def parse_bearer_token(header: Optional[str]) -> Optional[str]:
    """Return the token from `Bearer <token>`, or None if the header is absent or malformed."""
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):].strip() or None


def load_teacher_from_request(request: Request) -> Optional[Teacher]:
    """
    Flask-Login request loader.

    Validates the bearer token with the provider and returns a Teacher
    bound to a client scoped to that token. On failure the reason is
    left on `g.auth_failure` for the unauthorized handler. Unexpected
    provider errors propagate to the error boundary.
    """
    provider = current_app.extensions["supabase"]
    if not provider.is_configured:
        return None

    token = parse_bearer_token(request.headers.get("Authorization"))
    if not token:
        g.auth_failure = MISSING_HEADER_MESSAGE
        return None

    client = provider.scoped_client(token)
    try:
        response = client.auth.get_user(token)
    except AuthError as e:
        SecurityLogger.log_invalid_token(str(e))
        g.auth_failure = INVALID_SESSION_MESSAGE
        return None

    user = response.user if response is not None else None
    if user is None:
        SecurityLogger.log_invalid_token("No user for token")
        g.auth_failure = INVALID_SESSION_MESSAGE
        return None

    return Teacher(id=user.id, email=user.email, supabase=client)


def unauthorized_response():
    """Flask-Login unauthorized handler: 401 with the recorded failure reason."""
    message = g.get("auth_failure", MISSING_HEADER_MESSAGE)
    return jsonify({"error": "Unauthorized", "message": message}), 401
