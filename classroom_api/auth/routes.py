from flask import current_app, jsonify
from supabase import AuthError

from classroom_api.auth import auth_bp
from classroom_api.auth.models import Teacher
from classroom_api.auth.utils import not_configured_response
from classroom_api.common.request_utils import get_json_body
from classroom_api.security import SecurityLogger


@auth_bp.route("/teacher/login", methods=["POST"])
def teacher_login():
    """
    Exchange a teacher's email and password for a provider session.

    Request body: { "email": "...", "password": "..." }
    Returns the access/refresh tokens the frontend sends back as
    `Authorization: Bearer <access_token>`.
    """
    client = current_app.extensions["supabase"].anon_client
    if client is None:
        return not_configured_response()

    data = get_json_body()
    email = data.get("email")
    password = data.get("password")
    if not email or not password:
        return jsonify({
            "error": "Bad request",
            "message": "Email and password are required",
        }), 400

    email = str(email).strip()
    try:
        result = client.auth.sign_in_with_password({
            "email": email,
            "password": str(password),
        })
    except AuthError as e:
        SecurityLogger.log_failed_login(email, str(e))
        return jsonify({
            "error": "Invalid credentials",
            "message": e.message,
        }), 401

    session, user = result.session, result.user
    SecurityLogger.log_successful_login(user.id, user.email)

    return jsonify({
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "expires_at": session.expires_at,
        "user": {
            "id": user.id,
            "email": user.email,
            "role": Teacher.role,
        },
    }), 200
