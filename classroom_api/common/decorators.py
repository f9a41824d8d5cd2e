from functools import wraps

from flask import current_app, request
from flask_login import current_user

from classroom_api.auth.utils import not_configured_response
from classroom_api.security import SecurityLogger


def teacher_required(f):
    """
    Decorator to require an authenticated teacher for a route.

    Answers 503 while the auth provider is not configured and 401 when
    the bearer token is missing or rejected. Otherwise `current_user`
    is the Teacher and `current_user.supabase` its scoped client.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_app.extensions["supabase"].is_configured:
            return not_configured_response()
        if not current_user.is_authenticated:
            SecurityLogger.log_unauthorized_access(request.path, "No valid bearer token")
            return current_app.login_manager.unauthorized()
        return f(*args, **kwargs)
    return decorated_function
