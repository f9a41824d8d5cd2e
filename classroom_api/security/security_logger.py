"""
Audit log lines for authentication events.

Every line starts with ``SECURITY:`` so the events can be filtered out
of the application log.
"""
from datetime import datetime, timezone

from flask import current_app, request


def _client_context() -> str:
    return f"ip={request.remote_addr} path={request.path} at={datetime.now(timezone.utc).isoformat()}"


class SecurityLogger:
    """Writes authentication events to the application logger."""

    @staticmethod
    def log_failed_login(email: str, reason: str = "Invalid credentials"):
        """
        Log a rejected password login.

        Args:
            email: Email address used in login attempt
            reason: Provider message explaining the rejection
        """
        current_app.logger.warning(
            f"SECURITY: Login rejected for {email} ({reason}) {_client_context()}"
        )

    @staticmethod
    def log_successful_login(user_id: str, email: str):
        current_app.logger.info(
            f"SECURITY: Teacher {user_id} signed in as {email} {_client_context()}"
        )

    @staticmethod
    def log_invalid_token(reason: str):
        """Log a bearer token the provider refused."""
        current_app.logger.warning(
            f"SECURITY: Bearer token refused ({reason}) {_client_context()}"
        )

    @staticmethod
    def log_unauthorized_access(resource: str, reason: str):
        current_app.logger.warning(
            f"SECURITY: Request to {resource} rejected ({reason}) {_client_context()}"
        )
