"""
Security module for the application.

This module provides:
- Security headers
- Security logging
"""

from .security_headers import SecurityHeaders
from .security_logger import SecurityLogger

__all__ = [
    'SecurityHeaders',
    'SecurityLogger',
    'init_security',
]


def init_security(app):
    """
    Initialize all security features for the Flask app.

    Args:
        app: Flask application instance
    """
    SecurityHeaders.init_app(app)
    app.logger.info("Security features initialized")
