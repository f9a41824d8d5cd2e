"""
Security headers module.

This module provides middleware to add security headers to all responses.
The application serves JSON only, so the policy forbids every kind of
embedded content.
"""

from flask import current_app


class SecurityHeaders:
    """
    Security headers middleware.

    Adds security headers to HTTP responses to protect API consumers
    against common web vulnerabilities.
    """

    @staticmethod
    def init_app(app):
        """
        Initialize security headers for the Flask app.

        Args:
            app: Flask application instance
        """
        @app.after_request
        def add_security_headers(response):
            """Add security headers to all responses."""
            # Nothing served here is meant to be rendered as a document
            response.headers['Content-Security-Policy'] = "default-src 'none'; frame-ancestors 'none'"

            # X-Content-Type-Options: Prevent MIME type sniffing
            response.headers['X-Content-Type-Options'] = 'nosniff'

            # X-Frame-Options: Prevent clickjacking
            response.headers['X-Frame-Options'] = 'DENY'

            # Referrer-Policy: Control referrer information
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

            # Strict-Transport-Security: Force HTTPS (only in production)
            if current_app.config.get('IS_PRODUCTION', False):
                response.headers['Strict-Transport-Security'] = (
                    'max-age=31536000; includeSubDomains'
                )

            # Note: the WSGI server may add its own Server header afterwards
            if 'Server' in response.headers:
                del response.headers['Server']

            return response
