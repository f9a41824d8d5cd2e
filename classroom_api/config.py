"""
Configuration module for the application.
All configuration values are read from environment variables
(loaded from .env by python-dotenv before this module is used).
"""
import os
import secrets
import warnings


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.load()

    def load(self) -> None:
        """(Re)read every value from the environment in place."""
        # Flask Configuration
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "") or secrets.token_urlsafe(32)
        self.FLASK_ENV: str = os.getenv("FLASK_ENV", "")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Supabase (auth + database provider)
        self.SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
        self.SUPABASE_ANON_KEY: str = os.getenv("SUPABASE_ANON_KEY", "")

        # HTTP
        self.FRONTEND_ORIGIN: str = os.getenv("FRONTEND_ORIGIN", "") or "http://localhost:5173"
        port = os.getenv("PORT", "")
        self.PORT: int = int(port) if port else 3001

        # Serverless host (Vercel sets VERCEL=1); the process must not call app.run()
        self.VERCEL: str = os.getenv("VERCEL", "")

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.FLASK_ENV == "production"

    @property
    def IS_SERVERLESS(self) -> bool:
        return self.VERCEL == "1"

    @property
    def SUPABASE_CONFIGURED(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)

    def validate(self) -> None:
        """
        Validate configuration values.
        Missing provider credentials are not fatal: protected routes
        and login answer 503 until they are set.
        """
        if not self.SUPABASE_CONFIGURED:
            warnings.warn(
                "SUPABASE_URL and SUPABASE_ANON_KEY are not set. "
                "Authenticated routes will respond with 503.",
                UserWarning
            )


# Global config instance - reloaded by create_app() after load_dotenv()
config = Config()
