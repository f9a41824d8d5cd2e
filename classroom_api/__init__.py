from flask import Flask, jsonify
from flask_compress import Compress
from flask_cors import CORS
from flask_login import LoginManager
from dotenv import load_dotenv

# Load environment variables early so config is available for blueprint creation
load_dotenv()

from classroom_api.config import config  # noqa: E402
from classroom_api.supabase_client import SupabaseProvider  # noqa: E402

supabase_provider = SupabaseProvider()
login_manager = LoginManager()
compress = Compress()
cors = CORS()


def create_app() -> Flask:
    """
    Application factory for the Flask app.
    Reloads configuration, initializes the extensions and registers
    the blueprints, the 404 handler and the error boundary, in that order.
    """
    config.load()
    config.validate()

    app = Flask(__name__)
    app.url_map.strict_slashes = False

    app.config["SECRET_KEY"] = config.SECRET_KEY
    app.config["IS_PRODUCTION"] = config.IS_PRODUCTION
    app.config["SUPABASE_URL"] = config.SUPABASE_URL
    app.config["SUPABASE_ANON_KEY"] = config.SUPABASE_ANON_KEY
    app.logger.setLevel(config.LOG_LEVEL)

    # Response compression settings
    app.config["COMPRESS_MIMETYPES"] = ["application/json"]
    app.config["COMPRESS_LEVEL"] = 6  # Balance between compression and CPU
    app.config["COMPRESS_MIN_SIZE"] = 500  # Only compress responses > 500 bytes

    # Initialize extensions
    cors.init_app(app, origins=[config.FRONTEND_ORIGIN], supports_credentials=True)
    compress.init_app(app)
    supabase_provider.init_app(app)
    login_manager.init_app(app)
    # Stateless API: identity comes from the bearer token on every request
    login_manager.session_protection = None

    from classroom_api.auth.utils import load_teacher_from_request, unauthorized_response
    login_manager.request_loader(load_teacher_from_request)
    login_manager.unauthorized_handler(unauthorized_response)

    from classroom_api.security import init_security
    init_security(app)

    @app.route("/health")
    def health():
        return jsonify({"ok": True})

    # Register blueprints
    from classroom_api.auth import auth_bp
    app.register_blueprint(auth_bp)

    from classroom_api.quiz import quiz_bp
    app.register_blueprint(quiz_bp)

    from classroom_api.student import student_bp
    app.register_blueprint(student_bp)

    # Unmatched routes and the global error boundary come last
    from classroom_api.errors import register_error_handlers
    register_error_handlers(app)

    return app
