import os
import logging
from flask import Flask
from config import config, validate_required_env_vars

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = "Origin, X-Requested-With, Content-Type, Accept"


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "production")

    # Ensure config_name is a string
    if not isinstance(config_name, str):
        config_name = "production"  # Default to production if not a string

    logger.info("Creating app with config: %s", config_name)

    # Missing credentials are not fatal: /albums answers with a 500 instead.
    try:
        validate_required_env_vars()
        logger.info("AWS credentials loaded successfully")
    except ValueError as e:
        logger.warning(
            "WARNING: AWS credentials are missing. "
            "Please update your .env file with valid credentials. (%s)",
            e,
        )

    app = Flask(__name__)

    # Load config
    app.config.from_object(config[config_name])

    logger.info(
        "Configured to fetch albums from S3 bucket: %s, folder: %s",
        app.config.get("S3_BUCKET_NAME"),
        app.config.get("S3_FOLDER_PATH"),
    )

    # Register blueprints
    from lofi_records.routes import main as main_blueprint

    app.register_blueprint(main_blueprint)

    # Register global error handlers
    from lofi_records.error_handlers import register_error_handlers

    register_error_handlers(app)

    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
        return response

    return app
