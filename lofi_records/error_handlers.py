"""
Global Flask error handlers.

Provides consistent error responses across all endpoints by catching
storage-layer exceptions and Pydantic validation errors.
"""

import logging
from typing import Optional

from flask import jsonify
from pydantic import ValidationError

from lofi_records.storage import (
    StorageError,
    StorageNotConfiguredError,
    StorageCredentialsError,
    StorageAccessDeniedError,
    StorageBucketNotFoundError,
    StorageNetworkError,
)

logger = logging.getLogger(__name__)


def json_error_response(
    message: str, status_code: int, code: Optional[str] = None
):
    """Create a standardized JSON error response."""
    body = {"success": False, "error": message}
    if code:
        body["code"] = code
    return jsonify(body), status_code


def register_error_handlers(app):
    """
    Register global error handlers with the Flask app.

    Args:
        app: The Flask application instance.
    """

    # =========================================================================
    # Configuration Errors (500)
    # =========================================================================

    @app.errorhandler(StorageNotConfiguredError)
    def handle_not_configured(error: StorageNotConfiguredError):
        """Fail fast when storage credentials are missing."""
        logger.error(f"Storage not configured: {error}")
        return json_error_response(str(error), 500)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        """Handle invalid storage settings."""
        errors_list = []
        for err in error.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            errors_list.append(f"{field}: {err['msg']}")

        message = "; ".join(errors_list) if errors_list else "Validation failed"
        logger.error(f"Invalid storage settings: {message}")
        return json_error_response(
            f"Invalid storage configuration: {message}", 500
        )

    # =========================================================================
    # Storage Errors
    # =========================================================================

    @app.errorhandler(StorageCredentialsError)
    def handle_credentials_error(error: StorageCredentialsError):
        """Handle credentials rejected by the storage backend."""
        logger.warning(f"Storage credentials error: {error}")
        return json_error_response(str(error), 401)

    @app.errorhandler(StorageAccessDeniedError)
    def handle_access_denied(error: StorageAccessDeniedError):
        """Handle missing bucket permissions."""
        logger.warning(f"Storage access denied: {error}")
        return json_error_response(str(error), 403)

    @app.errorhandler(StorageBucketNotFoundError)
    def handle_bucket_not_found(error: StorageBucketNotFoundError):
        """Handle a bucket that does not exist."""
        logger.warning(f"Bucket not found: {error}")
        return json_error_response(str(error), 404)

    @app.errorhandler(StorageNetworkError)
    def handle_network_error(error: StorageNetworkError):
        """Handle an unreachable storage endpoint."""
        logger.error(f"Storage network error: {error}")
        return json_error_response(str(error), 503)

    @app.errorhandler(StorageError)
    def handle_storage_error(error: StorageError):
        """Handle any other storage failure, passing its code through."""
        logger.error(f"Error fetching albums from storage: {error}")
        return json_error_response(str(error), 500, code=error.code)

    # =========================================================================
    # Generic HTTP Errors
    # =========================================================================

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Handle 500 Internal Server Error."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return json_error_response("An unexpected error occurred.", 500)

    logger.info("Global error handlers registered")
