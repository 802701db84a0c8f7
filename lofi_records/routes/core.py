"""
Core routes: health check.
"""

import logging
from datetime import datetime, timezone

from flask import current_app, jsonify

from lofi_records.routes import main
from lofi_records.storage import StorageCredentials

logger = logging.getLogger(__name__)


@main.route("/health")
def health():
    """Health check endpoint for Docker and monitoring."""
    storage_configured = StorageCredentials.is_configured(current_app.config)
    overall_status = "healthy" if storage_configured else "degraded"

    return (
        jsonify({
            "status": overall_status,
            "timestamp": datetime.now(
                timezone.utc
            ).isoformat(),
        }),
        200,
    )
