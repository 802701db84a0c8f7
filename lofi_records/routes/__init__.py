"""
Flask routes package for Lofi Records.

This module handles HTTP requests and responses only.
All business logic is delegated to the services layer.

The single `main` Blueprint is split across feature modules. All modules
import `main` from this package and register routes on it. Error responses
are produced by the global handlers in lofi_records.error_handlers.
"""

from flask import Blueprint, jsonify
import logging

logger = logging.getLogger(__name__)
main = Blueprint("main", __name__)


# =============================================================================
# Helper Functions (shared across all route modules)
# =============================================================================


def json_success(**extra) -> dict:
    """Return a JSON success response."""
    return jsonify({
        "success": True,
        **extra,
    })


# =============================================================================
# Import route modules to register their routes on the Blueprint.
# These must be at the bottom to avoid circular imports.
# =============================================================================

from lofi_records.routes import (  # noqa: E402, F401
    core,
    albums,
)
