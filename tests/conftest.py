"""
Pytest configuration and shared fixtures for Lofi Records tests.

This module provides common fixtures used across all test modules,
including sample bucket listings, mock S3 clients, and Flask app contexts.
"""

import random

import pytest
from unittest.mock import Mock


PREFIX = "lofi stations/"
CDN = "https://cdn.example.com/"


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def prefix():
    """The key prefix album folders live under."""
    return PREFIX


@pytest.fixture
def resolve_url():
    """Deterministic key-to-URL resolver."""
    return lambda key: f"{CDN}{key}"


@pytest.fixture
def sample_keys():
    """A listing with two albums, covers, and noise at the top level."""
    return [
        PREFIX,
        f"{PREFIX}readme.txt",
        f"{PREFIX}Midnight Drive - Kayo/02 - City Lights.mp3",
        f"{PREFIX}Midnight Drive - Kayo/cover.jpg",
        f"{PREFIX}Midnight Drive - Kayo/01 - Rain on Glass.mp3",
        f"{PREFIX}Midnight Drive - Kayo/03 - Last Train.mp3",
        f"{PREFIX}Sunday Tapes/Interlude.mp3",
        f"{PREFIX}Sunday Tapes/01 - Coffee.mp3",
    ]


@pytest.fixture
def sample_listing(sample_keys):
    """A list_objects_v2 response body for sample_keys."""
    return {
        "Contents": [{"Key": key} for key in sample_keys],
        "IsTruncated": False,
        "KeyCount": len(sample_keys),
    }


@pytest.fixture
def seeded_rng():
    """A deterministic random source."""
    return random.Random(1234)


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_s3(sample_listing):
    """A mock boto3 S3 client returning the sample listing."""
    mock = Mock()
    mock.list_objects_v2.return_value = sample_listing
    return mock


# =============================================================================
# Flask App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Create a Flask application for testing."""
    from lofi_records import create_app
    app = create_app('testing')
    app.config['AWS_ACCESS_KEY_ID'] = 'test_access_key'
    app.config['AWS_SECRET_ACCESS_KEY'] = 'test_secret_key'
    app.config['AWS_REGION'] = 'us-east-1'
    app.config['S3_BUCKET_NAME'] = 'lowfi-records'
    app.config['S3_FOLDER_PATH'] = PREFIX
    app.config['S3_MAX_KEYS'] = 1000
    app.config['CLOUDFRONT_DOMAIN'] = CDN
    return app


@pytest.fixture
def unconfigured_app(app):
    """Flask app with storage credentials removed."""
    app.config['AWS_ACCESS_KEY_ID'] = None
    app.config['AWS_SECRET_ACCESS_KEY'] = None
    return app


@pytest.fixture
def app_context(app):
    """Provide Flask application context."""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Provide Flask test client."""
    return app.test_client()
