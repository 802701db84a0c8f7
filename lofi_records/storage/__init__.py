"""
Object storage integration module.

Architecture:
    - settings.py: StorageSettings (bucket, prefix, URL base, listing bound)
    - credentials.py: StorageCredentials for config/DI
    - client.py: StorageClient wrapping boto3 list_objects_v2
    - error_handling.py: botocore error classification
    - exceptions.py: Exception hierarchy

Usage:
    from lofi_records.storage import (
        StorageClient,
        StorageCredentials,
        StorageSettings,
    )

    client = StorageClient(
        StorageSettings.from_flask_config(app.config),
        StorageCredentials.from_flask_config(app.config),
    )
    keys = client.list_keys()
"""

from .settings import StorageSettings, MAX_LIST_KEYS
from .credentials import StorageCredentials
from .client import StorageClient
from .exceptions import (
    StorageError,
    StorageNotConfiguredError,
    StorageCredentialsError,
    StorageAccessDeniedError,
    StorageBucketNotFoundError,
    StorageNetworkError,
    StorageAPIError,
)

__all__ = [
    "StorageSettings",
    "MAX_LIST_KEYS",
    "StorageCredentials",
    "StorageClient",
    "StorageError",
    "StorageNotConfiguredError",
    "StorageCredentialsError",
    "StorageAccessDeniedError",
    "StorageBucketNotFoundError",
    "StorageNetworkError",
    "StorageAPIError",
]
