"""
Storage module exceptions.

Provides a clean exception hierarchy for bucket listing operations.
"""

from typing import Optional


class StorageError(Exception):
    """Base exception for all storage-related errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class StorageNotConfiguredError(StorageError):
    """Raised when storage credentials are missing from configuration."""
    pass


class StorageCredentialsError(StorageError):
    """Raised when the storage backend rejects the configured credentials."""
    pass


class StorageAccessDeniedError(StorageError):
    """Raised when the credentials lack permission to list the bucket."""

    def __init__(self, message: str, bucket: str = None, code: Optional[str] = None):
        super().__init__(message, code=code)
        self.bucket = bucket


class StorageBucketNotFoundError(StorageError):
    """Raised when the configured bucket does not exist."""

    def __init__(self, message: str, bucket: str = None, code: Optional[str] = None):
        super().__init__(message, code=code)
        self.bucket = bucket


class StorageNetworkError(StorageError):
    """Raised when the storage endpoint cannot be reached."""
    pass


class StorageAPIError(StorageError):
    """Raised when a storage call fails for any other reason."""
    pass
