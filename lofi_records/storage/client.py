"""
S3 storage client.

Lists album objects under the configured prefix with boto3 and resolves
keys to public URLs.
"""

import logging
from typing import Any, List, Optional

import boto3

from .credentials import StorageCredentials
from .error_handling import storage_error_handler
from .settings import StorageSettings

logger = logging.getLogger(__name__)


class StorageClient:
    """
    Read-only view of the album bucket.

    Example:
        settings = StorageSettings.from_flask_config(app.config)
        credentials = StorageCredentials.from_flask_config(app.config)
        client = StorageClient(settings, credentials)
        keys = client.list_keys()
    """

    def __init__(
        self,
        settings: StorageSettings,
        credentials: Optional[StorageCredentials] = None,
        s3_client: Optional[Any] = None,
    ):
        """
        Initialize the storage client.

        Args:
            settings: Bucket, prefix and URL settings.
            credentials: Access keys. When omitted, boto3 falls back to
                its own credential chain.
            s3_client: Pre-built boto3 S3 client, mainly for tests.
        """
        self.settings = settings
        self._s3 = s3_client or self._create_s3_client(credentials)

    @staticmethod
    def _create_s3_client(credentials: Optional[StorageCredentials]):
        if credentials is None:
            return boto3.client("s3")
        return boto3.client(
            "s3",
            aws_access_key_id=credentials.access_key_id,
            aws_secret_access_key=credentials.secret_access_key,
            region_name=credentials.region,
        )

    @property
    def bucket(self) -> str:
        return self.settings.bucket

    @property
    def prefix(self) -> str:
        return self.settings.prefix

    @storage_error_handler
    def list_keys(self) -> List[str]:
        """
        List object keys under the prefix in a single request.

        Returns:
            Keys in listing order. An empty listing returns [].

        Raises:
            StorageError: Subclass matching the failure kind.
        """
        response = self._s3.list_objects_v2(
            Bucket=self.settings.bucket,
            Prefix=self.settings.prefix,
            MaxKeys=self.settings.max_keys,
        )
        keys = [item["Key"] for item in response.get("Contents", [])]
        if response.get("IsTruncated"):
            logger.warning(
                "Listing of '%s' truncated at %d keys",
                self.settings.prefix, self.settings.max_keys,
            )
        logger.info(
            "Objects in '%s' retrieved successfully: %d items found",
            self.settings.prefix, len(keys),
        )
        return keys

    def resolve_url(self, key: str) -> str:
        """Map a storage key to its public URL."""
        return f"{self.settings.public_base_url}{key}"
