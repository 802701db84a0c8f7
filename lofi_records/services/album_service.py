"""
Album service for building the album listing.

Handles one request end to end: list keys, group them into albums,
then assign each track a random presented order.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from lofi_records.library.parser import group_keys
from lofi_records.models.album import Album
from lofi_records.shuffle_algorithms import PositionShuffle
from lofi_records.shuffle_algorithms.fisher_yates import FisherYatesShuffle
from lofi_records.shuffle_algorithms.presenter import present_albums
from lofi_records.storage import (
    StorageClient,
    StorageCredentials,
    StorageNotConfiguredError,
    StorageSettings,
)

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "AWS credentials are not properly configured. "
    "Check server logs for details."
)


class AlbumService:
    """Service for listing albums from the bucket."""

    def __init__(
        self,
        storage_client: StorageClient,
        shuffler: Optional[PositionShuffle] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize the album service.

        Args:
            storage_client: Client used for the single listing call.
            shuffler: Position shuffle for presented order.
            clock: Millisecond clock used for track ids.
        """
        self._storage = storage_client
        self._shuffler = shuffler or FisherYatesShuffle()
        self._clock = clock

    @classmethod
    def from_flask_config(cls, config: Dict[str, Any]) -> "AlbumService":
        """
        Build a service from Flask app config.

        Raises:
            StorageNotConfiguredError: If storage credentials are missing.
        """
        if not StorageCredentials.is_configured(config):
            raise StorageNotConfiguredError(NOT_CONFIGURED_MESSAGE)

        client = StorageClient(
            StorageSettings.from_flask_config(config),
            StorageCredentials.from_flask_config(config),
        )
        return cls(client)

    def group_albums(self, keys: List[str]) -> Dict[str, Album]:
        """Group listed keys into albums in canonical track order."""
        return group_keys(
            self._storage.prefix, keys, self._storage.resolve_url
        )

    def list_albums(self) -> List[Album]:
        """
        Fetch and present every album under the prefix.

        Returns:
            Albums in first-seen folder order with randomized track order.

        Raises:
            StorageError: If the listing call fails.
        """
        logger.info(
            "Fetching albums from bucket: %s, folder: %s",
            self._storage.bucket, self._storage.prefix,
        )
        keys = self._storage.list_keys()
        albums = self.group_albums(keys)
        presented = present_albums(
            albums.values(), shuffler=self._shuffler, clock=self._clock
        )
        logger.info("Built %d albums from %d keys", len(presented), len(keys))
        return presented
