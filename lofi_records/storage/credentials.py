"""
Storage credentials management.

Provides a clean dataclass for S3 access credentials,
eliminating hidden Flask dependencies.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StorageCredentials:
    """
    Immutable container for S3 access credentials.

    Attributes:
        access_key_id: The access key ID.
        secret_access_key: The secret access key.
        region: Optional region name passed to the client.

    Example:
        credentials = StorageCredentials.from_flask_config(current_app.config)
    """

    access_key_id: str
    secret_access_key: str
    region: Optional[str] = None

    def __post_init__(self):
        """Validate credentials on creation."""
        if not self.access_key_id:
            raise ValueError("access_key_id is required")
        if not self.secret_access_key:
            raise ValueError("secret_access_key is required")

    @classmethod
    def from_flask_config(cls, config: dict) -> 'StorageCredentials':
        """
        Create credentials from Flask app config.

        Raises:
            ValueError: If required config keys are missing.
        """
        return cls(
            access_key_id=config.get('AWS_ACCESS_KEY_ID') or '',
            secret_access_key=config.get('AWS_SECRET_ACCESS_KEY') or '',
            region=config.get('AWS_REGION') or None,
        )

    @staticmethod
    def is_configured(config: dict) -> bool:
        """Check whether both keys are present in a config mapping."""
        return bool(
            config.get('AWS_ACCESS_KEY_ID')
            and config.get('AWS_SECRET_ACCESS_KEY')
        )
