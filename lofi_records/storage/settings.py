"""
Pydantic settings for the album listing.

Validates bucket, prefix and listing bounds read from Flask config.
"""

from pydantic import BaseModel, Field, field_validator

MAX_LIST_KEYS = 1000


class StorageSettings(BaseModel):
    """Where albums live and how their files are served."""

    bucket: str = Field(default="lowfi-records", min_length=1)
    prefix: str = Field(default="lofi stations/")
    public_base_url: str = Field(default="")
    max_keys: int = Field(default=MAX_LIST_KEYS, ge=1, le=MAX_LIST_KEYS)

    @field_validator("bucket")
    @classmethod
    def validate_bucket(cls, v: str) -> str:
        """Reject blank bucket names."""
        v = v.strip()
        if not v:
            raise ValueError("Bucket name cannot be blank")
        return v

    @classmethod
    def from_flask_config(cls, config: dict) -> "StorageSettings":
        """
        Build settings from Flask app config.

        Raises:
            pydantic.ValidationError: If a value is out of range.
        """
        return cls(
            bucket=config.get("S3_BUCKET_NAME", "lowfi-records"),
            prefix=config.get("S3_FOLDER_PATH", "lofi stations/"),
            public_base_url=config.get("CLOUDFRONT_DOMAIN") or "",
            max_keys=config.get("S3_MAX_KEYS", MAX_LIST_KEYS),
        )
