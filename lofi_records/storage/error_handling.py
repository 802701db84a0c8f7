"""
Storage error classification.

Contains error classification and the storage_error_handler decorator
used by StorageClient methods. Failures are surfaced immediately; there
is no retry.
"""

import logging
from functools import wraps
from typing import Callable, Optional

from botocore.exceptions import (
    ClientError,
    ConnectionClosedError,
    ConnectionError as BotoConnectionError,
    NoCredentialsError,
    PartialCredentialsError,
    ReadTimeoutError,
)

from .exceptions import (
    StorageAPIError,
    StorageAccessDeniedError,
    StorageBucketNotFoundError,
    StorageCredentialsError,
    StorageNetworkError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"NoSuchBucket"}
ACCESS_DENIED_CODES = {"AccessDenied", "AllAccessDisabled"}
CREDENTIALS_CODES = {
    "InvalidAccessKeyId",
    "SignatureDoesNotMatch",
    "ExpiredToken",
    "InvalidToken",
}


def _error_code(exception: Exception) -> Optional[str]:
    """Extract the service error code from a botocore exception."""
    if isinstance(exception, ClientError):
        return exception.response.get("Error", {}).get("Code")
    return type(exception).__name__


def _classify_error(exception: Exception) -> str:
    """
    Classify an exception into an error category.

    Returns one of: 'not_found', 'access_denied', 'credentials',
    'network_error', 'client_error', 'unexpected'.
    """
    if isinstance(exception, ClientError):
        code = _error_code(exception)
        if code in NOT_FOUND_CODES:
            return "not_found"
        elif code in ACCESS_DENIED_CODES:
            return "access_denied"
        elif code in CREDENTIALS_CODES:
            return "credentials"
        else:
            return "client_error"
    elif isinstance(exception, (NoCredentialsError, PartialCredentialsError)):
        return "credentials"
    elif isinstance(
        exception,
        (BotoConnectionError, ReadTimeoutError, ConnectionClosedError),
    ):
        return "network_error"
    else:
        return "unexpected"


def _raise_final_error(
    exception: Exception,
    error_category: str,
    func_name: str,
    bucket: Optional[str],
) -> None:
    """Raise the storage exception matching an error category."""
    code = _error_code(exception)

    if error_category == "not_found":
        raise StorageBucketNotFoundError(
            f"Bucket '{bucket}' does not exist.",
            bucket=bucket,
            code=code,
        )
    elif error_category == "access_denied":
        raise StorageAccessDeniedError(
            f"Access denied to bucket '{bucket}'. "
            "Check your IAM permissions.",
            bucket=bucket,
            code=code,
        )
    elif error_category == "credentials":
        raise StorageCredentialsError(
            "Invalid AWS credentials. Please check your Access Key "
            "and Secret Access Key.",
            code=code,
        )
    elif error_category == "network_error":
        logger.error(
            "Network error in %s: %s",
            func_name, exception,
            exc_info=True,
        )
        raise StorageNetworkError(
            "Network error while connecting to AWS. "
            "Please check your internet connection.",
            code=code,
        )
    elif error_category == "client_error":
        message = exception.response.get("Error", {}).get(
            "Message", str(exception)
        )
        logger.error(
            "Storage API error in %s: %s",
            func_name, exception,
        )
        raise StorageAPIError(message, code=code)
    else:
        logger.error(
            "Unexpected error in %s: %s",
            func_name, exception, exc_info=True,
        )
        raise StorageAPIError(str(exception), code=code)


def storage_error_handler(func: Callable) -> Callable:
    """
    Decorator converting listing failures into storage exceptions.

    Anything that is not a botocore error is reported as unexpected.
    The wrapped method's instance is expected to expose ``bucket``.
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            category = _classify_error(e)
            _raise_final_error(
                e, category, func.__name__, getattr(self, "bucket", None)
            )

    return wrapper
