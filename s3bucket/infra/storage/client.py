"""Storage client protocol and shared types.

This module names the subset of the S3 client interface that the bucket
facade calls. A boto3 ``S3.Client`` satisfies it, and so does an aioboto3 or
aiobotocore client, whose methods return awaitables instead of responses.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

RequestOptions = Mapping[str, Any]
"""Extra request fields forwarded to the client (``ContentType``, ...)."""


class StorageError(RuntimeError):
    """Raised when the storage client cannot be configured."""


class S3Client(Protocol):
    """Protocol for the S3 client operations used by ``s3bucket``.

    Every method takes keyword arguments only, mirroring boto3. Responses are
    the client's own dictionaries and are returned to callers untouched.
    Errors raised by the client (``botocore.exceptions.ClientError`` and
    friends) propagate unchanged.
    """

    def create_bucket(self, **kwargs: Any) -> Any:
        """Create a bucket. Requires ``Bucket``."""
        ...

    def head_bucket(self, **kwargs: Any) -> Any:
        """Probe bucket metadata. Requires ``Bucket``."""
        ...

    def delete_bucket(self, **kwargs: Any) -> Any:
        """Delete an empty bucket. Requires ``Bucket``."""
        ...

    def get_bucket_location(self, **kwargs: Any) -> Any:
        """Return the bucket region. Requires ``Bucket``."""
        ...

    def get_object(self, **kwargs: Any) -> Any:
        """Fetch an object. Requires ``Bucket`` and ``Key``."""
        ...

    def head_object(self, **kwargs: Any) -> Any:
        """Probe object metadata. Requires ``Bucket`` and ``Key``."""
        ...

    def put_object(self, **kwargs: Any) -> Any:
        """Store an object. Requires ``Bucket``, ``Key`` and ``Body``."""
        ...

    def delete_object(self, **kwargs: Any) -> Any:
        """Delete an object. Requires ``Bucket`` and ``Key``."""
        ...

    def copy_object(self, **kwargs: Any) -> Any:
        """Copy an object. Requires ``Bucket``, ``Key`` and ``CopySource``."""
        ...
