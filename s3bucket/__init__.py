"""Awaitable bucket and object operations over an S3 client.

Typical use::

    from s3bucket import build_s3_client, create

    client = build_s3_client()
    bucket = await create(client, "my-bucket")
    await bucket.put("hello.txt", b"Hello World!")
"""

from s3bucket.bucket import Bucket
from s3bucket.common.config import Settings, get_settings
from s3bucket.common.logging import setup_logging
from s3bucket.infra.storage import (
    RequestOptions,
    S3Client,
    StorageError,
    build_s3_client,
)
from s3bucket.lifecycle import create, get, has, remove

__all__ = [
    "Bucket",
    "RequestOptions",
    "S3Client",
    "Settings",
    "StorageError",
    "build_s3_client",
    "create",
    "get",
    "get_settings",
    "has",
    "remove",
    "setup_logging",
]
