"""Object storage client layer.

This package describes the S3 client interface the bucket facade relies on,
builds boto3 clients from settings, and adapts individual client calls into
awaitables.
"""

from .client import RequestOptions, S3Client, StorageError
from .s3_client import build_s3_client

__all__ = [
    "RequestOptions",
    "S3Client",
    "StorageError",
    "build_s3_client",
]
