"""Bucket lifecycle functions.

``create`` and ``get`` return :class:`~s3bucket.bucket.Bucket` handles bound
to the given client; ``has`` and ``remove`` act on the bucket directly. The
client is always the caller's and is never closed here.
"""

from __future__ import annotations

from s3bucket.bucket import Bucket
from s3bucket.infra.storage import dispatch
from s3bucket.infra.storage.client import RequestOptions, S3Client


async def create(
    client: S3Client, bucket: str, opts: RequestOptions | None = None
) -> Bucket:
    """Create ``bucket`` and return a handle for it.

    Args:
        client: S3 client (boto3, aioboto3 or compatible).
        bucket: Bucket name. Overrides any ``Bucket`` key in ``opts``.
        opts: Extra ``create_bucket`` fields, e.g. ``CreateBucketConfiguration``.

    Returns:
        Bucket bound to ``(client, bucket)``.

    Raises:
        Whatever the client raises, unchanged.
    """
    await dispatch.call(
        client, "create_bucket", dispatch.merge_request(opts, Bucket=bucket)
    )
    return Bucket(client, bucket)


async def get(
    client: S3Client, bucket: str, opts: RequestOptions | None = None
) -> Bucket:
    """Return a handle for an existing bucket.

    Only ``head_bucket`` is called, so a successful probe is taken to mean
    the bucket is usable.

    Raises:
        Whatever the client raises, unchanged.
    """
    await dispatch.call(
        client, "head_bucket", dispatch.merge_request(opts, Bucket=bucket)
    )
    return Bucket(client, bucket)


async def has(
    client: S3Client, bucket: str, opts: RequestOptions | None = None
) -> bool:
    """Return whether ``head_bucket`` succeeds. Never raises client errors."""
    return await dispatch.probe(
        client, "head_bucket", dispatch.merge_request(opts, Bucket=bucket)
    )


async def remove(
    client: S3Client, bucket: str, opts: RequestOptions | None = None
) -> None:
    await dispatch.call(
        client, "delete_bucket", dispatch.merge_request(opts, Bucket=bucket)
    )
