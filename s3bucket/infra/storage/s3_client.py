"""S3-compatible client construction.

Builds a boto3 S3 client that works with AWS S3, MinIO, and other
S3-compatible object storage services. The returned client belongs to the
caller; nothing in ``s3bucket`` closes it.

Dependencies:
    - boto3
    - botocore
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config

from s3bucket.common.config import get_settings
from s3bucket.infra.storage.client import StorageError

if TYPE_CHECKING:
    from s3bucket.common.config import Settings

ADDRESSING_STYLES: frozenset[str] = frozenset({"auto", "path", "virtual"})


def build_s3_client(settings: "Settings | None" = None) -> Any:
    """Create a boto3 S3 client from settings.

    Args:
        settings: Settings carrying the S3 configuration. Defaults to the
            cached environment settings.

    Returns:
        A boto3 ``S3.Client``.

    Raises:
        StorageError: If the configured addressing style is unknown.
    """
    settings = settings or get_settings()

    addressing_style = (settings.S3_ADDRESSING_STYLE or "auto").strip().lower()
    if addressing_style not in ADDRESSING_STYLES:
        raise StorageError(
            f"Unsupported S3 addressing style {settings.S3_ADDRESSING_STYLE!r}; "
            f"expected one of {', '.join(sorted(ADDRESSING_STYLES))}"
        )
    config = Config(s3={"addressing_style": addressing_style})

    return boto3.client(
        "s3",
        endpoint_url=settings.S3_ENDPOINT_URL,
        region_name=settings.S3_REGION,
        aws_access_key_id=settings.S3_ACCESS_KEY_ID,
        aws_secret_access_key=settings.S3_SECRET_ACCESS_KEY,
        use_ssl=bool(settings.S3_USE_SSL),
        config=config,
    )
