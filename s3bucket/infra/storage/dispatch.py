"""Turn a single S3 client call into an awaitable.

Blocking clients (boto3) run on the default executor through
``asyncio.to_thread``; async clients (aioboto3, aiobotocore) are awaited in
place. Each helper issues exactly one client call.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any

from s3bucket.infra.storage.client import RequestOptions

logger = logging.getLogger("s3bucket.storage")


def merge_request(opts: RequestOptions | None, **fields: Any) -> dict[str, Any]:
    """Copy ``opts`` and write ``fields`` on top of it.

    Identifier fields passed as ``fields`` always win over caller options of
    the same name. ``opts`` itself is left untouched.
    """
    request = dict(opts) if opts else {}
    request.update(fields)
    return request


def _describe(request: dict[str, Any]) -> dict[str, Any]:
    return {
        "bucket": request.get("Bucket"),
        "key": request.get("Key"),
    }


async def call(client: Any, operation: str, request: dict[str, Any]) -> Any:
    """Invoke ``client.<operation>(**request)`` and return its response.

    Exceptions from the client propagate unchanged.
    """
    method = getattr(client, operation)
    logger.debug(
        "s3_request",
        extra={"extra": {"operation": operation, **_describe(request)}},
    )
    if inspect.iscoroutinefunction(method):
        return await method(**request)

    result = await asyncio.to_thread(method, **request)
    if inspect.isawaitable(result):
        return await result
    return result


async def probe(client: Any, operation: str, request: dict[str, Any]) -> bool:
    """Return whether ``operation`` succeeds with a non-``None`` response.

    Any client error means ``False``. The error itself is discarded, so
    not-found, access denied and network failures all look the same.
    """
    try:
        response = await call(client, operation, request)
    except Exception as exc:
        logger.debug(
            "s3_probe_failed",
            exc_info=exc,
            extra={"extra": {"operation": operation, **_describe(request)}},
        )
        return False
    return response is not None
