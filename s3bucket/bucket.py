"""Bucket handle with awaitable object operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from s3bucket.infra.storage import dispatch
from s3bucket.infra.storage.client import RequestOptions, S3Client


@dataclass(frozen=True, slots=True, eq=False)
class Bucket:
    """A bucket bound to the client that reaches it.

    Every method issues one client call with ``Bucket`` set to :attr:`name`,
    overriding any ``Bucket`` entry in ``opts``. Responses and client errors
    are passed through unchanged; only :meth:`has` swallows errors.
    """

    client: S3Client
    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bucket):
            return NotImplemented
        return self.client is other.client and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.client), self.name))

    def __repr__(self) -> str:
        return f"Bucket(name={self.name!r})"

    def _request(
        self, opts: RequestOptions | None, **fields: Any
    ) -> dict[str, Any]:
        return dispatch.merge_request(opts, **fields, Bucket=self.name)

    async def location(self, opts: RequestOptions | None = None) -> Any:
        """Return the ``get_bucket_location`` response for this bucket."""
        return await dispatch.call(
            self.client, "get_bucket_location", self._request(opts)
        )

    async def get(self, key: str, opts: RequestOptions | None = None) -> Any:
        """Fetch an object.

        The response is boto3's ``get_object`` dictionary; ``Body`` is the
        client's streaming body and is not read here.
        """
        return await dispatch.call(
            self.client, "get_object", self._request(opts, Key=key)
        )

    async def has(self, key: str, opts: RequestOptions | None = None) -> bool:
        """Return whether ``key`` can be probed.

        Any error from ``head_object`` yields ``False``. Use :meth:`head` to
        see why a probe failed.
        """
        return await dispatch.probe(
            self.client, "head_object", self._request(opts, Key=key)
        )

    async def head(self, key: str, opts: RequestOptions | None = None) -> Any:
        return await dispatch.call(
            self.client, "head_object", self._request(opts, Key=key)
        )

    async def put(
        self, key: str, body: Any, opts: RequestOptions | None = None
    ) -> Any:
        """Create or overwrite an object and return the ``put_object`` response."""
        return await dispatch.call(
            self.client, "put_object", self._request(opts, Key=key, Body=body)
        )

    async def remove(self, key: str, opts: RequestOptions | None = None) -> None:
        await dispatch.call(
            self.client, "delete_object", self._request(opts, Key=key)
        )

    async def copy(
        self, source: str, target: str, opts: RequestOptions | None = None
    ) -> Any:
        """Copy ``source`` to ``target`` within this bucket."""
        return await dispatch.call(
            self.client,
            "copy_object",
            self._request(opts, Key=target, CopySource=f"{self.name}/{source}"),
        )
