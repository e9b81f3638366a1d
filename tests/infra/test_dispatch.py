"""Tests for the client call adapter."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from s3bucket.infra.storage import dispatch
from tests.infra.fake_s3 import client_error


class TestMergeRequest:
    """Test merge_request."""

    def test_fields_override_options(self):
        opts = {"Bucket": "other", "Foo": 1}

        request = dispatch.merge_request(opts, Bucket="mine")

        assert request == {"Bucket": "mine", "Foo": 1}

    def test_does_not_mutate_options(self):
        opts = {"Bucket": "other", "ContentType": "text/plain"}

        dispatch.merge_request(opts, Bucket="mine", Key="a.txt")

        assert opts == {"Bucket": "other", "ContentType": "text/plain"}

    def test_none_options(self):
        assert dispatch.merge_request(None, Bucket="mine") == {"Bucket": "mine"}


class TestCall:
    """Test call with blocking and async clients."""

    @pytest.mark.asyncio
    async def test_blocking_client_runs_in_thread(self, s3):
        s3.get_object.return_value = {"ContentLength": 3}

        with patch.object(
            dispatch.asyncio, "to_thread", wraps=asyncio.to_thread
        ) as to_thread:
            result = await dispatch.call(
                s3, "get_object", {"Bucket": "b", "Key": "k"}
            )

        assert result == {"ContentLength": 3}
        to_thread.assert_called_once_with(s3.get_object, Bucket="b", Key="k")
        s3.get_object.assert_called_once_with(Bucket="b", Key="k")

    @pytest.mark.asyncio
    async def test_async_client_is_awaited_directly(self, async_s3):
        async_s3.head_object.return_value = {"ETag": '"abc"'}

        with patch.object(dispatch.asyncio, "to_thread") as to_thread:
            result = await dispatch.call(
                async_s3, "head_object", {"Bucket": "b", "Key": "k"}
            )

        assert result == {"ETag": '"abc"'}
        to_thread.assert_not_called()
        async_s3.head_object.assert_awaited_once_with(Bucket="b", Key="k")

    @pytest.mark.asyncio
    async def test_awaitable_result_is_awaited(self):
        async def respond():
            return {"ETag": '"abc"'}

        client = MagicMock()
        client.put_object.side_effect = lambda **kwargs: respond()

        result = await dispatch.call(client, "put_object", {"Bucket": "b"})

        assert result == {"ETag": '"abc"'}

    @pytest.mark.asyncio
    async def test_error_propagates_unchanged(self, s3):
        error = client_error("403", "GetObject")
        s3.get_object.side_effect = error

        with pytest.raises(type(error)) as exc_info:
            await dispatch.call(s3, "get_object", {"Bucket": "b", "Key": "k"})

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_logs_request_without_body(self, s3, caplog):
        with caplog.at_level(logging.DEBUG, logger="s3bucket.storage"):
            await dispatch.call(
                s3, "put_object", {"Bucket": "b", "Key": "k", "Body": b"secret"}
            )

        record = next(r for r in caplog.records if r.getMessage() == "s3_request")
        assert record.extra == {"operation": "put_object", "bucket": "b", "key": "k"}


class TestProbe:
    """Test probe."""

    @pytest.mark.asyncio
    async def test_success_is_true(self, s3):
        s3.head_object.return_value = {"ContentLength": 1}

        assert await dispatch.probe(s3, "head_object", {"Bucket": "b", "Key": "k"})

    @pytest.mark.asyncio
    async def test_none_response_is_false(self, s3):
        s3.head_object.return_value = None

        assert not await dispatch.probe(s3, "head_object", {"Bucket": "b", "Key": "k"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            client_error("404"),
            client_error("403"),
            ConnectionError("connection reset"),
            ValueError("malformed"),
        ],
    )
    async def test_any_error_is_false(self, s3, error):
        """Errors are discarded; the probe cannot tell causes apart."""
        s3.head_object.side_effect = error

        request = {"Bucket": "b", "Key": "k"}

        assert await dispatch.probe(s3, "head_object", request) is False

    @pytest.mark.asyncio
    async def test_cancellation_is_not_swallowed(self):
        client = MagicMock()
        client.head_object = AsyncMock(side_effect=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await dispatch.probe(client, "head_object", {"Bucket": "b", "Key": "k"})
