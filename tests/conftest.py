from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from s3bucket.common.config import get_settings

CLIENT_OPERATIONS = (
    "create_bucket",
    "head_bucket",
    "delete_bucket",
    "get_bucket_location",
    "get_object",
    "head_object",
    "put_object",
    "delete_object",
    "copy_object",
)

SETTINGS_ENV = (
    "S3_ENDPOINT_URL",
    "S3_REGION",
    "S3_ACCESS_KEY_ID",
    "S3_SECRET_ACCESS_KEY",
    "S3_USE_SSL",
    "S3_ADDRESSING_STYLE",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep host environment and .env files out of the settings cache."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture
def s3():
    """Blocking boto3-style client with every operation succeeding."""
    client = MagicMock(spec=list(CLIENT_OPERATIONS))
    for operation in CLIENT_OPERATIONS:
        getattr(client, operation).return_value = {}
    return client


@pytest.fixture
def async_s3():
    """aioboto3-style client whose operations are coroutine functions."""
    client = MagicMock(spec=list(CLIENT_OPERATIONS))
    for operation in CLIENT_OPERATIONS:
        setattr(client, operation, AsyncMock(return_value={}))
    return client
