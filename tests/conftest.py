"""Shared test configuration and fixtures."""

import os
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from socialpredict.http_client import HttpClient

_STATUS_OK = 200


@pytest.fixture(autouse=True)
def _isolate_socialpredict_env() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    """Hide any ``SOCIALPREDICT_*`` variables set in the developer's shell.

    The packaged ``settings.yaml`` reads these variables, so tests that load
    the default configuration would otherwise depend on the local shell.
    """
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith("SOCIALPREDICT_")}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture
def http_client() -> HttpClient:
    """Create an HttpClient pointed at a local server."""
    return HttpClient("http://localhost:8080")


@pytest.fixture
def mock_request(http_client: HttpClient) -> Iterator[AsyncMock]:
    """Replace the underlying httpx request with an AsyncMock.

    The mock answers ``200 {}`` until a test sets ``return_value`` or
    ``side_effect``.
    """
    mock = AsyncMock(return_value=httpx.Response(_STATUS_OK, json={}))
    with patch.object(http_client._http_client, "request", new=mock):
        yield mock
