"""Tests for RuntimeConfig and RuntimeConfigClient.

The client is exercised against httpx.MockTransport, no server needed.
"""

import httpx
import pytest
from factories import make_settings

from portal.components.folders import FolderDeleteMode
from portal.services import DEFAULT_RUNTIME_CONFIG, RuntimeConfig, RuntimeConfigClient

URL = "http://portal.test/api/runtime-config"


def make_transport(handler):
    calls = []

    def record(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    return httpx.MockTransport(record), calls


class TestRuntimeConfig:
    def test_wire_format(self):
        config = RuntimeConfig(folder_delete_mode=FolderDeleteMode.CASCADE)
        assert config.to_wire() == {"FOLDER_DELETE_MODE": "CASCADE"}

    def test_from_wire_defaults_to_detach(self):
        assert RuntimeConfig.from_wire({}).folder_delete_mode is FolderDeleteMode.DETACH

    def test_from_wire_rejects_non_object(self):
        with pytest.raises(ValueError):
            RuntimeConfig.from_wire(["CASCADE"])

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("FOLDER_DELETE_MODE", "PROMPT")
        config = RuntimeConfig.from_settings(make_settings())
        assert config.folder_delete_mode is FolderDeleteMode.PROMPT


class TestRuntimeConfigClient:
    @pytest.mark.asyncio
    async def test_fetches_once_and_caches(self):
        transport, calls = make_transport(lambda request: httpx.Response(200, json={"FOLDER_DELETE_MODE": "CASCADE"}))
        client = RuntimeConfigClient(URL, transport=transport)

        first = await client.get()
        second = await client.get()

        assert first.folder_delete_mode is FolderDeleteMode.CASCADE
        assert second is first
        assert len(calls) == 1
        assert calls[0].headers["Cache-Control"] == "no-store"

    @pytest.mark.asyncio
    async def test_http_error_returns_default_without_caching(self, caplog):
        transport, calls = make_transport(lambda request: httpx.Response(500))
        client = RuntimeConfigClient(URL, transport=transport)

        config = await client.get()

        assert config == DEFAULT_RUNTIME_CONFIG
        assert client.cached is None
        assert "Failed to load runtime config" in caplog.text

        await client.get()
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_network_error_returns_default(self):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport, _ = make_transport(fail)
        config = await RuntimeConfigClient(URL, transport=transport).get()
        assert config.folder_delete_mode is FolderDeleteMode.DETACH

    @pytest.mark.asyncio
    async def test_invalid_body_returns_default(self):
        transport, _ = make_transport(lambda request: httpx.Response(200, json={"FOLDER_DELETE_MODE": "ARCHIVE"}))
        client = RuntimeConfigClient(URL, transport=transport)

        config = await client.get()

        assert config.folder_delete_mode is FolderDeleteMode.DETACH
        assert client.cached is None

    @pytest.mark.asyncio
    async def test_recovers_after_failure(self):
        responses = [httpx.Response(503), httpx.Response(200, json={"FOLDER_DELETE_MODE": "CASCADE"})]
        transport, _ = make_transport(lambda request: responses.pop(0))
        client = RuntimeConfigClient(URL, transport=transport)

        assert (await client.get()).folder_delete_mode is FolderDeleteMode.DETACH
        assert (await client.get()).folder_delete_mode is FolderDeleteMode.CASCADE
        assert client.cached is not None

    @pytest.mark.asyncio
    async def test_reset_forces_refetch(self):
        transport, calls = make_transport(lambda request: httpx.Response(200, json={"FOLDER_DELETE_MODE": "DETACH"}))
        client = RuntimeConfigClient(URL, transport=transport)

        await client.get()
        client.reset()
        await client.get()

        assert len(calls) == 2


class TestRuntimeConfigClientFromSettings:
    def test_uses_configured_url_and_timeout(self):
        settings = make_settings(runtime_config_url=URL, runtime_config_timeout=1.5)

        client = RuntimeConfigClient.from_settings(settings)

        assert client.url == URL
        assert client.timeout == 1.5

    @pytest.mark.asyncio
    async def test_fetches_from_configured_url(self):
        transport, calls = make_transport(lambda request: httpx.Response(200, json={"FOLDER_DELETE_MODE": "CASCADE"}))
        client = RuntimeConfigClient.from_settings(make_settings(runtime_config_url=URL), transport=transport)

        config = await client.get()

        assert config.folder_delete_mode is FolderDeleteMode.CASCADE
        assert str(calls[0].url) == URL
