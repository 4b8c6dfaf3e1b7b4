"""Tests for the open_registry composition root."""

from __future__ import annotations

from npm_registry.config import RegistrySettings, debug_enabled, set_debug
from npm_registry.registry.client import RegistryClient
from npm_registry.session import open_registry


class TestOpenRegistry:
    async def test_yields_configured_client(self):
        settings = RegistrySettings(url="http://localhost:4873", api_url="http://localhost:4874")

        async with open_registry(settings) as registry:
            assert isinstance(registry, RegistryClient)
            assert registry.url == "http://localhost:4873"
            assert registry.api_url == "http://localhost:4874"
            assert not registry.is_authenticated

    async def test_passes_timeouts_to_transport(self):
        settings = RegistrySettings(timeout=7.5, connect_timeout=2.0)

        async with open_registry(settings) as registry:
            assert registry.http.timeout.read == 7.5
            assert registry.http.timeout.connect == 2.0

    async def test_token_logs_in(self):
        async with open_registry(RegistrySettings(token="npm_abc")) as registry:
            assert registry.is_authenticated
            assert registry._headers() == {"Authorization": "Bearer npm_abc"}

    async def test_applies_debug_setting(self):
        async with open_registry(RegistrySettings(debug=True)):
            assert debug_enabled() is True

    async def test_closes_http_client_on_exit(self):
        async with open_registry(RegistrySettings()) as registry:
            http = registry.http
        assert http.is_closed

    async def test_defaults_to_environment(self, monkeypatch):
        monkeypatch.setenv("NPM_REGISTRY_URL", "http://env-registry.local")
        monkeypatch.delenv("NPM_TOKEN", raising=False)

        async with open_registry() as registry:
            assert registry.url == "http://env-registry.local"

    async def test_default_settings_keep_debug_enabled_by_caller(self):
        set_debug(True)

        async with open_registry(RegistrySettings()):
            assert debug_enabled() is True

        assert debug_enabled() is True

    async def test_debug_setting_restored_on_exit(self):
        async with open_registry(RegistrySettings(debug=True)):
            pass

        assert debug_enabled() is False
