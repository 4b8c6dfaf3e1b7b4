"""Tests for settings loading and the debug flag."""

from __future__ import annotations

import pytest

from npm_registry.config import (
    DEFAULT_API_URL,
    DEFAULT_URL,
    RegistrySettings,
    debug_enabled,
    set_debug,
)
from npm_registry.errors import InvalidArgumentError


class TestDebugFlag:
    def test_off_by_default(self):
        assert debug_enabled() is False

    def test_toggle(self):
        set_debug(True)
        assert debug_enabled() is True
        set_debug(False)
        assert debug_enabled() is False


class TestRegistrySettingsFromEnv:
    def test_empty_env_gives_defaults(self):
        settings = RegistrySettings.from_env({})
        assert settings == RegistrySettings()
        assert settings.url == DEFAULT_URL
        assert settings.api_url == DEFAULT_API_URL
        assert settings.token is None
        assert settings.timeout == 30.0
        assert settings.connect_timeout == 10.0
        assert settings.debug is False

    def test_reads_all_variables(self):
        settings = RegistrySettings.from_env(
            {
                "NPM_REGISTRY_URL": "http://localhost:4873",
                "NPM_REGISTRY_API_URL": "http://localhost:4874/",
                "NPM_TOKEN": " npm_secret ",
                "NPM_REGISTRY_TIMEOUT": "5",
                "NPM_REGISTRY_CONNECT_TIMEOUT": "1.5",
                "NPM_REGISTRY_DEBUG": "yes",
            }
        )
        assert settings.url == "http://localhost:4873"
        assert settings.api_url == "http://localhost:4874/"
        assert settings.token == "npm_secret"
        assert settings.timeout == 5.0
        assert settings.connect_timeout == 1.5
        assert settings.debug is True

    @pytest.mark.parametrize("raw", ["0", "no", "", "off"])
    def test_debug_falsy_values(self, raw):
        assert RegistrySettings.from_env({"NPM_REGISTRY_DEBUG": raw}).debug is False

    def test_invalid_timeout_rejected(self):
        with pytest.raises(InvalidArgumentError, match="NPM_REGISTRY_TIMEOUT"):
            RegistrySettings.from_env({"NPM_REGISTRY_TIMEOUT": "soon"})

    def test_invalid_connect_timeout_rejected(self):
        with pytest.raises(InvalidArgumentError, match="NPM_REGISTRY_CONNECT_TIMEOUT"):
            RegistrySettings.from_env({"NPM_REGISTRY_CONNECT_TIMEOUT": "0"})

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(InvalidArgumentError, match="positive"):
            RegistrySettings.from_env({"NPM_REGISTRY_TIMEOUT": "-1"})

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("NPM_REGISTRY_URL", "http://mirror.example")
        assert RegistrySettings.from_env().url == "http://mirror.example"
