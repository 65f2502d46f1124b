import logging

import pytest

import registry.default as default_module
from aead import AES_GCM_TYPE_URL
from config import Settings, configure_logging, get_settings
from registry import default_registry, get_key_manager, register_key_manager
from mac import HMAC_TYPE_URL, HmacKeyManager


@pytest.fixture
def fresh_default_registry(monkeypatch):
    monkeypatch.setattr(default_module, "_default_registry", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TESSERA_STRICT_REGISTRATION", raising=False)
        settings = Settings()
        assert settings.strict_registration is False
        assert settings.register_defaults is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TESSERA_STRICT_REGISTRATION", "true")
        monkeypatch.setenv("TESSERA_LOG_LEVEL", "WARNING")
        settings = Settings()
        assert settings.strict_registration is True
        assert settings.log_level == "WARNING"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("TESSERA_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            Settings()

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging("ERROR")
        assert calls[0]["level"] == logging.ERROR
        assert "%(name)s" in calls[0]["format"]

    def test_configure_logging_lowercase_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging("debug")
        assert calls[0]["level"] == logging.DEBUG

    def test_only_registry_and_logging_fields(self):
        assert set(Settings.model_fields) == {"strict_registration", "register_defaults", "log_level"}


class TestDefaultRegistry:

    def test_singleton(self, fresh_default_registry):
        assert default_registry() is default_registry()

    def test_strict_from_settings(self, fresh_default_registry, monkeypatch):
        monkeypatch.setenv("TESSERA_STRICT_REGISTRATION", "1")
        assert default_registry().strict is True

    def test_register_defaults_from_settings(self, fresh_default_registry, monkeypatch):
        monkeypatch.setenv("TESSERA_REGISTER_DEFAULTS", "true")
        registry = default_registry()
        assert AES_GCM_TYPE_URL in registry
        assert HMAC_TYPE_URL in registry

    def test_module_level_helpers(self, fresh_default_registry):
        manager = HmacKeyManager()
        register_key_manager(manager)
        assert get_key_manager(HMAC_TYPE_URL) is manager
