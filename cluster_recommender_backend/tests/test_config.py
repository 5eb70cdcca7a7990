import pytest
from pydantic import ValidationError

from src.core.config import DEFAULT_PROVIDERS, Settings, get_settings, load_settings, reset_settings_cache


def test_defaults():
    settings = load_settings()
    assert settings.base_path == "/"
    assert settings.route_prefix == ""
    assert settings.known_providers == DEFAULT_PROVIDERS
    assert settings.auth_enabled is False
    assert settings.cors.allow_origins == ("*",)
    assert settings.cors.allow_headers == ("Origin", "Authorization", "Content-Type")
    assert settings.cors.expose_headers == ("Content-Length",)
    assert settings.cors.allow_credentials is True
    assert settings.cors.max_age == 12


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TELESCOPES_BASEPATH", "/telescopes")
    monkeypatch.setenv("TELESCOPES_PROVIDERS", "Amazon, google ,")
    monkeypatch.setenv("TELESCOPES_AUTH_ENABLED", "true")
    monkeypatch.setenv("TELESCOPES_AUTH_ROLE", "recommender")
    monkeypatch.setenv("TELESCOPES_TOKEN_SIGNING_KEY", "k" * 32)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.route_prefix == "/telescopes"
    assert settings.known_providers == ("amazon", "google")
    assert settings.auth_enabled is True
    assert settings.auth_role == "recommender"
    assert settings.log_level == "DEBUG"


def test_auth_requires_signing_key(monkeypatch):
    monkeypatch.setenv("TELESCOPES_AUTH_ENABLED", "1")
    with pytest.raises(ValidationError):
        load_settings()


@pytest.mark.parametrize(
    "base_path, prefix",
    [("/", ""), ("", ""), ("telescopes", "/telescopes"), ("/telescopes/", "/telescopes"), ("/a/b", "/a/b")],
)
def test_route_prefix_normalization(base_path, prefix):
    assert Settings(base_path=base_path).route_prefix == prefix


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.base_path = "/other"


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("TELESCOPES_BASEPATH", "/changed")
    assert get_settings() is first
    reset_settings_cache()
    assert get_settings().base_path == "/changed"
