"""
Tests for settings validation and startup checks.
"""

import pytest
from pydantic import ValidationError

from backend.app.main import SecurityConfigError, validate_config_on_startup
from core.config import Settings

STRONG_SECRET = "k" * 48


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestJwtSecretValidation:
    def test_production_rejects_default_secret(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")

        with pytest.raises(ValidationError):
            _settings(jwt_secret_key="CHANGE_ME")

    def test_production_rejects_short_secret(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")

        with pytest.raises(ValidationError):
            _settings(jwt_secret_key="short-key")

    def test_development_warns_on_default_secret(self, monkeypatch):
        monkeypatch.setenv("ENV", "development")

        with pytest.warns(UserWarning):
            settings = _settings(jwt_secret_key="changeme")

        assert settings.jwt_secret_key == "changeme"


class TestDerivedSettings:
    def test_cookie_secure_follows_environment(self):
        assert _settings(env="production", jwt_secret_key=STRONG_SECRET).cookie_secure is True
        assert _settings(env="development", jwt_secret_key=STRONG_SECRET).cookie_secure is False

    def test_cookie_secure_override(self):
        settings = _settings(env="production", jwt_secret_key=STRONG_SECRET, session_cookie_secure=False)

        assert settings.cookie_secure is False

    def test_cors_origins_list(self):
        settings = _settings(
            jwt_secret_key=STRONG_SECRET,
            cors_allowed_origins="https://app.example.com, http://localhost:5173,",
        )

        assert settings.cors_origins_list == ["https://app.example.com", "http://localhost:5173"]

    def test_session_lifetimes_default(self):
        settings = _settings(jwt_secret_key=STRONG_SECRET)

        assert settings.session_token_expire_days == 3
        assert settings.session_cookie_expire_hours == 8
        assert settings.session_cookie_name == "token"


class TestProductionConfig:
    def test_advisories_for_sqlite_and_short_cookie(self):
        settings = _settings(jwt_secret_key=STRONG_SECRET, database_url="sqlite:///x.db")

        errors, advisories = settings.validate_production_config()

        assert errors == []
        assert any("SQLite" in advisory for advisory in advisories)
        assert any("cookie expires before" in advisory for advisory in advisories)

    def test_startup_refuses_weak_secret_in_production(self):
        with pytest.warns(UserWarning):
            settings = _settings(env="production", jwt_secret_key="secret")

        with pytest.raises(SecurityConfigError):
            validate_config_on_startup(settings)

    def test_startup_tolerates_weak_secret_outside_production(self):
        with pytest.warns(UserWarning):
            settings = _settings(env="development", jwt_secret_key="secret")

        validate_config_on_startup(settings)
