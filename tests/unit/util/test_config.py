"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from forum.config import AuthSettings, ObservabilitySettings, Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.auth.access_token_age == 3000
        assert settings.cors.allowed_origins == ["http://localhost:3000"]
        assert not settings.is_production

    def test_nested_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE__POOL_SIZE", "20")
        monkeypatch.setenv("AUTH__ACCESS_TOKEN_KEY", "from-env")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.database.pool_size == 20
        assert settings.auth.access_token_key == "from-env"
        assert settings.is_production

    def test_explicit_git_sha_is_kept(self):
        assert Settings(_env_file=None, git_sha="abc123").git_sha == "abc123"


class TestAuthSettings:
    def test_rejects_non_positive_token_age(self):
        with pytest.raises(ValidationError):
            AuthSettings(access_token_age=0)

    def test_rejects_negative_leeway(self):
        with pytest.raises(ValidationError):
            AuthSettings(leeway=-1)


class TestObservabilitySettings:
    @pytest.mark.parametrize(
        ("token", "send", "expected"),
        [
            (None, None, False),
            ("token", None, True),
            ("token", False, False),
            (None, True, True),
        ],
    )
    def test_export_enabled(self, token, send, expected):
        settings = ObservabilitySettings(logfire_token=token, send_to_logfire=send)

        assert settings.export_enabled is expected
