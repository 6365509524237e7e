"""
StaffBot - Configuration Tests
==============================

Tests for environment-driven configuration loading.
"""

from pathlib import Path

import pytest

from staffbot.core.config import (
    ConfigValidationError,
    get_config,
    is_developer,
    load_config,
    reset_config,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()

        assert config.discord_token == "test-token-do-not-leak"
        assert config.command_prefix == "."
        assert config.developer_id is None
        assert config.staff_cooldown_seconds == 5.0
        assert config.database_path == Path("data") / "staffbot.db"
        assert config.ready_webhook_url is None
        assert config.error_webhook_url is None

    def test_missing_token(self, monkeypatch):
        monkeypatch.delenv("DISCORD_TOKEN")

        with pytest.raises(ConfigValidationError, match="DISCORD_TOKEN"):
            load_config()

    def test_blank_prefix(self, monkeypatch):
        monkeypatch.setenv("COMMAND_PREFIX", "   ")

        with pytest.raises(ConfigValidationError):
            load_config()

    def test_custom_values(self, monkeypatch):
        monkeypatch.setenv("COMMAND_PREFIX", "!")
        monkeypatch.setenv("DEVELOPER_ID", "1234")
        monkeypatch.setenv("DATABASE_PATH", "/tmp/roles.db")
        monkeypatch.setenv("READY_WEBHOOK_URL", "https://discord.com/api/webhooks/1/a")

        config = load_config()

        assert config.command_prefix == "!"
        assert config.developer_id == 1234
        assert config.database_path == Path("/tmp/roles.db")
        assert config.ready_webhook_url == "https://discord.com/api/webhooks/1/a"

    def test_invalid_developer_id(self, monkeypatch):
        monkeypatch.setenv("DEVELOPER_ID", "not-a-number")

        with pytest.raises(ConfigValidationError, match="DEVELOPER_ID"):
            load_config()

    def test_invalid_webhook_url_ignored(self, monkeypatch):
        monkeypatch.setenv("ERROR_WEBHOOK_URL", "ftp://example.com/hook")

        assert load_config().error_webhook_url is None

    @pytest.mark.parametrize("raw, expected", [
        ("2.5", 2.5),
        ("0", 0.0),
        ("abc", 5.0),
        ("-3", 0.0),
        ("99999", 3600.0),
    ])
    def test_staff_cooldown(self, monkeypatch, raw, expected):
        monkeypatch.setenv("STAFF_COOLDOWN_SECONDS", raw)

        assert load_config().staff_cooldown_seconds == expected


class TestGlobalConfig:
    """Tests for the cached config instance."""

    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_reset_config_reloads(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("COMMAND_PREFIX", "?")
        reset_config()

        second = get_config()
        assert second is not first
        assert second.command_prefix == "?"

    def test_is_developer(self, monkeypatch):
        assert is_developer(1234) is False

        monkeypatch.setenv("DEVELOPER_ID", "1234")
        reset_config()

        assert is_developer(1234) is True
        assert is_developer(4321) is False

    def test_cooldown_default_matches_constant(self):
        from staffbot.core.config import Config
        from staffbot.core.constants import STAFF_COOLDOWN_SECONDS

        assert load_config().staff_cooldown_seconds == STAFF_COOLDOWN_SECONDS
        assert Config(discord_token="x").staff_cooldown_seconds == STAFF_COOLDOWN_SECONDS
