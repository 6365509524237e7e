"""
StaffBot - Test Fixtures
========================

Shared fixtures for all tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set up test environment before importing modules
os.environ["TESTING"] = "1"
os.environ.setdefault("STAFFBOT_LOG_DIR", tempfile.mkdtemp(prefix="staffbot-logs-"))
os.environ["DISCORD_TOKEN"] = "test-token-do-not-leak"

TEST_TOKEN = os.environ["DISCORD_TOKEN"]
GUILD_ID = 987654321
STAFF_ROLE_ID = 222333444


# =============================================================================
# Config & Database
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Reload config from a clean environment for every test."""
    from staffbot.core import config as config_module

    for name in (
        "COMMAND_PREFIX",
        "DEVELOPER_ID",
        "STAFF_COOLDOWN_SECONDS",
        "DATABASE_PATH",
        "READY_WEBHOOK_URL",
        "ERROR_WEBHOOK_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DISCORD_TOKEN", TEST_TOKEN)

    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def temp_db_path(tmp_path):
    """Create a temporary database path for testing."""
    return tmp_path / "test_staffbot.db"


@pytest.fixture
def test_db(temp_db_path):
    """Create a fresh test database instance."""
    from staffbot.core.database import manager as db_module

    db_module.DatabaseManager._instance = None
    db = db_module.DatabaseManager(temp_db_path)

    yield db

    db.close()
    db_module.DatabaseManager._instance = None


# =============================================================================
# Mock Discord Objects
# =============================================================================

def _make_role(role_id: int = STAFF_ROLE_ID, name: str = "Staff") -> MagicMock:
    role = MagicMock()
    role.id = role_id
    role.name = name
    role.is_default = MagicMock(return_value=False)
    return role


@pytest.fixture
def make_role():
    """Factory for mock Discord roles."""
    return _make_role


@pytest.fixture
def staff_role():
    return _make_role()


@pytest.fixture
def mock_discord_member():
    """Create a mock Discord member holding no roles."""
    member = MagicMock()
    member.id = 123456789
    member.name = "testuser"
    member.__str__.return_value = "testuser"
    member.roles = []
    member.add_roles = AsyncMock()
    member.remove_roles = AsyncMock()
    return member


@pytest.fixture
def mock_discord_moderator():
    """Create a mock Discord moderator."""
    mod = MagicMock()
    mod.id = 111222333
    mod.name = "moduser"
    mod.__str__.return_value = "moduser"
    return mod


@pytest.fixture
def mock_discord_guild(staff_role):
    """Create a mock Discord guild whose cache holds the staff role."""
    guild = MagicMock()
    guild.id = GUILD_ID
    guild.name = "Test Server"
    guild.get_role = MagicMock(
        side_effect=lambda role_id: staff_role if role_id == staff_role.id else None
    )
    guild.fetch_roles = AsyncMock(return_value=[])
    return guild


@pytest.fixture
def mock_ctx(mock_discord_guild, mock_discord_moderator):
    """Create a mock commands.Context."""
    ctx = MagicMock()
    ctx.guild = mock_discord_guild
    ctx.author = mock_discord_moderator
    ctx.send = AsyncMock()
    ctx.defer = AsyncMock()
    ctx.clean_prefix = "."
    ctx.command = MagicMock()
    ctx.command.qualified_name = "staff"
    ctx.command.usage = "<user>"
    ctx.command.has_error_handler = MagicMock(return_value=False)
    return ctx


@pytest.fixture
def mock_bot():
    """Create a mock bot instance."""
    bot = MagicMock()
    bot.user = MagicMock()
    bot.user.id = 999888777
    bot.user.__str__.return_value = "StaffBot#1234"
    bot.guilds = [MagicMock(), MagicMock()]
    return bot

