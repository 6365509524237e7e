"""
StaffBot - Bot Tests
====================

Tests for the bot class and cog registries.
"""

import importlib

import pytest
from unittest.mock import patch

from staffbot.commands import COMMAND_COGS
from staffbot.events import EVENT_COGS


class TestCogRegistries:
    """Tests for the explicit cog lists."""

    @pytest.mark.parametrize("module_path", COMMAND_COGS + EVENT_COGS)
    def test_every_cog_has_setup(self, module_path):
        module = importlib.import_module(module_path)
        assert callable(module.setup)

    def test_no_duplicates(self):
        cogs = COMMAND_COGS + EVENT_COGS
        assert len(cogs) == len(set(cogs))


class TestStaffBot:
    """Tests for StaffBot construction and error routing."""

    def test_init(self, test_db):
        from staffbot.bot import StaffBot
        from staffbot.components import ComponentHandler

        bot = StaffBot()

        assert bot.db is test_db
        assert isinstance(bot.component_handler, ComponentHandler)
        assert bot.intents.members is True
        assert bot.intents.message_content is True
        assert bot.case_insensitive is True

    @pytest.mark.asyncio
    async def test_on_error_logs_current_exception(self, test_db):
        from staffbot.bot import StaffBot
        from staffbot.utils.error_handler import ErrorHandler

        bot = StaffBot()
        error = RuntimeError("listener failed")

        with patch.object(ErrorHandler, "handle") as handle:
            try:
                raise error
            except RuntimeError:
                await bot.on_error("on_interaction")

        handle.assert_called_once_with(error, location="event.on_interaction")
