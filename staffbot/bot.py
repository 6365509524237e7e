"""
StaffBot - Main Bot Class
=========================

Core Discord client. Owns the shared services and loads every cog
from the explicit registries in staffbot.commands and staffbot.events.

SERVICE INITIALIZATION ORDER:
    1. __init__: config, database, component handler
    2. setup_hook (before on_ready):
       - Error webhook wiring for the logger
       - Command cog loading
       - Event cog loading
       - Command tree syncing
"""

import sys
from datetime import datetime
from typing import Any

import discord
from discord.ext import commands

from staffbot.core.logger import logger
from staffbot.core.config import get_config
from staffbot.core.database import get_db
from staffbot.components import ComponentHandler
from staffbot.utils.error_handler import ErrorHandler


# =============================================================================
# StaffBot Class
# =============================================================================

class StaffBot(commands.Bot):
    """Main Discord bot class."""

    def __init__(self) -> None:
        self.config = get_config()

        intents = discord.Intents.default()
        intents.message_content = True
        intents.members = True

        super().__init__(
            command_prefix=commands.when_mentioned_or(self.config.command_prefix),
            intents=intents,
            case_insensitive=True,
        )

        self.db = get_db()
        self.component_handler = ComponentHandler()
        self.start_time: datetime = datetime.now()

        logger.info("Bot Instance Created")

    # =========================================================================
    # Setup Hook
    # =========================================================================

    async def setup_hook(self) -> None:
        """Load cogs and sync commands before on_ready."""
        if self.config.error_webhook_url:
            logger.set_webhook(self.config.error_webhook_url)

        from staffbot.commands import COMMAND_COGS
        from staffbot.events import EVENT_COGS

        for cog in COMMAND_COGS + EVENT_COGS:
            try:
                await self.load_extension(cog)
                logger.info(f"Cog Loaded: {cog.split('.')[-1]}")
            except commands.ExtensionError as e:
                logger.error("Failed to Load Cog", [("Cog", cog), ("Error", str(e))])

        try:
            synced = await self.tree.sync()
            logger.tree("Commands Synced", [("Count", str(len(synced)))], emoji="✅")
        except discord.HTTPException as e:
            logger.error("Command Sync Failed", [("Error", str(e))])

    # =========================================================================
    # Event Errors
    # =========================================================================

    async def on_error(self, event_method: str, /, *args: Any, **kwargs: Any) -> None:
        """Log exceptions raised by event listeners."""
        error = sys.exc_info()[1]
        if error is None:
            return
        ErrorHandler.handle(error, location=f"event.{event_method}")

    # =========================================================================
    # Shutdown
    # =========================================================================

    async def close(self) -> None:
        """Close the database and the gateway connection."""
        logger.info("Initiating Graceful Shutdown")

        self.db.close()
        await super().close()

        logger.tree("SHUTDOWN COMPLETE", [
            ("Uptime", str(datetime.now() - self.start_time)),
        ], emoji="🛑")


__all__ = ["StaffBot"]
