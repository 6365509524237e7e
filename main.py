#!/usr/bin/env python3
"""
StaffBot Entry Point
====================

Loads .env, validates configuration and runs the bot until it is
stopped.

Commands:
- staff / admin <user>: toggle the staff role
- rolesetup <key> [role]: configure role bindings
"""

import asyncio
import sys

import discord
from dotenv import load_dotenv

from staffbot.core.logger import logger
from staffbot.core.config import ConfigValidationError, get_config, validate_and_log_config
from staffbot.utils.error_handler import ErrorHandler


async def main() -> None:
    """
    Run the bot.

    Raises:
        SystemExit: If configuration is invalid or the bot fails to start.
    """
    load_dotenv()

    try:
        validate_and_log_config()
    except ConfigValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        logger.error("   Please check your .env file")
        sys.exit(1)

    from staffbot.bot import StaffBot

    bot = StaffBot()
    logger.info("Bot instance created successfully")

    try:
        async with bot:
            await bot.start(get_config().discord_token)
    except discord.LoginFailure:
        logger.error("Discord rejected DISCORD_TOKEN")
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (Ctrl+C)")
    except Exception as e:
        ErrorHandler.handle(e, location="main.__main__", critical=True)
        sys.exit(1)
