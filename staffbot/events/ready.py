"""
StaffBot - Ready Event
======================

Handles the client ready lifecycle event.

DESIGN:
    On the first ready event the bot posts one startup notification
    to READY_WEBHOOK_URL (if configured) and logs that it is online.
    The notification is fire-and-forget: it runs as its own task,
    is not retried, and never blocks startup.

    The notification carries the bot's tag, ID and guild count.
    It never carries the bot token or any other credential.

    Later ready events (gateway reconnects) are logged and skipped.
"""

import asyncio
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

import aiohttp
from discord.ext import commands

from staffbot.core.logger import logger
from staffbot.core.config import BOT_TZ, EmbedColors, get_config
from staffbot.core.constants import API_TIMEOUT

if TYPE_CHECKING:
    from staffbot.bot import StaffBot


def build_ready_payload(bot: "StaffBot") -> Dict[str, Any]:
    """Build the webhook body announcing the bot is online."""
    user = bot.user
    return {
        "embeds": [{
            "title": "Bot Online",
            "color": EmbedColors.SUCCESS,
            "fields": [
                {"name": "Bot", "value": f"`{user}`", "inline": True},
                {"name": "ID", "value": f"`{user.id}`", "inline": True},
                {"name": "Guilds", "value": f"`{len(bot.guilds)}`", "inline": True},
            ],
            "timestamp": datetime.now(BOT_TZ).isoformat(),
            "footer": {"text": f"Run ID: {logger.run_id}"},
        }]
    }


async def send_ready_notification(url: str, payload: Dict[str, Any]) -> None:
    """POST the ready payload to a Discord webhook."""
    async with aiohttp.ClientSession() as session:
        async with session.post(
            url,
            json=payload,
            timeout=aiohttp.ClientTimeout(total=API_TIMEOUT),
        ) as resp:
            if resp.status >= 400:
                logger.warning(f"Ready webhook returned HTTP {resp.status}")


class ReadyEvents(commands.Cog):
    """Ready lifecycle handler."""

    def __init__(self, bot: "StaffBot") -> None:
        self.bot = bot
        self.config = get_config()
        self._ready_handled: bool = False
        self._notify_task: Optional[asyncio.Task] = None

    def _on_notify_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Ready Notification Failed", [
                ("Error Type", type(error).__name__),
                ("Error", str(error)[:200]),
            ])

    @commands.Cog.listener()
    async def on_ready(self) -> None:
        """Notify the ready webhook and log the login."""
        if self._ready_handled:
            logger.info("Bot Reconnected (ready already handled)")
            return
        self._ready_handled = True

        if not self.bot.user:
            return

        if self.config.ready_webhook_url:
            self._notify_task = asyncio.create_task(
                send_ready_notification(self.config.ready_webhook_url, build_ready_payload(self.bot))
            )
            self._notify_task.add_done_callback(self._on_notify_done)

        logger.success(f"Logged in as {self.bot.user}!")


async def setup(bot: "StaffBot") -> None:
    """Load the ReadyEvents cog."""
    await bot.add_cog(ReadyEvents(bot))


__all__ = ["ReadyEvents", "build_ready_payload", "send_ready_notification", "setup"]
