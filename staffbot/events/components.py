"""
StaffBot - Component Events
===========================

Forwards component and modal interactions to the component handler.

Errors raised by a component propagate to StaffBot.on_error.
"""

from typing import TYPE_CHECKING

import discord
from discord.ext import commands

if TYPE_CHECKING:
    from staffbot.bot import StaffBot


class ComponentEvents(commands.Cog):
    """Interaction router for ComponentBase handlers."""

    def __init__(self, bot: "StaffBot") -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_interaction(self, interaction: discord.Interaction) -> None:
        await self.bot.component_handler.dispatch(interaction)


async def setup(bot: "StaffBot") -> None:
    """Load the ComponentEvents cog."""
    await bot.add_cog(ComponentEvents(bot))


__all__ = ["ComponentEvents", "setup"]
