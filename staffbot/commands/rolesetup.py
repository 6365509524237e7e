"""
StaffBot - Role Setup Command Cog
=================================

Binds a logical role name to one of the guild's roles.

DESIGN:
    Role commands never hardcode role IDs. They read a per-guild
    binding (guild, key) -> role ID that this command writes.
    Running the command without a role shows the current binding.
"""

from typing import TYPE_CHECKING, List

import discord
from discord import app_commands
from discord.ext import commands

from staffbot.core.logger import logger
from staffbot.core.constants import ROLE_KEYS
from staffbot.core.database import get_db

if TYPE_CHECKING:
    from staffbot.bot import StaffBot


class RoleSetupCog(commands.Cog):
    """Role binding setup command."""

    def __init__(self, bot: "StaffBot") -> None:
        self.bot = bot
        self.db = get_db()

    # =========================================================================
    # Autocomplete
    # =========================================================================

    async def key_autocomplete(
        self,
        interaction: discord.Interaction,
        current: str,
    ) -> List[app_commands.Choice[str]]:
        """Autocomplete for the key parameter."""
        current_lower = current.lower()
        return [
            app_commands.Choice(name=key, value=key)
            for key in ROLE_KEYS
            if current_lower in key
        ][:25]

    # =========================================================================
    # Role Setup Command
    # =========================================================================

    @commands.hybrid_command(
        name="rolesetup",
        description="Set the role used for a role command.",
        usage="<key> [role]",
    )
    @app_commands.describe(
        key="Which role to configure",
        role="The server role to use (leave empty to show the current one)",
    )
    @app_commands.autocomplete(key=key_autocomplete)
    @commands.guild_only()
    @commands.has_permissions(manage_guild=True)
    async def rolesetup(
        self,
        ctx: commands.Context,
        key: str,
        role: discord.Role = None,
    ) -> None:
        """Bind a role to a key, or show the current binding."""
        # Not Optional[...]: text that is not a role raises RoleNotFound
        key = key.strip().lower()
        if key not in ROLE_KEYS:
            valid = ", ".join(f"`{k}`" for k in ROLE_KEYS)
            await ctx.send(f"Unknown role key `{key}`. Valid keys: {valid}", ephemeral=True)
            return

        if role is None:
            role_id = self.db.get_role(ctx.guild.id, key)
            if role_id is None:
                await ctx.send(f"**{key}** role is not set up in this server.", ephemeral=True)
                return
            current = ctx.guild.get_role(role_id)
            name = current.name if current else f"deleted role ({role_id})"
            await ctx.send(f"**{key}** role is **{name}**", ephemeral=True)
            return

        if role.is_default():
            await ctx.send("The @everyone role cannot be used.", ephemeral=True)
            return

        self.db.set_role(ctx.guild.id, key, role.id)

        logger.tree("ROLE SETUP", [
            ("Guild", f"{ctx.guild.name} ({ctx.guild.id})"),
            ("Key", key),
            ("Role", f"{role.name} ({role.id})"),
            ("By", f"{ctx.author} ({ctx.author.id})"),
        ], emoji="🔧")

        await ctx.send(f"Set **{key}** role to **{role.name}**")


async def setup(bot: "StaffBot") -> None:
    """Load the RoleSetup cog."""
    await bot.add_cog(RoleSetupCog(bot))


__all__ = ["RoleSetupCog", "setup"]
