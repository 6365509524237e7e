"""
StaffBot - Staff Command Cog
============================

Toggles the guild's configured staff role on a member.

DESIGN:
    The role is looked up through the "staff" role binding, so each
    guild chooses its own role with /rolesetup. The command flips
    membership: members with the role lose it, members without it
    gain it. Exactly one role mutation happens per successful call.

Features:
    - /staff <member> and .staff/.admin <member>
    - Per-user cooldown (STAFF_COOLDOWN_SECONDS)
    - Manage Roles required for both the invoker and the bot

Discord API failures are not caught here. They propagate to the
command error handler in staffbot.events.errors.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

import discord
from discord import app_commands
from discord.ext import commands

from staffbot.core.logger import logger
from staffbot.core.config import get_config
from staffbot.core.constants import AUDIT_REASON_MAX_LENGTH, STAFF_ROLE_KEY
from staffbot.core.database import get_db

if TYPE_CHECKING:
    from staffbot.bot import StaffBot


# =============================================================================
# Toggle Logic
# =============================================================================

class ToggleResult(Enum):
    """Outcome of a role toggle."""

    ADDED = "added"
    REMOVED = "removed"


def has_role(member: discord.Member, role_id: int) -> bool:
    """Check if a member currently holds a role."""
    return any(role.id == role_id for role in member.roles)


async def toggle_role(
    member: discord.Member,
    role: discord.Role,
    reason: Optional[str] = None,
) -> ToggleResult:
    """
    Remove role from member if held, otherwise add it.

    Args:
        member: Target member.
        role: Role to toggle.
        reason: Audit log reason.

    Returns:
        Which of the two mutations was performed.
    """
    if has_role(member, role.id):
        await member.remove_roles(role, reason=reason)
        return ToggleResult.REMOVED

    await member.add_roles(role, reason=reason)
    return ToggleResult.ADDED


async def resolve_role(guild: discord.Guild, role_id: int) -> Optional[discord.Role]:
    """
    Find a role by ID, falling back to the API when it is not cached.

    Returns:
        The role, or None if it no longer exists in the guild.
    """
    role = guild.get_role(role_id)
    if role is not None:
        return role

    for fetched in await guild.fetch_roles():
        if fetched.id == role_id:
            return fetched
    return None


def _staff_cooldown(ctx: commands.Context) -> Optional[commands.Cooldown]:
    seconds = get_config().staff_cooldown_seconds
    if seconds <= 0:
        return None
    return commands.Cooldown(1, seconds)


# =============================================================================
# Staff Cog
# =============================================================================

class StaffCog(commands.Cog):
    """Staff role toggle command."""

    def __init__(self, bot: "StaffBot") -> None:
        self.bot = bot
        self.db = get_db()

    @commands.hybrid_command(
        name="staff",
        aliases=["admin"],
        description="Gives or removes the Staff role.",
        usage="<user>",
    )
    @app_commands.describe(member="The member to give or take the Staff role from")
    @commands.guild_only()
    @commands.has_permissions(manage_roles=True)
    @commands.bot_has_permissions(manage_roles=True)
    @commands.dynamic_cooldown(_staff_cooldown, commands.BucketType.user)
    async def staff(
        self,
        ctx: commands.Context,
        member: Optional[discord.Member] = None,
    ) -> None:
        """Toggle the staff role on a member."""
        if member is None:
            await ctx.send("Please provide a valid user.", ephemeral=True)
            return

        # Role fetch and role edit can outlast the interaction deadline
        await ctx.defer()

        role_id = self.db.get_role(ctx.guild.id, STAFF_ROLE_KEY)
        if role_id is None:
            prefix = get_config().command_prefix
            await ctx.send(
                f"Staff Role is not set up in this server! Try `{prefix}rolesetup staff <role>`",
                ephemeral=True,
            )
            return

        role = await resolve_role(ctx.guild, role_id)
        if role is None:
            logger.tree("STAFF ROLE MISSING", [
                ("Guild", f"{ctx.guild.name} ({ctx.guild.id})"),
                ("Role ID", str(role_id)),
            ], emoji="⚠️")
            await ctx.send("Staff Role is not present in this server!", ephemeral=True)
            return

        reason = f"Staff toggle by {ctx.author} ({ctx.author.id})"[:AUDIT_REASON_MAX_LENGTH]
        result = await toggle_role(member, role, reason=reason)

        logger.tree(f"STAFF ROLE {result.name}", [
            ("Member", f"{member} ({member.id})"),
            ("Role", f"{role.name} ({role.id})"),
            ("By", f"{ctx.author} ({ctx.author.id})"),
            ("Guild", ctx.guild.name),
        ], emoji="➖" if result is ToggleResult.REMOVED else "➕")

        if result is ToggleResult.REMOVED:
            await ctx.send(f"Removed **{role.name}** role from **{member}**")
        else:
            await ctx.send(f"Added **{role.name}** role to **{member}**")


# =============================================================================
# Setup
# =============================================================================

async def setup(bot: "StaffBot") -> None:
    """Load the Staff cog."""
    await bot.add_cog(StaffCog(bot))


__all__ = ["StaffCog", "ToggleResult", "toggle_role", "resolve_role", "has_role", "setup"]
