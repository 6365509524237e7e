"""
StaffBot - Command Error Events
===============================

Generic error path for prefix and hybrid commands.

DESIGN:
    Commands report user mistakes themselves and let platform errors
    propagate. Those errors land here: expected framework errors
    (cooldowns, permissions, bad input) get a short reply, anything
    else is logged through ErrorHandler and the user gets a generic
    failure message.
"""

from typing import TYPE_CHECKING, List, Optional

import discord
from discord import app_commands
from discord.ext import commands

from staffbot.core.logger import logger
from staffbot.core.config import is_developer
from staffbot.utils.error_handler import ErrorHandler

if TYPE_CHECKING:
    from staffbot.bot import StaffBot


def unwrap_error(error: BaseException) -> BaseException:
    """Strip hybrid and invoke wrappers to reach the underlying error."""
    if isinstance(error, commands.HybridCommandError):
        error = error.original
    if isinstance(error, (commands.CommandInvokeError, app_commands.CommandInvokeError)):
        error = error.original
    return error


def is_invalid_user(error: BaseException) -> bool:
    """Check if an error means a user argument did not resolve to a member."""
    if isinstance(error, (commands.MemberNotFound, commands.UserNotFound)):
        return True
    return (
        isinstance(error, app_commands.TransformerError)
        and error.type is discord.AppCommandOptionType.user
    )


def invalid_role_argument(error: BaseException) -> Optional[str]:
    """Return the text that failed to resolve to a role, if that is the error."""
    if isinstance(error, commands.RoleNotFound):
        return error.argument
    if isinstance(error, app_commands.TransformerError) and error.type is discord.AppCommandOptionType.role:
        return str(error.value)
    return None


def format_permissions(permissions: List[str]) -> str:
    """Turn ['manage_roles'] into 'Manage Roles'."""
    return ", ".join(p.replace("_", " ").replace("guild", "server").title() for p in permissions)


def usage_for(ctx: commands.Context) -> str:
    command = ctx.command
    if command is None:
        return ""
    args = command.usage or command.signature
    return f"{ctx.clean_prefix}{command.qualified_name} {args}".strip()


class ErrorEvents(commands.Cog):
    """Command error handler."""

    def __init__(self, bot: "StaffBot") -> None:
        self.bot = bot

    async def _reply(self, ctx: commands.Context, content: str) -> None:
        try:
            await ctx.send(content, ephemeral=True)
        except discord.HTTPException as e:
            logger.warning(f"Error reply failed: {e}")

    @commands.Cog.listener()
    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        """Report or log a failed command."""
        if ctx.command is not None and ctx.command.has_error_handler():
            return

        error = unwrap_error(error)

        if isinstance(error, commands.CommandNotFound):
            return

        if isinstance(error, commands.CommandOnCooldown):
            await self._reply(ctx, f"This command is on cooldown. Try again in {error.retry_after:.1f}s.")
            return

        if isinstance(error, commands.MissingPermissions):
            await self._reply(
                ctx,
                f"You need the **{format_permissions(error.missing_permissions)}** permission to use this command.",
            )
            return

        if isinstance(error, commands.BotMissingPermissions):
            await self._reply(
                ctx,
                f"I need the **{format_permissions(error.missing_permissions)}** permission to do that.",
            )
            return

        if isinstance(error, commands.NoPrivateMessage):
            await self._reply(ctx, "This command can only be used in a server.")
            return

        if is_invalid_user(error):
            await self._reply(ctx, "Please provide a valid user.")
            return

        role_text = invalid_role_argument(error)
        if role_text is not None:
            await self._reply(ctx, f"Could not find a role matching `{role_text}`.")
            return

        if isinstance(error, (commands.MissingRequiredArgument, commands.BadArgument)):
            await self._reply(ctx, f"Usage: `{usage_for(ctx)}`")
            return

        if isinstance(error, commands.CheckFailure):
            await self._reply(ctx, "You cannot use this command.")
            return

        ErrorHandler.handle(
            error,
            location=f"command.{ctx.command.qualified_name if ctx.command else 'unknown'}",
            ctx=ctx,
        )

        message = "Something went wrong while running this command."
        if is_developer(ctx.author.id):
            message += f"\n`{type(error).__name__}: {str(error)[:300]}`"
        await self._reply(ctx, message)


async def setup(bot: "StaffBot") -> None:
    """Load the ErrorEvents cog."""
    await bot.add_cog(ErrorEvents(bot))


__all__ = [
    "ErrorEvents",
    "unwrap_error",
    "is_invalid_user",
    "invalid_role_argument",
    "format_permissions",
    "usage_for",
    "setup",
]
