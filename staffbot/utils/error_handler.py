"""
StaffBot - Error Handler
========================

Detailed error context and categorized logging.

Features:
- Error categorization (discord, api, database, general)
- Recovery suggestions per category
- Command context capture (guild, channel, author, invocation)
- Critical error file logging
"""

import json
import sqlite3
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import discord
from discord.ext import commands

from staffbot.core.logger import logger, LOGS_DIR


class ErrorContext:
    """Captures and formats detailed error context."""

    @staticmethod
    def get_full_context(e: BaseException, location: str, **kwargs) -> Dict[str, Any]:
        """
        Get comprehensive error context.

        Args:
            e: The exception
            location: Where the error occurred
            **kwargs: Additional context (ctx, member, etc.)

        Returns:
            Dictionary with full error context
        """
        ctx = kwargs.pop("ctx", None)
        context = {
            "timestamp": datetime.now().isoformat(),
            "location": location,
            "error_type": type(e).__name__,
            "error_message": str(e),
            "traceback": "".join(traceback.format_exception(type(e), e, e.__traceback__)),
            "python_version": sys.version,
            "additional_context": kwargs,
        }

        if isinstance(ctx, commands.Context):
            context["discord_context"] = {
                "guild": ctx.guild.name if ctx.guild else "DM",
                "channel": getattr(ctx.channel, "name", str(ctx.channel)),
                "author": str(ctx.author),
                "author_id": ctx.author.id,
                "command": ctx.command.qualified_name if ctx.command else None,
                "content": ctx.message.content[:100] if ctx.message and ctx.message.content else None,
            }

        member = kwargs.get("member")
        if isinstance(member, discord.Member):
            context["member_context"] = {
                "name": str(member),
                "id": member.id,
                "roles": [role.name for role in member.roles],
            }

        return context


class ErrorHandler:
    """Categorized error handling with context."""

    ERROR_CATEGORIES = {
        "discord": (discord.DiscordException,),
        "api": (ConnectionError, TimeoutError, OSError),
        "database": (sqlite3.Error,),
    }

    RECOVERY_SUGGESTIONS = {
        discord.Forbidden: "Check bot permissions and role hierarchy in server settings",
        discord.NotFound: "Resource not found - check IDs and role bindings",
        discord.HTTPException: "Discord API issue - retry the command",
        ConnectionError: "Network connection issue - check internet connection",
        TimeoutError: "Request timed out - retry the command",
        sqlite3.OperationalError: "Database locked or unavailable - retry the command",
        sqlite3.Error: "General database error - check database file",
        OSError: "System resource issue - check disk space and permissions",
    }

    @classmethod
    def categorize_error(cls, e: BaseException) -> str:
        """Return the category name for an exception."""
        for category, error_types in cls.ERROR_CATEGORIES.items():
            if isinstance(e, error_types):
                return category
        return "general"

    @classmethod
    def get_recovery_suggestion(cls, e: BaseException) -> str:
        """Return the first matching recovery suggestion, most specific first."""
        for error_type, suggestion in cls.RECOVERY_SUGGESTIONS.items():
            if isinstance(e, error_type):
                return suggestion
        return "Unexpected error - check logs for details"

    @classmethod
    def handle(cls, e: BaseException, location: str, critical: bool = False, **context) -> Dict[str, Any]:
        """
        Log an error with full context.

        Args:
            e: The exception
            location: Where the error occurred
            critical: Whether this error stops execution
            **context: Additional context

        Returns:
            The collected error context.
        """
        category = cls.categorize_error(e)
        suggestion = cls.get_recovery_suggestion(e)
        full_context = ErrorContext.get_full_context(e, location, **context)

        details = [
            ("Location", location),
            ("Category", category.upper()),
            ("Type", full_context["error_type"]),
            ("Error", full_context["error_message"][:200]),
            ("Recovery", suggestion),
        ]
        if "discord_context" in full_context:
            dc = full_context["discord_context"]
            details.append(("Command", str(dc["command"])))
            details.append(("User", f"{dc['author']} ({dc['author_id']})"))
            details.append(("Guild", dc["guild"]))

        if critical:
            logger.critical(f"CRITICAL ERROR [{category.upper()}] in {location}")
            logger.error("Critical Error", details)
            logger.info(f"Traceback:\n{full_context['traceback']}")
            cls._store_critical_error(full_context)
        else:
            logger.error("Command Error", details)
            logger.debug(f"Traceback:\n{full_context['traceback']}")

        return full_context

    @staticmethod
    def _store_critical_error(context: Dict[str, Any]) -> None:
        """Store critical error context as JSON under logs/errors/."""
        try:
            error_dir = Path(LOGS_DIR) / "errors"
            error_dir.mkdir(exist_ok=True, parents=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            error_file = error_dir / f"error_{timestamp}.json"

            with open(error_file, "w", encoding="utf-8") as f:
                json.dump(context, f, indent=2, default=str)

            logger.info(f"Critical error saved to {error_file}")
        except OSError as save_error:
            logger.warning(f"Failed to save error details: {save_error}")


__all__ = ["ErrorContext", "ErrorHandler"]
