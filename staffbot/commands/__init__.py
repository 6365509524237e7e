"""
StaffBot - Commands Package
===========================

Command implementations, one discord.py Cog per module.

DESIGN:
    Commands are hybrid commands: they run as prefix commands
    (.staff) and as slash commands (/staff).

    To add a new command:
    1. Create new_command.py in this directory
    2. Create a Cog class with @commands.hybrid_command decorators
    3. Add async def setup(bot) function at the end
    4. Add the module to COMMAND_COGS below

Available Commands:
    staff / admin <user>: Toggle the staff role (Manage Roles)
    rolesetup <key> [role]: Configure role bindings (Manage Server)
"""

# =============================================================================
# Command Cog Registry
# =============================================================================

COMMAND_COGS = [
    "staffbot.commands.staff",
    "staffbot.commands.rolesetup",
]
"""Command cog module paths, loaded in order by StaffBot.setup_hook."""


__all__ = [
    "COMMAND_COGS",
]
