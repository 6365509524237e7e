"""
StaffBot - Source Package
=========================

Discord bot for managing staff roles.

Package Structure:
- bot.py: Main Discord bot class
- commands/: Command cogs (staff, rolesetup)
- components/: Component base class and interaction routing
- core/: Config, logging, database and constants
- events/: Event cogs (ready, command errors, interactions)
- utils/: Error handling helpers
"""

__version__ = "1.0.0"
