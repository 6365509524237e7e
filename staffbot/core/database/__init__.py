"""
StaffBot - Database Module
==========================

SQLite persistence for role bindings.
"""

from staffbot.core.database.manager import DatabaseManager, get_db

__all__ = [
    "DatabaseManager",
    "get_db",
]
