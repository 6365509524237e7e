"""
Database Schema Module
======================

Table definitions.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staffbot.core.database.manager import DatabaseManager


class SchemaMixin:
    """Mixin for database schema initialization."""

    def _init_tables(self: "DatabaseManager") -> None:
        """
        Initialize all database tables.

        Tables are created if they do not exist, allowing safe restarts.
        """
        conn = self._ensure_connection()
        cursor = conn.cursor()

        # -----------------------------------------------------------------
        # Role Bindings Table
        # One Discord role per (guild, logical role name)
        # -----------------------------------------------------------------
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS role_bindings (
                guild_id INTEGER NOT NULL,
                key TEXT NOT NULL,
                role_id INTEGER NOT NULL,
                updated_at REAL NOT NULL,
                PRIMARY KEY (guild_id, key)
            )
        """)
        cursor.execute(
            "CREATE INDEX IF NOT EXISTS idx_role_bindings_role ON role_bindings(role_id)"
        )

        conn.commit()


__all__ = ["SchemaMixin"]
