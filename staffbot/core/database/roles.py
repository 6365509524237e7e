"""
StaffBot - Role Binding Operations Mixin
========================================

Per-guild mapping from a logical role name (e.g. "staff") to a role ID.
"""

import time
from typing import TYPE_CHECKING, Dict, Optional

from staffbot.core.logger import logger

if TYPE_CHECKING:
    from .manager import DatabaseManager


def _normalize_key(key: str) -> str:
    return key.strip().lower()


class RolesMixin:
    """Mixin for role binding operations."""

    def get_role(self: "DatabaseManager", guild_id: int, key: str) -> Optional[int]:
        """
        Get the role ID bound to a key in a guild.

        Args:
            guild_id: Guild ID.
            key: Logical role name, case-insensitive.

        Returns:
            Bound role ID, or None if the guild has no binding for key.
        """
        row = self.fetchone(
            "SELECT role_id FROM role_bindings WHERE guild_id = ? AND key = ?",
            (guild_id, _normalize_key(key))
        )
        return row["role_id"] if row else None

    def set_role(self: "DatabaseManager", guild_id: int, key: str, role_id: int) -> None:
        """Bind a role to a key, replacing any existing binding."""
        self.execute(
            """INSERT INTO role_bindings (guild_id, key, role_id, updated_at)
               VALUES (?, ?, ?, ?)
               ON CONFLICT(guild_id, key) DO UPDATE SET
                   role_id = excluded.role_id,
                   updated_at = excluded.updated_at""",
            (guild_id, _normalize_key(key), role_id, time.time())
        )
        logger.tree("Role Binding Set", [
            ("Guild ID", str(guild_id)),
            ("Key", _normalize_key(key)),
            ("Role ID", str(role_id)),
        ], emoji="🔗")

    def remove_role(self: "DatabaseManager", guild_id: int, key: str) -> bool:
        """
        Remove a role binding.

        Returns:
            True if a binding existed and was removed.
        """
        cursor = self.execute(
            "DELETE FROM role_bindings WHERE guild_id = ? AND key = ?",
            (guild_id, _normalize_key(key))
        )
        removed = cursor.rowcount > 0
        if removed:
            logger.tree("Role Binding Removed", [
                ("Guild ID", str(guild_id)),
                ("Key", _normalize_key(key)),
            ], emoji="🔗")
        return removed

    def get_roles(self: "DatabaseManager", guild_id: int) -> Dict[str, int]:
        """Get all role bindings for a guild as {key: role_id}."""
        rows = self.fetchall(
            "SELECT key, role_id FROM role_bindings WHERE guild_id = ? ORDER BY key",
            (guild_id,)
        )
        return {row["key"]: row["role_id"] for row in rows}


__all__ = ["RolesMixin"]
