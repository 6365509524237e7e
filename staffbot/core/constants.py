"""
StaffBot - Centralized Constants
================================

Magic numbers and shared names live here. Import from this module
instead of hardcoding values.
"""

# =============================================================================
# Time Constants
# =============================================================================

MS_PER_SECOND = 1000

# =============================================================================
# Timeout Constants (in seconds)
# =============================================================================

API_TIMEOUT = 10                      # External API request timeout
DB_CONNECTION_TIMEOUT = 30            # sqlite3.connect timeout

# SQLite busy_timeout pragma is in milliseconds
SQLITE_BUSY_TIMEOUT = 5 * MS_PER_SECOND

# =============================================================================
# Role Binding Keys
# =============================================================================

STAFF_ROLE_KEY = "staff"
"""Logical role name read by the staff toggle command."""

ROLE_KEYS = (STAFF_ROLE_KEY,)
"""Keys accepted by /rolesetup."""

# =============================================================================
# Commands
# =============================================================================

STAFF_COOLDOWN_SECONDS = 5.0           # Default per-user staff cooldown
STAFF_COOLDOWN_MAX_SECONDS = 3600
AUDIT_REASON_MAX_LENGTH = 512         # Discord's X-Audit-Log-Reason limit

__all__ = [
    "MS_PER_SECOND",
    "API_TIMEOUT",
    "DB_CONNECTION_TIMEOUT",
    "SQLITE_BUSY_TIMEOUT",
    "STAFF_ROLE_KEY",
    "ROLE_KEYS",
    "STAFF_COOLDOWN_SECONDS",
    "STAFF_COOLDOWN_MAX_SECONDS",
    "AUDIT_REASON_MAX_LENGTH",
]
