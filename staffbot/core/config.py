"""
StaffBot - Configuration Module
===============================

Centralized configuration management with environment variable validation.

DESIGN:
    This module provides a single source of truth for all configuration,
    loaded from environment variables at startup (main.py loads .env first).

    Key patterns:
    - Singleton pattern via get_config() ensures one Config instance
    - Validation happens once at load time, not on every access
    - Optional values fall back to defaults with a logged warning
"""

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from staffbot.core.constants import STAFF_COOLDOWN_MAX_SECONDS, STAFF_COOLDOWN_SECONDS


# =============================================================================
# Timezone Configuration
# =============================================================================

def _load_timezone() -> tzinfo:
    name = os.getenv("BOT_TIMEZONE")
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


BOT_TZ = _load_timezone()
"""Timezone used for log timestamps and embed times (BOT_TIMEZONE, default UTC)."""


# =============================================================================
# Configuration Dataclass
# =============================================================================

@dataclass
class Config:
    """
    Bot configuration loaded from environment variables.

    Attributes:
        discord_token: Discord bot authentication token.
        command_prefix: Prefix for text commands.
        developer_id: User ID of the bot developer (optional).
        ready_webhook_url: Webhook notified once when the bot is ready.
        error_webhook_url: Webhook that receives structured error logs.
        database_path: SQLite file holding role bindings.
        staff_cooldown_seconds: Per-user cooldown for the staff command.
    """

    # -------------------------------------------------------------------------
    # Required: Discord
    # -------------------------------------------------------------------------

    discord_token: str

    # -------------------------------------------------------------------------
    # Optional: Commands
    # -------------------------------------------------------------------------

    command_prefix: str = "."
    developer_id: Optional[int] = None
    staff_cooldown_seconds: float = STAFF_COOLDOWN_SECONDS

    # -------------------------------------------------------------------------
    # Optional: Storage
    # -------------------------------------------------------------------------

    database_path: Path = Path("data") / "staffbot.db"

    # -------------------------------------------------------------------------
    # Optional: Webhooks
    # -------------------------------------------------------------------------

    ready_webhook_url: Optional[str] = None
    error_webhook_url: Optional[str] = None


# =============================================================================
# Embed Colors
# =============================================================================

class EmbedColors:
    """Standardized color palette for Discord embeds."""

    GREEN = 0x1F5E2E
    RED = 0xDC3545

    SUCCESS = GREEN
    ERROR = RED


# =============================================================================
# Validation
# =============================================================================

class ConfigValidationError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


def _parse_int_optional(value: Optional[str], name: str) -> Optional[int]:
    """
    Parse optional string to integer.

    Args:
        value: String value from environment variable, may be None.
        name: Variable name for error messages.

    Returns:
        Parsed integer or None if unset.

    Raises:
        ConfigValidationError: If value is set but not a valid integer.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigValidationError(f"Invalid integer for {name}: {value}")


def _parse_float_with_default(
    value: Optional[str],
    default: float,
    name: str,
    min_val: float = None,
    max_val: float = None,
) -> float:
    """
    Parse optional float with default and range validation.

    Args:
        value: String value from environment variable.
        default: Default value if not set or invalid.
        name: Variable name for warning messages.
        min_val: Minimum allowed value (inclusive).
        max_val: Maximum allowed value (inclusive).

    Returns:
        Parsed float within valid range, or default.
    """
    if not value:
        return default
    try:
        parsed = float(value)
    except ValueError:
        from staffbot.core.logger import logger
        logger.warning(f"Config {name}='{value}' invalid, using default {default}")
        return default
    if min_val is not None and parsed < min_val:
        from staffbot.core.logger import logger
        logger.warning(f"Config {name}={parsed} below min {min_val}, using {min_val}")
        return min_val
    if max_val is not None and parsed > max_val:
        from staffbot.core.logger import logger
        logger.warning(f"Config {name}={parsed} above max {max_val}, using {max_val}")
        return max_val
    return parsed


def _validate_url(value: Optional[str], name: str) -> Optional[str]:
    """
    Validate URL format for webhooks.

    Returns:
        URL if valid, None if invalid or empty.
    """
    if not value:
        return None
    if not value.startswith(("https://", "http://")):
        from staffbot.core.logger import logger
        logger.warning(f"Config {name} invalid URL format, ignoring")
        return None
    return value


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Returns:
        Validated Config object with all settings.

    Raises:
        ConfigValidationError: If any required variable is missing or invalid.
    """
    discord_token = os.getenv("DISCORD_TOKEN")
    if not discord_token:
        raise ConfigValidationError("Missing required environment variables: DISCORD_TOKEN")

    prefix = os.getenv("COMMAND_PREFIX", ".").strip()
    if not prefix:
        raise ConfigValidationError("COMMAND_PREFIX cannot be blank")

    return Config(
        discord_token=discord_token,
        command_prefix=prefix,
        developer_id=_parse_int_optional(os.getenv("DEVELOPER_ID"), "DEVELOPER_ID"),
        staff_cooldown_seconds=_parse_float_with_default(
            os.getenv("STAFF_COOLDOWN_SECONDS"),
            STAFF_COOLDOWN_SECONDS,
            "STAFF_COOLDOWN_SECONDS",
            min_val=0,
            max_val=STAFF_COOLDOWN_MAX_SECONDS,
        ),
        database_path=Path(os.getenv("DATABASE_PATH", str(Path("data") / "staffbot.db"))),
        ready_webhook_url=_validate_url(os.getenv("READY_WEBHOOK_URL"), "READY_WEBHOOK_URL"),
        error_webhook_url=_validate_url(os.getenv("ERROR_WEBHOOK_URL"), "ERROR_WEBHOOK_URL"),
    )


# =============================================================================
# Global Config Instance
# =============================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance, loading if needed.

    Raises:
        ConfigValidationError: On first call if config is invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config
    _config = None


def validate_and_log_config() -> None:
    """Validate configuration and log a summary at startup."""
    from staffbot.core.logger import logger

    config = get_config()

    logger.tree("Configuration Validated", [
        ("Prefix", config.command_prefix),
        ("Database", str(config.database_path)),
        ("Staff Cooldown", f"{config.staff_cooldown_seconds:g}s"),
        ("Ready Webhook", "Enabled" if config.ready_webhook_url else "Disabled"),
        ("Error Webhook", "Enabled" if config.error_webhook_url else "Disabled"),
    ], emoji="⚙️")


# =============================================================================
# Permission Helpers
# =============================================================================

def is_developer(user_id: int) -> bool:
    """Check if user is the configured bot developer."""
    developer_id = get_config().developer_id
    return developer_id is not None and user_id == developer_id


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    "BOT_TZ",
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "get_config",
    "reset_config",
    "load_config",
    "validate_and_log_config",
    "is_developer",
]
