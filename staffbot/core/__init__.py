"""
StaffBot - Core Package
=======================

Core components shared across the bot.

DESIGN:
    Core modules are singletons or global instances so every cog sees
    the same state:
    - get_config() returns the same Config instance
    - get_db() returns the same DatabaseManager instance
    - logger is a global TreeLogger instance
"""

from .config import (
    BOT_TZ,
    Config,
    ConfigValidationError,
    EmbedColors,
    get_config,
    is_developer,
)

from .database import DatabaseManager, get_db

from .logger import logger, TreeLogger


__all__ = [
    # Config
    "BOT_TZ",
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "get_config",
    "is_developer",
    # Database
    "DatabaseManager",
    "get_db",
    # Logger
    "logger",
    "TreeLogger",
]
