"""
StaffBot - Utilities Package
============================

Shared helpers.

- error_handler.py: ErrorHandler, categorized error logging with context
"""

from staffbot.utils.error_handler import ErrorContext, ErrorHandler

__all__ = [
    "ErrorContext",
    "ErrorHandler",
]
