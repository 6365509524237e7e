"""
StaffBot - Components Package
=============================

Handlers for buttons, select menus and modals.

- base.py: ComponentBase, the class every component subclasses
- handler.py: ComponentHandler, routes interactions by custom_id
"""

from staffbot.components.base import ComponentBase
from staffbot.components.handler import ComponentHandler

__all__ = [
    "ComponentBase",
    "ComponentHandler",
]
