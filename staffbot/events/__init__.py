"""
StaffBot - Events Package
=========================

Event handler Cogs, one module per concern.

Event routing:
- ready.py: Client ready (startup notification + login log)
- errors.py: Command errors (user replies + error logging)
- components.py: Component/modal interactions -> ComponentHandler
"""

# =============================================================================
# Event Cog Registry
# =============================================================================

EVENT_COGS = [
    "staffbot.events.ready",
    "staffbot.events.errors",
    "staffbot.events.components",
]
"""Event cog module paths, loaded in order by StaffBot.setup_hook."""


__all__ = [
    "EVENT_COGS",
]
