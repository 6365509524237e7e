"""
StaffBot - Component Base
=========================

Base class for interactive component handlers (buttons, select
menus and modals).

DESIGN:
    A component is identified by an id that prefixes the custom_id of
    the UI items it handles ("id" or "id:<extra>"). The component
    handler routes matching interactions to exec().

    enabled: whether the component may run at all.
    disable_after_use: whether the handler turns the component off
        after its first successful exec().
"""

import discord


class ComponentBase:
    """
    Interactive component handler.

    Subclasses must override exec(). The base implementation raises
    NotImplementedError naming the subclass, so a handler that forgot
    to implement it fails on first use instead of doing nothing.

    Attributes:
        id: Component id, matched against interaction custom_ids.
        enabled: Whether the component may run.
        disable_after_use: Whether to disable after one successful run.
    """

    def __init__(
        self,
        component_id: str,
        enabled: bool = True,
        disable_after_use: bool = False,
    ) -> None:
        if not component_id or ":" in component_id:
            raise ValueError(f"Invalid component id: {component_id!r}")
        self.id = component_id
        self.enabled = enabled
        self.disable_after_use = disable_after_use

    def matches(self, custom_id: str) -> bool:
        """Check if a custom_id belongs to this component."""
        return custom_id == self.id or custom_id.startswith(f"{self.id}:")

    async def exec(self, interaction: discord.Interaction) -> None:
        raise NotImplementedError(f"{type(self).__name__}.exec is not implemented")

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} id={self.id!r} enabled={self.enabled} "
            f"disable_after_use={self.disable_after_use}>"
        )


__all__ = ["ComponentBase"]
