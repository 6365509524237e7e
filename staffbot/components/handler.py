"""
StaffBot - Component Handler
============================

Routes component and modal interactions to registered components.

DESIGN:
    Components are registered explicitly (no filesystem scanning).
    An interaction is dispatched to the component whose id matches
    the interaction's custom_id. Disabled components are skipped.
    Exceptions raised by exec() propagate to the caller.
"""

from typing import Dict, Iterator, Optional

import discord

from staffbot.core.logger import logger
from staffbot.components.base import ComponentBase


ROUTED_INTERACTION_TYPES = (
    discord.InteractionType.component,
    discord.InteractionType.modal_submit,
)


class ComponentHandler:
    """Registry and dispatcher for ComponentBase instances."""

    def __init__(self) -> None:
        self._components: Dict[str, ComponentBase] = {}

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[ComponentBase]:
        return iter(self._components.values())

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, component: ComponentBase) -> ComponentBase:
        """
        Register a component.

        Raises:
            ValueError: If a component with the same id is registered.
        """
        if component.id in self._components:
            raise ValueError(f"Component '{component.id}' is already registered")
        self._components[component.id] = component
        logger.debug(f"Component Registered: {component.id}")
        return component

    def remove(self, component_id: str) -> Optional[ComponentBase]:
        """Unregister a component by id, returning it if it existed."""
        return self._components.pop(component_id, None)

    def get(self, component_id: str) -> Optional[ComponentBase]:
        return self._components.get(component_id)

    def find(self, custom_id: str) -> Optional[ComponentBase]:
        """Find the component that handles a custom_id."""
        for component in self._components.values():
            if component.matches(custom_id):
                return component
        return None

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def dispatch(self, interaction: discord.Interaction) -> bool:
        """
        Run the component matching an interaction.

        Returns:
            True if a component ran, False if the interaction was ignored.
        """
        if interaction.type not in ROUTED_INTERACTION_TYPES:
            return False

        custom_id = (interaction.data or {}).get("custom_id")
        if not custom_id:
            return False

        component = self.find(custom_id)
        if component is None:
            return False

        if not component.enabled:
            logger.debug(f"Component Disabled, Skipping: {component.id}")
            return False

        await component.exec(interaction)

        if component.disable_after_use:
            component.enabled = False
            logger.tree("Component Disabled After Use", [
                ("Component", component.id),
                ("User", f"{interaction.user} ({interaction.user.id})"),
            ], emoji="🔒")

        return True


__all__ = ["ComponentHandler", "ROUTED_INTERACTION_TYPES"]
