"""Registry for camera actions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from lente.actions.base import Action

logger = logging.getLogger(__name__)


class ActionRegistry:
    """Central registry mapping action type names to action classes.

    Actions register themselves with the @ActionRegistry.register decorator so
    that they can be built from plain dictionaries (for example script JSON).
    """

    _actions: ClassVar[dict[str, type[Action]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[Action]], type[Action]]:
        """Register an action class under a type name.

        Use as a decorator:
            @ActionRegistry.register("flash")
            class FlashAction(Action):
                ...

        Args:
            name: Value of the "type" key that selects this action.

        Returns:
            Decorator returning the class unchanged.
        """
        if not name:
            msg = "Action type name must not be empty"
            raise ValueError(msg)

        def decorator(action_class: type[Action]) -> type[Action]:
            if name in cls._actions:
                logger.warning("Re-registering action: %s", name)
            cls._actions[name] = action_class
            logger.debug("Registered action: %s", name)
            return action_class

        return decorator

    @classmethod
    def get(cls, name: str) -> type[Action] | None:
        """Get a registered action class by type name."""
        return cls._actions.get(name)

    @classmethod
    def get_all(cls) -> dict[str, type[Action]]:
        """Get all registered action classes."""
        return cls._actions.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if an action type is registered."""
        return name in cls._actions

    @classmethod
    def create(cls, data: dict[str, Any]) -> Action:
        """Build an action from a dictionary with a "type" key.

        Raises:
            ValueError: If the type is missing or not registered.
        """
        name = data.get("type")
        action_class = cls._actions.get(name) if name else None
        if action_class is None:
            msg = f"Unknown action type: {name!r}"
            raise ValueError(msg)
        return action_class.from_dict(data)
