"""Action system for reusable, chainable camera actions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from collections.abc import Callable

    from lente.camera import Camera

logger = logging.getLogger(__name__)


class Action(ABC):
    """Base class for all actions."""

    @abstractmethod
    def execute(self, camera: Camera) -> bool:
        """Execute the action.

        Args:
            camera: Camera the action drives.

        Returns:
            True if action is complete, False if still executing.
        """

    @abstractmethod
    def reset(self) -> None:
        """Reset action state for reuse."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create the action from a dictionary."""
        msg = f"{cls.__name__} cannot be created from a dictionary"
        raise NotImplementedError(msg)


class WaitForConditionAction(Action):
    """Wait until a condition on the camera is met.

    execute() keeps returning False until the condition returns True, which
    lets an ActionSequence hold later actions back (for example until a
    shake has died down).

    Example subclass:
        class WaitForZoomAction(WaitForConditionAction):
            def __init__(self):
                super().__init__(lambda cam: cam.get_zoom() == 1, "Zoom reset")
    """

    def __init__(self, condition: Callable[[Camera], bool], description: str = "") -> None:
        """Initialize wait action.

        Args:
            condition: Function that returns True when condition is met.
            description: Description of what we're waiting for (for debugging).
        """
        self.condition = condition
        self.description = description

    def execute(self, camera: Camera) -> bool:
        """Check if condition is met."""
        result = self.condition(camera)
        if result:
            logger.debug("WaitForConditionAction: Condition met - %s", self.description)
        return result

    def reset(self) -> None:
        """Reset does nothing for wait actions."""


class ActionSequence(Action):
    """Execute multiple actions in sequence.

    Each call executes the current action and moves on once it reports
    completion, so a sequence spans as many frames as its waiting actions
    need.

    Example usage:
        ActionSequence([
            FlashAction(0.2),
            ShakeAction(0.5, intensity=8),
            WaitForShakeAction(),
            ZoomAction(1.5),
        ])
    """

    def __init__(self, actions: list[Action]) -> None:
        """Initialize action sequence.

        Args:
            actions: List of actions to execute in order.
        """
        self.actions = actions
        self.current_index = 0

    def execute(self, camera: Camera) -> bool:
        """Execute current action and advance if complete."""
        if self.current_index >= len(self.actions):
            return True

        current_action = self.actions[self.current_index]
        if current_action.execute(camera):
            self.current_index += 1

        return self.current_index >= len(self.actions)

    def reset(self) -> None:
        """Reset the sequence and all actions."""
        self.current_index = 0
        for action in self.actions:
            action.reset()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a sequence from {"actions": [...]}, building each entry."""
        from lente.actions.registry import ActionRegistry  # noqa: PLC0415

        return cls([ActionRegistry.create(item) for item in data.get("actions", [])])
