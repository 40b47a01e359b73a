"""Module for actions."""

from lente.actions.base import Action, ActionSequence, WaitForConditionAction
from lente.actions.registry import ActionRegistry

ActionRegistry.register("sequence")(ActionSequence)

__all__ = ["Action", "ActionRegistry", "ActionSequence", "WaitForConditionAction"]
