"""Macro action data: what a macro will be created from before it exists."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Optional

from macroflow.parameter import MacroParameter

__all__ = [
    "MacroAction",
    "ConditionMacro",
    "LoopIteration",
    "UserMacro",
    "get_actions",
    "set_actions",
]


@functools.lru_cache(maxsize=None)
def _class_default_object(cls: type) -> Any:
    return cls()


@dataclass(eq=False)
class MacroAction:
    """Data describing a macro to create: its class, parameters, nested actions and custom data.

    Actions compare by identity, as each one is a distinct node of a macro tree.
    """

    macro_class: Optional[type] = None
    parameters: list[MacroParameter] = field(default_factory=list)
    actions: list["MacroAction"] = field(default_factory=list)
    custom_data: Any = None

    def default_macro(self) -> Any:
        """Return the shared default instance of this action's macro class."""
        if self.macro_class is None:
            raise ValueError("macro action has no macro class")
        return _class_default_object(self.macro_class)


@dataclass(eq=False)
class ConditionMacro(MacroAction):
    """A condition action for conditional macros, optionally inverted."""

    inverted: bool = False


@dataclass
class LoopIteration:
    """Custom data for loops limited to a number of iterations."""

    max_iterations: int = 2


@dataclass(eq=False)
class UserMacro(MacroAction):
    """A named, user-created macro."""

    name: str = ""


def get_actions(action: MacroAction) -> list[MacroAction]:
    """Return the actions contained in the given action."""
    return action.actions


def set_actions(action: MacroAction, actions) -> None:
    """Replace the contained actions of the given action."""
    action.actions = list(actions)