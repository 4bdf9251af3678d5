"""Storage and execution of user-created macros, with handles to refer to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from macroflow.action import MacroAction, UserMacro
from macroflow.debug import print_simple
from macroflow.macro import Macro, TimerManager

__all__ = ["MacroSubsystem", "UserMacroHandle"]


class MacroSubsystem:
    """Holds the user macros, runs them and tracks which are active.

    Indices refer to positions in ``user_macros``. Macros executed here use this
    subsystem's timer manager for anything that waits.
    """

    def __init__(self, timer_manager: Optional[TimerManager] = None) -> None:
        self.timer_manager = timer_manager if timer_manager is not None else TimerManager()
        self._user_macros: list[UserMacro] = []
        self._active_user_macros: list[Macro] = []

    @property
    def user_macros(self) -> list[UserMacro]:
        """The stored user macros, in index order."""
        return self._user_macros

    @property
    def active_user_macros(self) -> tuple[Macro, ...]:
        """The macro objects currently running for user macros."""
        return tuple(self._active_user_macros)

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._user_macros)

    def add_user_macro(self, name: str, actions: Iterable[MacroAction] = ()) -> "UserMacroHandle":
        """Create a user macro with the given name and actions and return a handle to it."""
        self._user_macros.append(
            UserMacro(macro_class=Macro, parameters=[], actions=list(actions), name=name)
        )
        return UserMacroHandle(len(self._user_macros) - 1, self)

    def add_action_to_user_macro(self, index: int, action: MacroAction) -> bool:
        """Append an action to a user macro; False if the index is invalid."""
        if not self._is_valid_index(index):
            return False
        self._user_macros[index].actions.append(action)
        return True

    def set_user_macro_actions(self, index: int, actions: Iterable[MacroAction]) -> bool:
        """Replace a user macro's actions; False if the index is invalid."""
        if not self._is_valid_index(index):
            return False
        self._user_macros[index].actions = list(actions)
        return True

    def remove_user_macro(self, index: int) -> bool:
        """Remove a user macro; later macros shift down by one. False if the index is invalid."""
        if not self._is_valid_index(index):
            return False
        del self._user_macros[index]
        return True

    def execute_user_macro(self, index: int) -> None:
        """Start running the user macro at ``index``; invalid indices are ignored."""
        if not self._is_valid_index(index):
            return
        info = self._user_macros[index]
        print_simple(f"Executing user macro: {info.name}")
        macro_class = info.macro_class if info.macro_class is not None else Macro
        macro = macro_class(outer=self)
        macro.add_finished_listener(self._user_macro_finished)
        macro.set_macro_info(info)
        macro.execute()
        self._active_user_macros.append(macro)

    def set_user_macro_name(self, index: int, name: str) -> None:
        """Rename the user macro at ``index``; invalid indices are ignored."""
        if not self._is_valid_index(index):
            return
        self._user_macros[index].name = name

    def last_user_macro_index(self) -> int:
        """Index of the last user macro, or -1 when there are none."""
        return len(self._user_macros) - 1

    def get_user_macro(self, index: int) -> Optional[UserMacro]:
        """The user macro at ``index``, or None if the index is invalid."""
        if not self._is_valid_index(index):
            return None
        return self._user_macros[index]

    def get_user_macro_by_name(self, name: str) -> Optional[UserMacro]:
        """The first user macro with the given name, or None."""
        return next((macro for macro in self._user_macros if macro.name == name), None)

    def get_active_user_macro(self, index: int) -> Optional[Macro]:
        """The running macro object for the user macro at ``index``, or None if not running."""
        if not self.is_user_macro_running(index):
            return None
        info = self.get_user_macro(index)
        return next(
            (macro for macro in self._active_user_macros if macro.macro_info is info), None
        )

    def does_user_macro_with_name_exist(self, name: str) -> bool:
        return self.get_user_macro_by_name(name) is not None

    def is_user_macro_running(self, index: int) -> bool:
        """Whether the user macro at ``index`` is currently executing."""
        if not self._is_valid_index(index):
            return False
        info = self._user_macros[index]
        return any(macro.macro_info is info for macro in self._active_user_macros)

    def is_any_user_macro_running(self) -> bool:
        return bool(self._active_user_macros)

    def _user_macro_finished(self, macro: Macro, success: bool) -> None:
        self._active_user_macros = [
            active for active in self._active_user_macros if active is not macro
        ]
        name = macro.macro_info.name if isinstance(macro.macro_info, UserMacro) else ""
        print_simple(f"Finished executing user macro: {name}")


@dataclass
class UserMacroHandle:
    """An index into a subsystem's user macros, together with that subsystem."""

    index: int = -1
    macro_subsystem: Optional[MacroSubsystem] = field(default=None, compare=False)

    def is_running(self) -> bool:
        if self.macro_subsystem is None:
            return False
        return self.macro_subsystem.is_user_macro_running(self.index)

    def get_macro_info(self) -> Optional[UserMacro]:
        """The referenced user macro data, or None."""
        if self.macro_subsystem is None:
            return None
        return self.macro_subsystem.get_user_macro(self.index)

    def get_macro(self) -> Optional[Macro]:
        """The running macro object for the referenced user macro, or None."""
        if self.macro_subsystem is None:
            return None
        return self.macro_subsystem.get_active_user_macro(self.index)

    def is_valid(self) -> bool:
        """Whether the handle has a subsystem and its index refers to a user macro."""
        return (
            self.macro_subsystem is not None
            and 0 <= self.index < len(self.macro_subsystem.user_macros)
        )

    def execute(self) -> None:
        if self.macro_subsystem is None:
            return
        self.macro_subsystem.execute_user_macro(self.index)

    def remove_and_invalidate(self) -> None:
        """Remove the referenced user macro and clear this handle."""
        if self.macro_subsystem is None:
            return
        self.macro_subsystem.remove_user_macro(self.index)
        self.index = -1
        self.macro_subsystem = None

    def rename(self, name: str) -> None:
        if self.macro_subsystem is None:
            return
        self.macro_subsystem.set_user_macro_name(self.index, name)