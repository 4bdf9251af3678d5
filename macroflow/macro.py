"""The base macro: an executable object built from a macro action."""

from __future__ import annotations

import copy
import heapq
import itertools
from typing import Any, Callable, Optional

from macroflow.action import MacroAction
from macroflow.debug import PrintSeverity, print_simple
from macroflow.parameter import MacroParameter

__all__ = ["TimerManager", "Macro", "FinishedListener"]

FinishedListener = Callable[["Macro", bool], None]


class TimerManager:
    """A manually advanced clock that fires one-shot callbacks when they fall due."""

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[tuple[float, int]] = []
        self._callbacks: dict[int, Callable[[], Any]] = {}
        self._handles = itertools.count(1)

    @property
    def now(self) -> float:
        """Seconds elapsed since this manager was created."""
        return self._now

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, handle: object) -> bool:
        return handle in self._callbacks

    def set_timer(self, delay: float, callback: Callable[[], Any]) -> int:
        """Schedule ``callback`` to run ``delay`` seconds from now and return its handle."""
        if delay < 0:
            raise ValueError(f"timer delay must not be negative: {delay}")
        handle = next(self._handles)
        self._callbacks[handle] = callback
        heapq.heappush(self._queue, (self._now + delay, handle))
        return handle

    def cancel(self, handle: int) -> bool:
        """Cancel a pending timer; return whether it was still pending."""
        return self._callbacks.pop(handle, None) is not None

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every timer that falls due on the way, in order."""
        if seconds < 0:
            raise ValueError(f"cannot advance by a negative time: {seconds}")
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, handle = heapq.heappop(self._queue)
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            self._now = due
            callback()
        self._now = target


class Macro:
    """Base macro. By default a leaf that finishes once its (absent) actions have run.

    Subclasses customise behaviour by overriding ``execute_custom_parameters``,
    ``execute_actions``, ``macro_finished`` and ``is_running``.
    """

    def __init__(self, outer: Any = None, timer_manager: Optional[TimerManager] = None) -> None:
        self.outer = outer
        self.name = ""
        self.description = ""
        self.icon: Any = None
        self.default_parameters: list[MacroParameter] = []
        self.allows_actions = False
        self.auto_execute_actions = True
        self.macro_info: Optional[MacroAction] = None
        self.next_action_index = 0
        self.active_actions: list[Macro] = []
        self._running = False
        self._timer_manager = timer_manager
        self._finished_listeners: list[FinishedListener] = []

    @property
    def timer_manager(self) -> Optional[TimerManager]:
        """This macro's timer manager, or the one of its outer object."""
        if self._timer_manager is not None:
            return self._timer_manager
        return getattr(self.outer, "timer_manager", None)

    @property
    def parameters(self) -> Optional[list[MacroParameter]]:
        """Parameters of the action info, or None when there is no info."""
        return None if self.macro_info is None else self.macro_info.parameters

    @property
    def actions(self) -> Optional[list[MacroAction]]:
        """Nested actions of the action info, or None when there is no info."""
        return None if self.macro_info is None else self.macro_info.actions

    def add_finished_listener(self, callback: FinishedListener) -> None:
        """Register ``callback(macro, success)`` to run when this macro finishes."""
        if callback not in self._finished_listeners:
            self._finished_listeners.append(callback)

    def remove_finished_listener(self, callback: FinishedListener) -> None:
        """Unregister a finished listener; unknown listeners are ignored."""
        if callback in self._finished_listeners:
            self._finished_listeners.remove(callback)

    def execute(self) -> None:
        """Run this macro with its info's parameters, then its actions if set to do so."""
        self._running = True
        parameters = self.parameters
        self.execute_custom_parameters(parameters if parameters is not None else [])
        if self.auto_execute_actions:
            self.execute_actions()

    def execute_custom_parameters(self, parameters: list[MacroParameter]) -> None:
        """Run this macro itself (not its actions) with the given parameters."""

    def execute_actions(self) -> None:
        """Start running the nested actions in sequence from ``next_action_index``."""
        actions = self.actions
        if actions is None:
            print_simple(
                "Macro.execute_actions - actions are unavailable!",
                PrintSeverity.WARNING,
            )
            return
        if not actions:
            print_simple(
                "Macro.execute_actions - actions are empty, skipping!",
                PrintSeverity.MESSAGE,
            )
            self.finish_execute()
            return
        if not 0 <= self.next_action_index < len(actions):
            print_simple(
                f"Macro.execute_actions - {self.next_action_index} is an invalid action index!",
                PrintSeverity.WARNING,
            )
            return
        self.execute_action(actions[self.next_action_index])

    def macro_finished(self) -> None:
        """Called once all actions have run; resets state and finishes."""
        self.next_action_index = 0
        self.active_actions.clear()
        self.finish_execute()

    def is_running(self) -> bool:
        """True while executing with actions still active."""
        return self._running and bool(self.active_actions)

    def set_macro_info(self, info: MacroAction) -> None:
        """Use ``info`` (shared, not copied) as this macro's action data."""
        self.macro_info = info

    def copy_macro_info(self) -> Optional[MacroAction]:
        """Return an independent copy of the action data, or None when there is none."""
        return copy.deepcopy(self.macro_info) if self.macro_info is not None else None

    def has_icon(self) -> bool:
        return self.icon is not None

    def execute_action(self, action: MacroAction) -> None:
        """Create a child macro from ``action`` and run it as one of this macro's actions."""
        if action.macro_class is None:
            raise ValueError("macro action has no macro class")
        macro = action.macro_class(outer=self)
        macro.add_finished_listener(self._action_finished)
        macro.set_macro_info(action)
        macro.execute()
        self.active_actions.append(macro)

    def execute_action_by_index(self, index: int) -> bool:
        """Run the nested action at ``index``; return False if there is none."""
        actions = self.actions
        if actions is None or not 0 <= index < len(actions):
            return False
        self.execute_action(actions[index])
        return True

    def execute_next_action(self) -> bool:
        return self.execute_action_by_index(self.next_action_index)

    def finish_execute(self, success: bool = True) -> None:
        """Mark this macro finished and notify listeners."""
        self._running = False
        print_simple(f"Finished macro: {self.name}")
        for listener in list(self._finished_listeners):
            listener(self, success)

    def _action_finished(self, macro: "Macro", success: bool) -> None:
        self.active_actions = [active for active in self.active_actions if active is not macro]
        self.next_action_index += 1
        if not self.execute_next_action():
            self.macro_finished()