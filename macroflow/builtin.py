"""Built-in macros: conditionals, loops and delays."""

from __future__ import annotations

from typing import Any, Optional

from macroflow.action import ConditionMacro, LoopIteration
from macroflow.debug import print_simple
from macroflow.macro import Macro, TimerManager
from macroflow.parameter import MacroParameter, MacroParamType

__all__ = ["ConditionalMacro", "ForLoopMacro", "WhileLoopMacro", "DelayMacro"]


class ConditionalMacro(Macro):
    """Runs its actions only if its condition action finishes successfully."""

    def __init__(self, outer: Any = None, timer_manager: Optional[TimerManager] = None) -> None:
        super().__init__(outer, timer_manager)
        self.name = "If"
        self.description = (
            "Executes its containing actions if the condition action finish successfully"
        )
        self.allows_actions = True
        self.auto_execute_actions = False
        self.active_condition: Optional[Macro] = None

    def execute_custom_parameters(self, parameters: list[MacroParameter]) -> None:
        super().execute_custom_parameters(parameters)
        condition = self.condition_action()
        if condition is None or condition.macro_class is None:
            return
        self._execute_condition_action()

    def is_running(self) -> bool:
        return super().is_running() or self.active_condition is not None

    def condition_action(self) -> Optional[ConditionMacro]:
        """The condition stored in the custom data, or None if there is none."""
        if self.macro_info is None:
            return None
        data = self.macro_info.custom_data
        return data if isinstance(data, ConditionMacro) else None

    def _execute_condition_action(self) -> None:
        condition = self.condition_action()
        if condition is None or condition.macro_class is None:
            raise RuntimeError("conditional macro has no condition action")
        self.active_condition = condition.macro_class(outer=self)
        self.active_condition.add_finished_listener(self._condition_action_finished)
        self.active_condition.set_macro_info(condition)
        self.active_condition.execute()

    def _condition_action_finished(self, macro: Macro, success: bool) -> None:
        condition = self.condition_action()
        if condition is None:
            raise RuntimeError("conditional macro lost its condition action")
        succeeded = bool(success) != bool(condition.inverted)
        print_simple(f"Conditional {'succeeded' if succeeded else 'failed'}")
        if succeeded:
            self.active_condition = None
            self.next_action_index = 0
            self.execute_actions()
            return
        self.finish_execute(False)


class ForLoopMacro(Macro):
    """Runs its actions a set number of times; iterations are counted from 1."""

    def __init__(self, outer: Any = None, timer_manager: Optional[TimerManager] = None) -> None:
        super().__init__(outer, timer_manager)
        self.name = "For"
        self.description = "Executes its actions a set number of times"
        self.allows_actions = True
        self.auto_execute_actions = False
        self.current_iteration = 1

    def execute_custom_parameters(self, parameters: list[MacroParameter]) -> None:
        super().execute_custom_parameters(parameters)
        if not self.can_iterate():
            return
        self.execute_actions()

    def macro_finished(self) -> None:
        print_simple(f"Finished for loop iteration: {self.current_iteration}")
        self.current_iteration += 1
        if not self.can_iterate():
            print_simple("Finished for loop")
            self.current_iteration = 0
            super().macro_finished()
            return
        self.next_action_index = 0
        self.execute_actions()

    def can_iterate(self) -> bool:
        """Whether the current iteration is within the configured maximum."""
        maximum = self.max_iterations()
        return maximum is not None and self.current_iteration <= maximum

    def _loop_iteration(self) -> Optional[LoopIteration]:
        if self.macro_info is None:
            return None
        data = self.macro_info.custom_data
        return data if isinstance(data, LoopIteration) else None

    def max_iterations(self) -> Optional[int]:
        """The configured maximum iteration count, or None without loop data."""
        loop = self._loop_iteration()
        return None if loop is None else loop.max_iterations


class WhileLoopMacro(ConditionalMacro):
    """Runs its actions repeatedly for as long as its condition succeeds."""

    def __init__(self, outer: Any = None, timer_manager: Optional[TimerManager] = None) -> None:
        super().__init__(outer, timer_manager)
        self.name = "While"
        self.description = (
            "Continually executes its containing actions as long as the condition action "
            "finishes successfully"
        )

    def macro_finished(self) -> None:
        self._execute_condition_action()


class DelayMacro(Macro):
    """Waits a number of seconds, given by its first parameter, before finishing."""

    def __init__(self, outer: Any = None, timer_manager: Optional[TimerManager] = None) -> None:
        super().__init__(outer, timer_manager)
        self.name = "Delay"
        self.description = "Delays execution of the macro for a specified number of seconds"
        self.default_parameters.append(
            MacroParameter("Duration (seconds)", MacroParamType.FLOAT, "1.0")
        )
        self._delay_handle: Optional[int] = None

    def execute_custom_parameters(self, parameters: list[MacroParameter]) -> None:
        super().execute_custom_parameters(parameters)
        if not parameters:
            return
        duration = parameters[0].as_float()
        print_simple(f"Delay for: {duration!r} second(s)")
        manager = self.timer_manager
        if manager is None:
            raise RuntimeError("delay macro has no timer manager")
        if self._delay_handle is not None:
            manager.cancel(self._delay_handle)
            self._delay_handle = None
        if duration <= 0:
            return
        self._delay_handle = manager.set_timer(duration, self._delay_finished)

    def _delay_finished(self) -> None:
        self._delay_handle = None
        print_simple("Delay finished")
        self.finish_execute()