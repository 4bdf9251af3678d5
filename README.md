# macroflow

macroflow lets a game or a script build user macros out of a small set of
building blocks and then run them. It is a library. It has no command-line
entry point.

The blocks in `macroflow.builtin` are:

- `ConditionalMacro` ("If") runs its actions only when its condition action
  finishes successfully. The condition can be inverted.
- `WhileLoopMacro` ("While") runs its condition again after each pass through its
  actions. It keeps going for as long as the condition succeeds.
- `ForLoopMacro` ("For") runs its actions `max_iterations` times. It counts
  iterations from 1.
- `DelayMacro` ("Delay") waits for the number of seconds in its first parameter
  and then finishes. The default parameter is `"1.0"`.

## Install

```
pip install macroflow
```

To run the tests, install the `test` extra and then run pytest:

```
pip install "macroflow[test]"
pytest
```

## Concepts

- **`MacroParameter`** (`macroflow.parameter`) holds a friendly name, a
  `MacroParamType` and a value stored as a string. You read the value with the
  following methods:
  - `as_int()` parses the leading integer and clamps it to the 32-bit range. It
    returns 0 when there is none.
  - `as_float()` parses the leading number and returns 0.0 when there is none.
  - `as_bool()` is true for "true", "yes", "on" or a non-zero integer, and false
    otherwise.
  - `as_str()` returns the value unchanged.

  `macro_param_type_to_string()` gives the display name of a type, such as
  `"Float"`.
- **`MacroAction`** (`macroflow.action`) describes a macro before it runs. It
  holds the macro class, the parameters, the nested `actions` and optional
  `custom_data`. The custom data is a `ConditionMacro` for the conditional and
  while macros, and a `LoopIteration` for the for loop. `UserMacro` is a
  top-level action with a `name`. `get_actions()` and `set_actions()` read and
  replace the nested actions.
- **`Macro`** (`macroflow.macro`) is a running instance created from an action.
  When it finishes, it calls each listener added with
  `add_finished_listener(callback)` as `callback(macro, success)`.
- **`TimerManager`** is a clock that you move forward by hand with
  `advance(seconds)`. As it passes each one-shot timer set with
  `set_timer(delay, callback)`, it fires that timer, in order. `DelayMacro` uses
  the timer manager of its nearest outer object that has one.
- **`MacroSubsystem`** (`macroflow.subsystem`) stores user macros by index, runs
  them and tracks which ones are active. `add_user_macro()` returns a
  `UserMacroHandle`. With a handle you can `execute()`, `rename()`, check
  `is_running()` or `is_valid()`, and `remove_and_invalidate()`.

## Example

```python
from macroflow.action import LoopIteration, MacroAction
from macroflow.builtin import DelayMacro, ForLoopMacro
from macroflow.parameter import MacroParameter, MacroParamType
from macroflow.subsystem import MacroSubsystem

subsystem = MacroSubsystem()

delay = MacroAction(
    DelayMacro,
    [MacroParameter("Duration (seconds)", MacroParamType.FLOAT, "0.5")],
)
loop = MacroAction(ForLoopMacro, [], [delay], LoopIteration(3))

handle = subsystem.add_user_macro("Wait a bit", [loop])
handle.execute()
print(handle.is_running())          # True

subsystem.timer_manager.advance(0.5)  # the first delay finishes
subsystem.timer_manager.advance(1.0)  # the other two delays finish
print(handle.is_running())          # False

handle.rename("Wait longer")
handle.remove_and_invalidate()
print(handle.is_valid())            # False
```

Some behaviour to be aware of:

- A delay of zero seconds or less sets no timer, so that delay never finishes.
- Removing a user macro shifts the later ones down by one index. Handles to
  those later macros then point at different entries.

## Settings

`macroflow.settings.get_settings()` returns the active `MacroSettings`. It holds
the macro `categories`, each a `MacroCategory` with a friendly name and a list of
macro classes, and the theme colours `normal_colour` and `hover_colour`. Each
colour is a `Colour` with RGBA components in the range 0 to 255.
`set_settings()` replaces the active settings. It raises `TypeError` for
anything that is not a `MacroSettings`.

## Debug output

`macroflow.debug.print_simple(message, severity, duration)` logs the message
through the `macroflow` logger with the prefix "Macro System: ". The level
follows the `PrintSeverity`: info for messages, warning for warnings and error
for errors. The record also carries the severity's RGB colour and the display
duration as the extras `colour` and `duration`.

## What it does not do

macroflow has no editor, window or other user interface for building macros.
The categories and colours in the settings are only data for such an editor.
It does not save user macros anywhere: they exist only in the
`MacroSubsystem` that holds them. Time moves only when you call
`TimerManager.advance`.