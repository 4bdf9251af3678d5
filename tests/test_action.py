import pytest

from macroflow.action import (
    ConditionMacro,
    LoopIteration,
    MacroAction,
    UserMacro,
    get_actions,
    set_actions,
)
from macroflow.parameter import MacroParameter, MacroParamType


class _DummyMacro:
    created = 0

    def __init__(self):
        type(self).created += 1


def test_default_macro_is_shared_instance():
    action = MacroAction(_DummyMacro)
    first = action.default_macro()
    second = MacroAction(_DummyMacro).default_macro()
    assert isinstance(first, _DummyMacro)
    assert first is second


def test_default_macro_without_class_raises():
    with pytest.raises(ValueError):
        MacroAction().default_macro()


def test_lists_are_independent():
    a, b = MacroAction(), MacroAction()
    a.actions.append(MacroAction())
    a.parameters.append(MacroParameter())
    assert b.actions == []
    assert b.parameters == []


def test_identity_equality():
    assert MacroAction() != MacroAction()
    action = MacroAction()
    assert [MacroAction(), action].index(action) == 1


def test_condition_macro_defaults():
    cond = ConditionMacro()
    assert cond.inverted is False
    assert isinstance(cond, MacroAction)


def test_condition_macro_fields():
    params = [MacroParameter("p", MacroParamType.FLOAT, "1.0")]
    cond = ConditionMacro(_DummyMacro, params, inverted=True)
    assert cond.inverted is True
    assert cond.macro_class is _DummyMacro
    assert cond.parameters is params


def test_loop_iteration_default():
    assert LoopIteration().max_iterations == 2
    assert LoopIteration(7).max_iterations == 7


def test_user_macro_name():
    macro = UserMacro(name="Jump")
    assert macro.name == "Jump"
    assert macro.actions == []


def test_get_and_set_actions():
    parent = MacroAction()
    children = [MacroAction(), MacroAction()]
    set_actions(parent, children)
    assert get_actions(parent) == children
    children.append(MacroAction())
    assert len(get_actions(parent)) == 2