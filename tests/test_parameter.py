import pytest

from macroflow.parameter import (
    MacroParameter,
    MacroParamType,
    macro_param_type_to_string,
)


@pytest.mark.parametrize(
    "param_type, name",
    [
        (MacroParamType.BOOLEAN, "Boolean"),
        (MacroParamType.INTEGER, "Integer"),
        (MacroParamType.FLOAT, "Float"),
        (MacroParamType.STRING, "String"),
    ],
)
def test_type_names(param_type, name):
    assert macro_param_type_to_string(param_type) == name
    assert MacroParameter(param_type=param_type).type_as_string() == name


def test_unknown_type_name():
    assert macro_param_type_to_string(None) == "<unknown>"


def test_default_type_is_integer():
    assert MacroParameter().param_type is MacroParamType.INTEGER


@pytest.mark.parametrize("value", ["1", "True", "true", "YES", "On", "5", "-3"])
def test_as_bool_true(value):
    assert MacroParameter(value=value).as_bool() is True


@pytest.mark.parametrize("value", ["0", "False", "No", "off", "", "garbage"])
def test_as_bool_false(value):
    assert MacroParameter(value=value).as_bool() is False


@pytest.mark.parametrize(
    "value, expected",
    [("42", 42), ("  -7", -7), ("+15", 15), ("42abc", 42), ("abc", 0), ("", 0)],
)
def test_as_int(value, expected):
    assert MacroParameter(value=value).as_int() == expected


def test_as_int_clamps_to_32_bits():
    assert MacroParameter(value="99999999999").as_int() == 2**31 - 1
    assert MacroParameter(value="-99999999999").as_int() == -(2**31)


@pytest.mark.parametrize(
    "value, expected",
    [("1.0", 1.0), ("2.5", 2.5), (" -0.25", -0.25), ("3", 3.0), ("1.5s", 1.5), ("x", 0.0)],
)
def test_as_float(value, expected):
    assert MacroParameter(value=value).as_float() == expected


def test_as_float_exponent():
    assert MacroParameter(value="2e3").as_float() == 2000.0


def test_as_str_returns_raw_value():
    param = MacroParameter("Label", MacroParamType.STRING, "hello world")
    assert param.as_str() == "hello world"