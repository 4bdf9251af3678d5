"""Typed macro parameters whose values are stored as strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = ["MacroParamType", "MacroParameter", "macro_param_type_to_string"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_TRUE_WORDS = frozenset({"true", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "no", "off"})


class MacroParamType(Enum):
    """The value types a macro parameter can hold."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


_TYPE_NAMES = {
    MacroParamType.BOOLEAN: "Boolean",
    MacroParamType.INTEGER: "Integer",
    MacroParamType.FLOAT: "Float",
    MacroParamType.STRING: "String",
}


def macro_param_type_to_string(param_type) -> str:
    """Return the user-facing name of a parameter type, or "<unknown>"."""
    return _TYPE_NAMES.get(param_type, "<unknown>")


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


@dataclass
class MacroParameter:
    """A single macro parameter: a friendly name, a type and a literal string value."""

    friendly_name: str = ""
    param_type: MacroParamType = MacroParamType.INTEGER
    value: str = ""

    def as_bool(self) -> bool:
        """True for "true", "yes", "on" or a non-zero integer; false otherwise."""
        lowered = self.value.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        return _parse_int(self.value) != 0

    def as_int(self) -> int:
        """Parse the leading integer of the value; 0 if there is none."""
        return _parse_int(self.value)

    def as_float(self) -> float:
        """Parse the leading number of the value; 0.0 if there is none."""
        return _parse_float(self.value)

    def as_str(self) -> str:
        """Return the raw value."""
        return self.value

    def type_as_string(self) -> str:
        """Return the user-facing name of this parameter's type."""
        return macro_param_type_to_string(self.param_type)