"""Global settings for the macro system: categories and theme colours."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Colour", "MacroCategory", "MacroSettings", "get_settings", "set_settings"]


@dataclass(frozen=True)
class Colour:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b, self.a):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")


@dataclass
class MacroCategory:
    """A named group of macro classes offered to the user."""

    friendly_name: str = ""
    macro_classes: list[type] = field(default_factory=list)


@dataclass
class MacroSettings:
    """Macro categories and theme colours."""

    categories: dict[str, MacroCategory] = field(default_factory=dict)
    normal_colour: Colour = Colour(255, 255, 255, 0)
    hover_colour: Colour = Colour(255, 255, 255, 25)


_current = MacroSettings()


def get_settings() -> MacroSettings:
    """Return the active settings."""
    return _current


def set_settings(settings: MacroSettings) -> None:
    """Replace the active settings."""
    global _current
    if not isinstance(settings, MacroSettings):
        raise TypeError("settings must be a MacroSettings instance")
    _current = settings