"""Composable user macros: parameters, actions, conditionals, loops, delays and a subsystem to run them."""

__version__ = "0.1.0"
__all__ = ["__version__"]