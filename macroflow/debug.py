"""Debug output for the macro system."""

from __future__ import annotations

import logging
from enum import Enum

__all__ = ["PrintSeverity", "print_simple"]

_PREFIX = "Macro System: "
_logger = logging.getLogger("macroflow")


class PrintSeverity(Enum):
    """Severity of a debug message."""

    MESSAGE = "message"
    WARNING = "warning"
    ERROR = "error"

    @property
    def colour(self) -> tuple[int, int, int]:
        """RGB colour used to display messages of this severity."""
        return {
            PrintSeverity.MESSAGE: (0, 255, 0),
            PrintSeverity.WARNING: (255, 255, 0),
            PrintSeverity.ERROR: (255, 0, 0),
        }[self]

    @property
    def log_level(self) -> int:
        return {
            PrintSeverity.MESSAGE: logging.INFO,
            PrintSeverity.WARNING: logging.WARNING,
            PrintSeverity.ERROR: logging.ERROR,
        }[self]


def print_simple(
    message: str,
    severity: PrintSeverity = PrintSeverity.MESSAGE,
    duration: float = 5.0,
) -> None:
    """Emit a prefixed debug message with its display colour and duration."""
    _logger.log(
        severity.log_level,
        "%s%s",
        _PREFIX,
        message,
        extra={"colour": severity.colour, "duration": duration},
    )