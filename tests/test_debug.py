import logging

import pytest

from macroflow.debug import PrintSeverity, print_simple


@pytest.fixture
def captured(caplog):
    caplog.set_level(logging.DEBUG, logger="macroflow")
    return caplog


def test_message_is_prefixed(captured):
    result = print_simple("hello")
    assert result is None
    messages = [r.getMessage() for r in captured.records]
    assert messages == ["Macro System: hello"]


def test_default_severity_and_duration(captured):
    result = print_simple("x")
    assert result is None
    record = captured.records[0]
    assert record.levelno == logging.INFO
    assert record.duration == 5.0
    assert record.colour == (0, 255, 0)
    assert record.colour == PrintSeverity.MESSAGE.colour


@pytest.mark.parametrize(
    "severity, level, colour",
    [
        (PrintSeverity.MESSAGE, logging.INFO, (0, 255, 0)),
        (PrintSeverity.WARNING, logging.WARNING, (255, 255, 0)),
        (PrintSeverity.ERROR, logging.ERROR, (255, 0, 0)),
    ],
)
def test_severity_mapping(captured, severity, level, colour):
    result = print_simple("msg", severity, 10.0)
    assert result is None
    record = captured.records[0]
    assert record.levelno == level
    assert record.colour == colour
    assert record.duration == 10.0
    assert record.getMessage() == "Macro System: msg"


def test_severity_colour_property(captured):
    result = print_simple("boom", PrintSeverity.ERROR, 1.0)
    assert result is None
    record = captured.records[0]
    assert PrintSeverity.ERROR.colour == (255, 0, 0)
    assert record.colour == PrintSeverity.ERROR.colour