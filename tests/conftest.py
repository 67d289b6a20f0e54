"""Shared pytest fixtures."""

import pytest

from griddle.core.cell import Cell
from griddle.core.color import Color
from griddle.display.recording import RecordingDisplay


@pytest.fixture
def red() -> Color:
    return Color(0xFF, 0x00, 0x00)


@pytest.fixture
def blue() -> Color:
    return Color(0x00, 0x00, 0xFF)


@pytest.fixture
def x_cell() -> Cell:
    return Cell.of('X')


@pytest.fixture
def recording() -> RecordingDisplay:
    """A recording display sized 80x24."""
    return RecordingDisplay()
