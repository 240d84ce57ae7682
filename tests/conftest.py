"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from kingside.core.codec import position_from_text
from kingside.core.position import Position

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def start() -> Position:
    return Position.initial()


# Both sides keep king and rooks home with empty squares between them.
CASTLING_TEXT = "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w 111111"


@pytest.fixture
def castling_position() -> Position:
    return position_from_text(CASTLING_TEXT)
