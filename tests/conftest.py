"""
Pytest configuration for pythagoras tests.

Shared constants live in helpers.py so test modules can import them
directly; the fixtures below wrap the ones most tests need.
"""
import pytest

from pythagoras import config
from pythagoras.models import RightAngle

from helpers import RIGHT_ANGLE_345


@pytest.fixture
def right_angle_345() -> RightAngle:
    """The standard 3-4-5 right triangle."""
    return RIGHT_ANGLE_345


@pytest.fixture
def debug_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable console echo for log() during a test."""
    monkeypatch.setattr(config, 'DEBUG', True)
