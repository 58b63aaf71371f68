"""Shared test fixtures."""

import logging

import pytest

from signalbus.core.registry import SignalRegistry
from signalbus.core.signals import registry as global_registry


@pytest.fixture
def bus():
    return SignalRegistry()


@pytest.fixture(autouse=True)
def _reset_global_registry():
    """Keep the process-wide registry empty between tests."""
    global_registry.clear()
    yield
    global_registry.clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a logging test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
