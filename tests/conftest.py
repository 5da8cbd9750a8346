"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from legion import ClassRegistry, define_root
from legion.config import reset_settings


@pytest.fixture
def registry():
    """Fresh ClassRegistry with the default last-wins policy."""
    return ClassRegistry()


@pytest.fixture
def root(registry):
    """Root Type bound to the fresh registry, isolated from the default one."""
    return define_root(registry)


@pytest.fixture
def fresh_settings():
    """Drop cached settings before and after the test."""
    reset_settings()
    yield
    reset_settings()


class FakeGame:
    """Minimal binding context: allocates ids and carries a client_id."""

    def __init__(self, client_id):
        self.client_id = client_id
        self.allocated = 0

    def _get_object_id(self):
        self.allocated += 1
        return f"{self.client_id}-{self.allocated}"


@pytest.fixture
def fake_game_cls():
    return FakeGame
