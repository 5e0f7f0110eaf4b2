"""
conftest.py
-----------
Shared pytest configuration and fixtures for idlefloor tests.

Contains:
- Logger silencing for every test
- GameState / MessageManager fixtures
- A tick helper mirroring the host's per-tick call order
"""

import pytest

from idlefloor.core.debug.debug_logger import LoggerConfig
from idlefloor.core.runtime.game_state import GameState
from idlefloor.systems.combat.fight_data import Living
from idlefloor.systems.messages.message_manager import MessageManager


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output free of game logs."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture
def state():
    """Fresh state with built-in balance (player 1/0/10, timers 2.0/0.5/1.0)."""
    return GameState()


@pytest.fixture
def messages():
    return MessageManager()


@pytest.fixture
def fight_state(state):
    """State standing on floor 1 (the highest unlocked floor) facing no enemy."""
    state.fight.floor = 1
    state.fight.max_floor = 1
    return state


@pytest.fixture
def make_enemy():
    """Factory for an enemy with explicit stats."""

    def factory(attack=1.0, defense=0.0, health=3.0, max_health=None):
        return Living(
            attack=attack,
            defense=defense,
            health=health,
            max_health=health if max_health is None else max_health,
        )

    return factory


@pytest.fixture
def tick(messages):
    """Deliver one key to a selected feature and update it, like the host does."""

    def run(feature, state, key=None, dt=0.1):
        state.key = key
        feature.update(dt, state, messages)

    return run


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "scenario: end-to-end combat scenarios")
    config.addinivalue_line("markers", "property: invariants checked over many ticks")
