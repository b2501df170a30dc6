"""
conftest.py
-----------
Shared pytest configuration and fixtures for Skyguard tests.

Contains:
- Headless session fixtures on a virtual clock
- Collaborator mocks (audio, renderer)
- Entity factories and pytest markers
"""

import random
from unittest.mock import MagicMock

import pytest

from skyguard.audio.sound_manager import SoundManager
from skyguard.core.runtime.difficulty import DIFFICULTY_PRESETS
from skyguard.core.runtime.game_session import GameSession
from skyguard.core.runtime.scheduler import ManualScheduler
from skyguard.core.services.event_manager import EventManager
from skyguard.core.services.high_score_store import HighScoreStore
from skyguard.entities.enemies.enemy_straight import Enemy


# ===========================================================
# Core Fixtures
# ===========================================================

@pytest.fixture
def manual_scheduler():
    """Scheduler on a virtual clock starting at t=0."""
    return ManualScheduler()


@pytest.fixture
def mock_sound():
    """Mock for SoundManager; toggle_mute flips `muted` and reports the new state."""
    sound = MagicMock(spec=SoundManager)
    sound.muted = False

    def _toggle():
        sound.muted = not sound.muted
        return sound.muted

    sound.toggle_mute.side_effect = _toggle
    return sound


@pytest.fixture
def high_score_store(tmp_path):
    """HighScoreStore writing into a per-test temp directory."""
    return HighScoreStore(path=str(tmp_path / "highscore.json"))


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def mock_renderer():
    return MagicMock()


@pytest.fixture
def session(manual_scheduler, mock_sound, high_score_store, events, mock_renderer):
    """Idle session with seeded spawn positions and built-in difficulty presets."""
    return GameSession(
        scheduler=manual_scheduler,
        sound_manager=mock_sound,
        high_score_store=high_score_store,
        events=events,
        renderer=mock_renderer,
        rng=random.Random(1234),
        difficulty_table=dict(DIFFICULTY_PRESETS),
        viewport=(800, 600),
    )


@pytest.fixture
def running_session(session):
    """Session started on easy."""
    session.start("easy")
    return session


# ===========================================================
# Entity Factories
# ===========================================================

@pytest.fixture
def place_enemy():
    """Factory appending an enemy at an exact position to a session."""
    def _place(session, x, y, speed=2):
        enemy = Enemy(x=x, speed=speed, y=y)
        session.enemies.append(enemy)
        return enemy
    return _place


@pytest.fixture
def enemy_on_player(place_enemy):
    """Factory for an enemy that still overlaps the player after one tick of movement."""
    def _place(session, speed=2):
        player = session.player
        return place_enemy(session, player.x, player.y - speed, speed=speed)
    return _place


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag every test not explicitly marked integration as a unit test."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)
