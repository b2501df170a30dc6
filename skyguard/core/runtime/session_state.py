"""
session_state.py
----------------
Defines the lifecycle states of a game session.
"""

from enum import Enum


class SessionState(Enum):
    """Session state machine states."""
    IDLE = "idle"               # Difficulty selection, nothing simulated
    RUNNING = "running"         # Tick loop and spawner active
    GAME_OVER = "game_over"     # Simulation halted, results shown
