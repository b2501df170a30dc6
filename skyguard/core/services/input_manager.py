"""
input_manager.py
----------------
Keyboard adapter that translates pygame events into game input.

Provides:
- Held movement signals written onto the shared InputState
- Discrete actions (fire, difficulty selection, restart, mute, quit)
- Release of held signals when the window loses focus
"""

import pygame

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.input_state import InputState


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "fire": [pygame.K_SPACE],
    "select_easy": [pygame.K_1, pygame.K_e],
    "select_medium": [pygame.K_2, pygame.K_m],
    "select_hard": [pygame.K_3, pygame.K_h],
    "restart": [pygame.K_r, pygame.K_RETURN],
    "toggle_mute": [pygame.K_TAB],
    "quit": [pygame.K_ESCAPE],
}

HELD_ACTIONS = ("move_left", "move_right")


class InputManager:
    """
    Maps key events onto actions.

    Usage:
        for event in pygame.event.get():
            action = input_manager.handle_event(event)
            if action == "fire":
                session.fire()
    """

    def __init__(self, input_state=None, key_bindings=None):
        """
        Args:
            input_state: InputState to write held signals onto
            key_bindings: Custom action -> keys dict (uses DEFAULT_KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.input_state = input_state or InputState()
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._init_lookup_table()

    def _init_lookup_table(self):
        """Build the key -> action table; the first binding wins on overlap."""
        self._key_to_action = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                if key in self._key_to_action:
                    DebugLogger.warn(
                        f"Key {key} bound to both '{self._key_to_action[key]}' and '{action}'",
                        category="input"
                    )
                    continue
                self._key_to_action[key] = action

    # ===========================================================
    # Queries
    # ===========================================================

    def action_for_key(self, key):
        return self._key_to_action.get(key)

    def keys_for_action(self, action) -> tuple:
        return tuple(self.key_bindings.get(action, ()))

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event):
        """
        Process one pygame event.

        Args:
            event: pygame.event.Event

        Returns:
            str or None: Discrete action triggered by the event
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.WINDOWFOCUSLOST:
            self.input_state.release_all()
            DebugLogger.trace("Focus lost, movement released", category="input")
            return None

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return None

        action = self._key_to_action.get(event.key)
        if action is None:
            return None

        pressed = event.type == pygame.KEYDOWN
        if action in HELD_ACTIONS:
            self.input_state.set_held(action, pressed)
            return None

        if not pressed:
            return None

        DebugLogger.trace(f"Action '{action}'", category="input")
        return action
